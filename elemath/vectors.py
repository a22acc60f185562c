# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations on flat float buffers.

Both operands of a binary operation share a single length `n`. When `n`
is omitted it is taken from the first operand and the second must match.
"""

from typing import Optional, Tuple

import numpy as np

from .errors import DimensionMismatchError
from .utils import as_buffer, check_dim, output_buffer


def _operands(a, b, n: Optional[int]) -> Tuple[np.ndarray, np.ndarray, int]:
    if n is None:
        u = as_buffer(a, "a")
        v = as_buffer(b, "b")
        if u.size != v.size:
            raise DimensionMismatchError(
                f"vectors differ in length: {u.size} != {v.size}"
            )
        return u, v, u.size
    n = check_dim(n, "n")
    return as_buffer(a, "a", n), as_buffer(b, "b", n), n


def dot(a, b, n: Optional[int] = None) -> float:
    """
    Scalar (dot) product sum(a[i] * b[i]).

    Accumulates left to right; an empty product is 0.0.
    """
    u, v, n = _operands(a, b, n)
    total = 0.0
    for i in range(n):
        total += float(u[i]) * float(v[i])
    return total


def add(a, b, n: Optional[int] = None, out: Optional[np.ndarray] = None):
    """Element-wise a + b. `out` may alias `a` or `b`."""
    u, v, n = _operands(a, b, n)
    result = output_buffer(out, n)
    np.add(u, v, out=result)
    return result


def sub(a, b, n: Optional[int] = None, out: Optional[np.ndarray] = None):
    """Element-wise a - b. `out` may alias `a` or `b`."""
    u, v, n = _operands(a, b, n)
    result = output_buffer(out, n)
    np.subtract(u, v, out=result)
    return result


def scalar_mul(
    a, scalar: float, n: Optional[int] = None, out: Optional[np.ndarray] = None
):
    """Multiply every element of a by `scalar`."""
    if n is None:
        u = as_buffer(a, "a")
        n = u.size
    else:
        n = check_dim(n, "n")
        u = as_buffer(a, "a", n)
    result = output_buffer(out, n)
    np.multiply(u, float(scalar), out=result)
    return result
