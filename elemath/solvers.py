# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Equation solvers: square linear systems and real quadratics.

`solve_linear_system` runs Gaussian elimination with partial pivoting and
raises SingularMatrixError when no pivot can be found. It does not fall
back to returning the right-hand side.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np

from .elimination import gaussian_solve
from .errors import ComplexRootsError, DegenerateEquationError, DimensionMismatchError
from .utils import QUADRATIC_EPS, as_buffer, check_dim, output_buffer

logger = logging.getLogger(__name__)


def solve_linear_system(
    A,
    b,
    n: Optional[int] = None,
    out: Optional[np.ndarray] = None,
    tol: Optional[float] = None,
) -> np.ndarray:
    """
    Solve Ax = b for a square n x n system.

    Parameters
    ----------
    A : sequence of n*n floats, row-major
    b : sequence of n floats
    n : int | None
        System size. Defaults to len(b), in which case A must hold
        exactly n*n elements.
    out : (n,) ndarray | None
        Destination for x; written only on success.
    tol : float | None
        Absolute pivot threshold. By default each pivot is judged
        relative to the largest magnitude of its own row.

    Raises
    ------
    DimensionMismatchError : if A or b do not match n.
    SingularMatrixError    : if A is singular to working precision.
    """
    if n is None:
        rhs = as_buffer(b, "b")
        n = rhs.size
        a = as_buffer(A, "A")
        if a.size != n * n:
            raise DimensionMismatchError(
                f"A holds {a.size} elements, expected {n}x{n} for len(b) == {n}"
            )
    else:
        n = check_dim(n, "n")
        rhs = as_buffer(b, "b", n)
        a = as_buffer(A, "A", n * n)

    logger.debug(f"solving {n}x{n} system by Gaussian elimination")
    x = gaussian_solve(a.reshape(n, n), rhs, tol=tol)
    result = output_buffer(out, n)
    result[:] = x
    return result


def solve_quadratic(a: float, b: float, c: float) -> Tuple[float, float]:
    """
    Real roots of a x^2 + b x + c = 0.

    Returns
    -------
    (root1, root2) : root1 takes +sqrt(disc), root2 takes -sqrt(disc).
        They are not sorted.

    Raises
    ------
    DegenerateEquationError : if |a| < QUADRATIC_EPS.
    ComplexRootsError       : if b^2 - 4ac < 0.
    """
    a, b, c = float(a), float(b), float(c)
    if abs(a) < QUADRATIC_EPS:
        raise DegenerateEquationError(f"a = {a!r} is zero, equation is not quadratic")
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ComplexRootsError(disc)
    sqrt_disc = math.sqrt(disc)
    root1 = (-b + sqrt_disc) / (2 * a)
    root2 = (-b - sqrt_disc) / (2 * a)
    return root1, root2
