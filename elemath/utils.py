# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import numpy as np

from .errors import DimensionMismatchError, MissingBufferError

EPS: float = 1e-12
QUADRATIC_EPS: float = 1e-12
# cofactor expansion is O(n!), warn above this size
COFACTOR_WARN_SIZE: int = 8


def pivot_scales(A: np.ndarray, tol: Optional[float] = None):
    """
    Return (scales, threshold) for judging pivots of A.

    A candidate pivot a in row i is usable when |a| / scales[i] > threshold.
    By default scales[i] is the largest magnitude in row i of A and the
    threshold is EPS, so the test is relative to each row and independent
    of the overall size of A. An explicit `tol` is an absolute threshold
    (every scale is 1.0). All-zero rows get scale 0.0 and never pivot.
    """
    m = A.shape[0]
    if tol is not None:
        return np.ones(m), float(tol)
    if A.size == 0:
        return np.zeros(m), EPS
    return np.max(np.abs(A), axis=1), EPS


def pivot_ratios(column: np.ndarray, scales: np.ndarray) -> np.ndarray:
    """|column| / scales, with 0.0 wherever the scale is zero."""
    ratios = np.zeros(column.shape, dtype=float)
    np.divide(np.abs(column), scales, out=ratios, where=scales > 0)
    return ratios


def permutation_sign(perm: list[int]) -> float:
    """Return +1 or –1 depending on permutation parity."""
    visited = [False] * len(perm)
    cycles = 0
    for i in range(len(perm)):
        if not visited[i]:
            cycles += 1
            j = i
            while not visited[j]:
                visited[j] = True
                j = perm[j]
    swaps = len(perm) - cycles  # n − #cycles
    return -1.0 if swaps & 1 else 1.0


def as_buffer(x, name: str, size: Optional[int] = None) -> np.ndarray:
    """
    Coerce a caller sequence into a flat float64 buffer.

    Only the first `size` elements are used, so a caller may hand over a
    larger buffer than the operation needs (as with a raw pointer).
    """
    if x is None:
        raise MissingBufferError(f"{name} must not be None")
    buf = np.asarray(x, dtype=float).ravel()
    if size is not None:
        if size < 0:
            raise ValueError(f"size of {name} must be non-negative, got {size}")
        if buf.size < size:
            raise DimensionMismatchError(
                f"{name} holds {buf.size} elements, need at least {size}"
            )
        buf = buf[:size]
    return buf


def check_dim(value: int, name: str) -> int:
    """Validate a size/degree argument."""
    if isinstance(value, (bool, float)) or int(value) != value:
        raise TypeError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def output_buffer(out: Optional[np.ndarray], size: int, name: str = "out"):
    """
    Return a writable flat buffer with exactly `size` elements.

    Allocates when `out` is None, otherwise checks the caller's buffer.
    """
    if out is None:
        return np.empty(size, dtype=float)
    if not isinstance(out, np.ndarray):
        raise TypeError(f"{name} must be a NumPy ndarray or None")
    if out.ndim != 1 or out.size != size:
        raise DimensionMismatchError(
            f"{name} must be a flat buffer of {size} elements, got shape {out.shape}"
        )
    if not np.issubdtype(out.dtype, np.floating):
        raise TypeError(f"{name} must have a floating dtype, got {out.dtype}")
    return out
