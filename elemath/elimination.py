# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Gaussian elimination with scaled partial pivoting on square 2-D arrays.

These are the building blocks behind `solve_linear_system`,
`matrix_inverse` and the elimination determinant. They work on (n, n)
ndarrays; the flat-buffer entry points reshape before calling in.

A pivot is judged against the largest entry of its own row (see
`pivot_scales`), so badly scaled but invertible matrices such as
diag(1e12, 1) or 1e-13 * I are accepted. Passing `tol` switches to an
absolute pivot threshold.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .errors import DimensionMismatchError, SingularMatrixError
from .utils import pivot_ratios, pivot_scales

logger = logging.getLogger(__name__)


def _require_square(A: np.ndarray, name: str = "A") -> int:
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatchError(
            f"{name} must be a square 2-D array, got shape {A.shape}"
        )
    return A.shape[0]


def forward_eliminate(
    A: np.ndarray,
    b: Optional[np.ndarray] = None,
    tol: Optional[float] = None,
) -> Tuple[np.ndarray, Optional[np.ndarray], List[int], List[int]]:
    """
    Row-echelon reduction with scaled partial pivoting on an n by n matrix A.

    Parameters
    ----------
    A : np.ndarray               (n, n)
        Coefficient matrix.
    b : np.ndarray | None        (n,) or (n, k)
        Optional right-hand side; same row swaps & updates applied.
    tol : float | None
        Absolute pivot threshold. By default each pivot must exceed EPS
        times the largest magnitude of its row in A.

    Returns
    -------
    U      : np.ndarray          (n, n)
        Upper-triangular form of A.
    c      : np.ndarray | None   (n, k)
        b after identical row ops (None if b was None).
    pivots : list[int]
        Column indices where pivots were placed; len = rank(A).
    perm   : list[int]
        Final row order: row i of U comes from input row perm[i].

    Raises
    ------
    DimensionMismatchError : if A is not square.
    """
    if not isinstance(A, np.ndarray):
        raise TypeError("A must be a NumPy ndarray")
    n = _require_square(A)

    U = A.astype(float, copy=True)

    if b is not None:
        c = np.atleast_2d(b.astype(float)).T if b.ndim == 1 else b.astype(float)
    else:
        c = None

    scales, threshold = pivot_scales(U, tol)

    perm = list(range(n))
    pivots: List[int] = []

    row = 0
    for col in range(n):
        if row == n:
            break
        # Pick the candidate that is largest relative to its own row,
        # this keeps the multipliers bounded and ignores row scaling.
        ratios = pivot_ratios(U[row:, col], scales[row:])
        max_idx = int(ratios.argmax())
        max_ratio = ratios[max_idx]

        if max_ratio <= threshold:  # column is numerically zero
            logger.debug(f"no pivot in column {col} (ratio {max_ratio:.3e})")
            continue

        pivot_row = row + max_idx
        if pivot_row != row:
            U[[row, pivot_row]] = U[[pivot_row, row]]
            scales[[row, pivot_row]] = scales[[pivot_row, row]]
            if c is not None:
                c[[row, pivot_row]] = c[[pivot_row, row]]
            perm[row], perm[pivot_row] = perm[pivot_row], perm[row]

        pivots.append(col)

        # Eliminate entries below the pivot
        factors = U[row + 1 :, col] / U[row, col]
        U[row + 1 :, col:] -= factors[:, None] * U[row, col:]
        if c is not None:
            c[row + 1 :, :] -= factors[:, None] * c[row, :]

        row += 1

    return U, c, pivots, perm


def back_substitute(
    U: np.ndarray, c: np.ndarray, tol: Optional[float] = None
) -> np.ndarray:
    """
    Solve Ux = c for an upper-triangular U.

    Parameters
    ----------
    U : (n, n) ndarray
        Upper-triangular matrix (output of forward_eliminate).
    c : (n,) or (n, k) ndarray
        RHS after identical row operations.
    tol : float | None
        Absolute threshold for the diagonal. By default each diagonal
        entry must exceed EPS times the largest magnitude in its row of U.

    Returns
    -------
    x : (n,) or (n, k) ndarray

    Raises
    ------
    SingularMatrixError : if a diagonal entry of U is numerically zero.
    """
    U = np.asarray(U, dtype=float)
    c = np.asarray(c, dtype=float)

    if c.ndim == 1:
        c = c[:, None]
    n, k = c.shape
    x = np.zeros((n, k), dtype=float)
    scales, threshold = pivot_scales(U, tol)
    ratios = pivot_ratios(np.diag(U), scales)

    for i in reversed(range(n)):
        pivot = U[i, i]
        if ratios[i] <= threshold:
            raise SingularMatrixError(
                f"matrix is singular: pivot {i} is {pivot!r} "
                f"(relative size {ratios[i]:.3e})"
            )
        s = c[i] - U[i, i + 1 :] @ x[i + 1 :]
        x[i] = s / pivot

    if x.shape[1] == 1:
        return x.ravel()
    return x


def gaussian_solve(
    A: np.ndarray, b: np.ndarray, tol: Optional[float] = None
) -> np.ndarray:
    """Solve the square system Ax = b, raising on a singular A."""
    U, c, pivots, _perm = forward_eliminate(A, b, tol=tol)
    if len(pivots) < A.shape[0]:
        raise SingularMatrixError(
            f"matrix is singular: rank {len(pivots)} < {A.shape[0]}"
        )
    # every diagonal entry of U already passed the pivot test above
    return back_substitute(U, c, tol=0.0)


def gauss_jordan_inverse(A: np.ndarray, tol: Optional[float] = None) -> np.ndarray:
    """
    Invert a square matrix by Gauss-Jordan elimination on [A | I].

    Each column is pivoted on the entry largest relative to its row; the
    pivot row is scaled to one and the column cleared above and below.
    """
    n = _require_square(A)
    W = A.astype(float, copy=True)
    inv = np.eye(n, dtype=float)
    scales, threshold = pivot_scales(W, tol)

    for col in range(n):
        ratios = pivot_ratios(W[col:, col], scales[col:])
        pivot_row = col + int(ratios.argmax())
        if ratios[pivot_row - col] <= threshold:
            raise SingularMatrixError(
                f"matrix is singular: no pivot in column {col}"
            )
        if pivot_row != col:
            W[[col, pivot_row]] = W[[pivot_row, col]]
            inv[[col, pivot_row]] = inv[[pivot_row, col]]
            scales[[col, pivot_row]] = scales[[pivot_row, col]]

        pivot = W[col, col]
        W[col] /= pivot
        inv[col] /= pivot

        factors = W[:, col].copy()
        factors[col] = 0.0
        W -= factors[:, None] * W[col]
        inv -= factors[:, None] * inv[col]

    return inv
