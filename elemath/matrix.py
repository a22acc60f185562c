# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix operations on flat row-major buffers.

A matrix travels as a flat sequence of rows*cols floats together with its
shape; element (i, j) lives at index i*cols + j. `Matrix` wraps a buffer
and its shape for callers who prefer not to carry the dimensions around.

`matrix_inverse` performs a real Gauss-Jordan inversion and raises
SingularMatrixError when no pivot exists. It never hands back an identity
placeholder.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .elimination import forward_eliminate, gauss_jordan_inverse, gaussian_solve
from .errors import DimensionMismatchError, MissingBufferError
from .utils import (
    COFACTOR_WARN_SIZE,
    as_buffer,
    check_dim,
    output_buffer,
    permutation_sign,
)

logger = logging.getLogger(__name__)


def matrix_mul(
    A,
    rows_a: int,
    cols_a: int,
    B,
    rows_b: int,
    cols_b: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Product C = A B of a (rows_a x cols_a) and a (rows_b x cols_b) matrix.

    Returns
    -------
    C : (rows_a * cols_b,) ndarray, row-major

    Raises
    ------
    DimensionMismatchError : if cols_a != rows_b. Nothing is written to `out`.
    """
    rows_a, cols_a = check_dim(rows_a, "rows_a"), check_dim(cols_a, "cols_a")
    rows_b, cols_b = check_dim(rows_b, "rows_b"), check_dim(cols_b, "cols_b")
    if cols_a != rows_b:
        raise DimensionMismatchError(
            f"cannot multiply ({rows_a}x{cols_a}) by ({rows_b}x{cols_b})"
        )
    a = as_buffer(A, "A", rows_a * cols_a).reshape(rows_a, cols_a)
    b = as_buffer(B, "B", rows_b * cols_b).reshape(rows_b, cols_b)
    C = output_buffer(out, rows_a * cols_b)
    C[:] = (a @ b).ravel()
    return C


def matrix_transpose(A, rows: int, cols: int, out: Optional[np.ndarray] = None):
    """T[j, i] = A[i, j]; the result is (cols x rows), row-major."""
    rows, cols = check_dim(rows, "rows"), check_dim(cols, "cols")
    a = as_buffer(A, "A", rows * cols).reshape(rows, cols)
    T = output_buffer(out, rows * cols)
    T[:] = a.T.ravel()
    return T


def matrix_identity(n: int, out: Optional[np.ndarray] = None) -> np.ndarray:
    """Flat n x n identity: 1.0 on the diagonal, 0.0 elsewhere."""
    n = check_dim(n, "n")
    M = output_buffer(out, n * n)
    M[:] = 0.0
    M[:: n + 1] = 1.0
    return M


def _cofactor_det(m: List[float], n: int) -> float:
    # Laplace expansion along row 0. The order of the multiply/adds is
    # fixed: changing it changes the rounding of the result.
    if n == 1:
        return m[0]
    if n == 2:
        return m[0] * m[3] - m[1] * m[2]
    det = 0.0
    for col in range(n):
        minor = [m[i * n + j] for i in range(1, n) for j in range(n) if j != col]
        cofactor = (1.0 if col % 2 == 0 else -1.0) * m[col]
        det += cofactor * _cofactor_det(minor, n - 1)
    return det


def _elimination_det(a: np.ndarray) -> float:
    U, _c, pivots, perm = forward_eliminate(a, tol=0.0)
    if len(pivots) < a.shape[0]:
        return 0.0
    return permutation_sign(perm) * float(np.prod(np.diag(U)))


def matrix_determinant(M, n: int, method: str = "cofactor") -> float:
    """
    Determinant of the n x n matrix M.

    Parameters
    ----------
    M : sequence of n*n floats, row-major
    n : int
        Matrix size. The 0 x 0 determinant is 1.0.
    method : {"cofactor", "elimination"}
        "cofactor" is the recursive first-row Laplace expansion, O(n!).
        "elimination" reduces to upper-triangular form with partial
        pivoting, O(n^3); it agrees with "cofactor" up to rounding only.
    """
    if M is None:
        raise MissingBufferError("M must not be None")
    n = check_dim(n, "n")
    if n == 0:
        # empty product
        return 1.0
    buf = as_buffer(M, "M", n * n)

    if method == "cofactor":
        if n > COFACTOR_WARN_SIZE:
            logger.warning(
                f"matrix_determinant(): cofactor expansion on {n}x{n} is O(n!)"
            )
        return float(_cofactor_det(buf.tolist(), n))
    if method == "elimination":
        return _elimination_det(buf.reshape(n, n))
    raise ValueError(f"unknown determinant method {method!r}")


def matrix_inverse(
    M, n: int, out: Optional[np.ndarray] = None, tol: Optional[float] = None
) -> np.ndarray:
    """
    Inverse of the n x n matrix M by Gauss-Jordan elimination.

    Raises
    ------
    SingularMatrixError : if M is singular to working precision; `out`
        is left untouched.
    """
    n = check_dim(n, "n")
    a = as_buffer(M, "M", n * n).reshape(n, n)
    inv = gauss_jordan_inverse(a, tol=tol)
    result = output_buffer(out, n * n)
    result[:] = inv.ravel()
    return result


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    A flat row-major buffer that carries its own shape.

    Every method delegates to the flat functions in this module.
    """

    data: np.ndarray
    rows: int
    cols: int

    def __post_init__(self):
        rows = check_dim(self.rows, "rows")
        cols = check_dim(self.cols, "cols")
        data = as_buffer(self.data, "data")
        if data.size != rows * cols:
            raise DimensionMismatchError(
                f"{data.size} elements cannot form a {rows}x{cols} matrix"
            )
        data = data.copy()
        data.flags.writeable = False
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        a = np.asarray(rows, dtype=float)
        if a.ndim != 2:
            raise DimensionMismatchError("rows must form a rectangular 2-D array")
        return cls(a.ravel(), a.shape[0], a.shape[1])

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls(matrix_identity(n), n, n)

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def T(self) -> "Matrix":
        T = matrix_transpose(self.data, self.rows, self.cols)
        return Matrix(T, self.cols, self.rows)

    def to_rows(self) -> List[List[float]]:
        return self.data.reshape(self.rows, self.cols).tolist()

    def _require_square(self) -> int:
        if self.rows != self.cols:
            raise DimensionMismatchError(
                f"operation needs a square matrix, got {self.rows}x{self.cols}"
            )
        return self.rows

    def det(self, method: str = "cofactor") -> float:
        return matrix_determinant(self.data, self._require_square(), method=method)

    def inv(self, tol: Optional[float] = None) -> "Matrix":
        n = self._require_square()
        return Matrix(matrix_inverse(self.data, n, tol=tol), n, n)

    def solve(self, b, tol: Optional[float] = None) -> np.ndarray:
        """Solve self @ x = b for a square matrix."""
        n = self._require_square()
        rhs = as_buffer(b, "b")
        if rhs.size != n:
            raise DimensionMismatchError(
                f"right-hand side has {rhs.size} elements, expected {n}"
            )
        return gaussian_solve(self.data.reshape(n, n), rhs, tol=tol)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            C = matrix_mul(
                self.data, self.rows, self.cols, other.data, other.rows, other.cols
            )
            return Matrix(C, self.rows, other.cols)
        v = as_buffer(other, "other")
        return matrix_mul(self.data, self.rows, self.cols, v, v.size, 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self.data, other.data)
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.to_rows()}, "
            f"rows={self.rows}, cols={self.cols})"
        )
