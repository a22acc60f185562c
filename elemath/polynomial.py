# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Polynomial arithmetic on coefficient buffers.

Index i holds the coefficient of x^i, so a polynomial of degree d has
d + 1 coefficients. Trailing (leading-term) zeros are never trimmed: the
degree reported is always the structural one.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .errors import DimensionMismatchError
from .utils import as_buffer, check_dim, output_buffer


def _coeffs(coeffs, degree: int, name: str = "coeffs") -> Tuple[np.ndarray, int]:
    degree = check_dim(degree, "degree")
    return as_buffer(coeffs, name, degree + 1), degree


def poly_eval(coeffs, degree: int, x: float) -> float:
    """
    Evaluate sum(coeffs[i] * x**i) for i in [0, degree].

    Uses Horner's scheme, which matches the power sum up to rounding.
    """
    c, degree = _coeffs(coeffs, degree)
    x = float(x)
    result = 0.0
    for i in range(degree, -1, -1):
        result = result * x + float(c[i])
    return result


def poly_derivative(coeffs, degree: int, out: Optional[np.ndarray] = None):
    """
    Coefficients of the derivative: deriv[i - 1] = coeffs[i] * i.

    The derivative of a constant is the single coefficient [0.0], so the
    result has max(degree, 1) elements.
    """
    c, degree = _coeffs(coeffs, degree)
    if degree == 0:
        deriv = output_buffer(out, 1)
        deriv[0] = 0.0
        return deriv
    deriv = output_buffer(out, degree)
    deriv[:] = c[1:] * np.arange(1, degree + 1, dtype=float)
    return deriv


def poly_add(
    A, deg_a: int, B, deg_b: int, out: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, int]:
    """
    Sum of two polynomials.

    Returns
    -------
    result : (max(deg_a, deg_b) + 1,) ndarray
    deg_r  : int, always max(deg_a, deg_b) even if the leading terms cancel
    """
    a, deg_a = _coeffs(A, deg_a, "A")
    b, deg_b = _coeffs(B, deg_b, "B")
    deg_r = max(deg_a, deg_b)
    result = output_buffer(out, deg_r + 1)
    # read both operands before writing so `out` may alias A or B
    padded_a = np.zeros(deg_r + 1)
    padded_a[: deg_a + 1] = a
    padded_b = np.zeros(deg_r + 1)
    padded_b[: deg_b + 1] = b
    result[:] = padded_a + padded_b
    return result, deg_r


def poly_mul(
    A, deg_a: int, B, deg_b: int, out: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, int]:
    """
    Product of two polynomials (coefficient convolution).

    result[k] = sum over i + j = k of A[i] * B[j], deg_r = deg_a + deg_b.
    """
    a, deg_a = _coeffs(A, deg_a, "A")
    b, deg_b = _coeffs(B, deg_b, "B")
    deg_r = deg_a + deg_b
    acc = np.zeros(deg_r + 1)
    for i in range(deg_a + 1):
        for j in range(deg_b + 1):
            acc[i + j] += a[i] * b[j]
    result = output_buffer(out, deg_r + 1)
    result[:] = acc
    return result, deg_r


@dataclass(frozen=True, eq=False)
class Polynomial:
    """Coefficient buffer with its degree, lowest power first."""

    coeffs: np.ndarray

    def __post_init__(self):
        c = as_buffer(self.coeffs, "coeffs")
        if c.size == 0:
            raise DimensionMismatchError("a polynomial needs at least one coefficient")
        c = c.copy()
        c.flags.writeable = False
        object.__setattr__(self, "coeffs", c)

    @property
    def degree(self) -> int:
        return self.coeffs.size - 1

    def __call__(self, x: float) -> float:
        return poly_eval(self.coeffs, self.degree, x)

    def derivative(self) -> "Polynomial":
        return Polynomial(poly_derivative(self.coeffs, self.degree))

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        c, _ = poly_add(self.coeffs, self.degree, other.coeffs, other.degree)
        return Polynomial(c)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        c, _ = poly_mul(self.coeffs, self.degree, other.coeffs, other.degree)
        return Polynomial(c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return bool(np.array_equal(self.coeffs, other.coeffs))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.coeffs.tolist()})"
