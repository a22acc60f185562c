# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
elemath
=======

Small, self-contained numerical primitives on flat float buffers.

Public API
~~~~~~~~~~
- Vectors
    - `dot`, `add`, `sub`, `scalar_mul`
- Matrices (flat, row-major, shape passed alongside)
    - `matrix_mul`, `matrix_transpose`, `matrix_identity`,
      `matrix_determinant`, `matrix_inverse`, `Matrix`
- Polynomials (index i = coefficient of x^i)
    - `poly_eval`, `poly_derivative`, `poly_add`, `poly_mul`, `Polynomial`
- Equation solvers
    - `solve_linear_system`, `solve_quadratic`
- Geometry and trigonometry live in `elemath.geometry` and `elemath.trig`.

Errors derive from `ElemathError`; see `elemath.errors`.

Example
-------
>>> import elemath as em
>>> em.matrix_determinant([1, 2, 3, 4], 2)
-2.0
>>> em.poly_mul([1, 2], 1, [3, 4], 1)
(array([ 3., 10.,  8.]), 2)
"""

from importlib.metadata import version as _pkg_version

from . import geometry, trig
from .errors import (
    ComplexRootsError,
    DegenerateEquationError,
    DimensionMismatchError,
    DomainError,
    ElemathError,
    MathDomainError,
    MissingBufferError,
    SingularMatrixError,
)
from .matrix import (
    Matrix,
    matrix_determinant,
    matrix_identity,
    matrix_inverse,
    matrix_mul,
    matrix_transpose,
)
from .polynomial import Polynomial, poly_add, poly_derivative, poly_eval, poly_mul
from .solvers import solve_linear_system, solve_quadratic
from .trig import PI
from .vectors import add, dot, scalar_mul, sub

__all__ = [
    "dot",
    "add",
    "sub",
    "scalar_mul",
    "matrix_mul",
    "matrix_transpose",
    "matrix_identity",
    "matrix_determinant",
    "matrix_inverse",
    "Matrix",
    "poly_eval",
    "poly_derivative",
    "poly_add",
    "poly_mul",
    "Polynomial",
    "solve_linear_system",
    "solve_quadratic",
    "PI",
    "geometry",
    "trig",
    "ElemathError",
    "DimensionMismatchError",
    "MissingBufferError",
    "MathDomainError",
    "SingularMatrixError",
    "ComplexRootsError",
    "DegenerateEquationError",
    "DomainError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show elemath”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library logging stays silent unless the application configures it.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
