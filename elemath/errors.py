# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exceptions raised by elemath.

Two families, so callers can tell a bad call from a bad input:

- precondition violations (wrong lengths, missing buffers) subclass the
  builtin ValueError / TypeError;
- mathematically undefined results (singular systems, complex roots)
  subclass MathDomainError, itself an ArithmeticError.
"""


class ElemathError(Exception):
    """Base class for every error raised by this package."""


class DimensionMismatchError(ElemathError, ValueError):
    """Operand shapes or buffer sizes are incompatible."""


class MissingBufferError(ElemathError, TypeError):
    """A required input buffer was None."""


class MathDomainError(ElemathError, ArithmeticError):
    """The requested result is not defined over the reals."""


class SingularMatrixError(MathDomainError):
    """No usable pivot: the matrix is singular to working precision."""


class ComplexRootsError(MathDomainError):
    """The quadratic has a negative discriminant."""

    def __init__(self, discriminant: float):
        self.discriminant = discriminant
        super().__init__(
            f"discriminant {discriminant!r} is negative, roots are complex"
        )


class DegenerateEquationError(MathDomainError):
    """The equation collapses to a lower order (e.g. a == 0 in a quadratic)."""


class DomainError(MathDomainError):
    """Argument outside the domain of a real-valued function."""
