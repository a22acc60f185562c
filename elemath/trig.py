# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Trigonometric and hyperbolic functions.

Thin wrappers over the NumPy ufuncs: scalars in give floats out, arrays
in give arrays out. Arguments outside a function's real domain raise
DomainError instead of producing NaN.
"""

import numpy as np

from .errors import DomainError

PI: float = float(np.pi)


def _wrap(result):
    if np.ndim(result) == 0:
        return float(result)
    return result


def _check(ok, name: str, x) -> None:
    if not np.all(ok):
        raise DomainError(f"{name}() argument out of domain: {x!r}")


def deg_to_rad(degrees):
    return _wrap(np.asarray(degrees, dtype=float) * (PI / 180.0))


def rad_to_deg(radians):
    return _wrap(np.asarray(radians, dtype=float) * (180.0 / PI))


def sin(x):
    return _wrap(np.sin(x))


def cos(x):
    return _wrap(np.cos(x))


def tan(x):
    return _wrap(np.tan(x))


def asin(x):
    x = np.asarray(x, dtype=float)
    _check(np.abs(x) <= 1.0, "asin", x)
    return _wrap(np.arcsin(x))


def acos(x):
    x = np.asarray(x, dtype=float)
    _check(np.abs(x) <= 1.0, "acos", x)
    return _wrap(np.arccos(x))


def atan(x):
    return _wrap(np.arctan(x))


def atan2(y, x):
    """Angle of the point (x, y) in (-pi, pi]."""
    return _wrap(np.arctan2(y, x))


def sinh(x):
    return _wrap(np.sinh(x))


def cosh(x):
    return _wrap(np.cosh(x))


def tanh(x):
    return _wrap(np.tanh(x))


def asinh(x):
    return _wrap(np.arcsinh(x))


def acosh(x):
    x = np.asarray(x, dtype=float)
    _check(x >= 1.0, "acosh", x)
    return _wrap(np.arccosh(x))


def atanh(x):
    """Inverse hyperbolic tangent, defined on the open interval (-1, 1)."""
    x = np.asarray(x, dtype=float)
    _check(np.abs(x) < 1.0, "atanh", x)
    return _wrap(np.arctanh(x))
