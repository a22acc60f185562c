# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math

import numpy as np
import pytest

from elemath import trig
from elemath.errors import DomainError


def test_deg_rad_conversion():
    assert math.isclose(trig.deg_to_rad(180.0), trig.PI)
    assert math.isclose(trig.deg_to_rad(90.0), trig.PI / 2)
    assert math.isclose(trig.rad_to_deg(trig.PI), 180.0)
    assert math.isclose(trig.rad_to_deg(trig.PI / 2), 90.0)


def test_sin_cos_tan():
    assert trig.sin(0.0) == 0.0
    assert trig.cos(0.0) == 1.0
    assert trig.tan(0.0) == 0.0
    assert math.isclose(trig.sin(trig.PI / 2), 1.0)
    assert math.isclose(trig.cos(trig.PI / 2), 0.0, abs_tol=1e-15)


def test_inverse_trig():
    assert math.isclose(trig.asin(1.0), trig.PI / 2)
    assert trig.acos(1.0) == 0.0
    assert math.isclose(trig.atan(1.0), trig.PI / 4)
    assert math.isclose(trig.atan2(1.0, 1.0), trig.PI / 4)
    assert math.isclose(trig.atan2(1.0, -1.0), 3 * trig.PI / 4)


def test_hyperbolic():
    assert trig.sinh(0.0) == 0.0
    assert trig.cosh(0.0) == 1.0
    assert trig.tanh(0.0) == 0.0
    assert trig.asinh(0.0) == 0.0
    assert trig.acosh(1.0) == 0.0
    assert trig.atanh(0.0) == 0.0


def test_scalars_come_back_as_float():
    assert type(trig.sin(1)) is float
    assert type(trig.deg_to_rad(45)) is float


def test_arrays_pass_through():
    x = np.array([0.0, 30.0, 90.0])
    result = trig.sin(trig.deg_to_rad(x))
    np.testing.assert_allclose(result, [0.0, 0.5, 1.0], atol=1e-15)


@pytest.mark.parametrize(
    "func,arg",
    [
        (trig.asin, 2.0),
        (trig.acos, -1.5),
        (trig.acosh, 0.5),
        (trig.atanh, 1.0),
        (trig.asin, [0.0, 1.5]),
    ],
)
def test_out_of_domain(func, arg):
    with pytest.raises(DomainError):
        func(arg)
