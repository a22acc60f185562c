# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np
import pytest

from elemath.errors import (
    ComplexRootsError,
    DegenerateEquationError,
    DimensionMismatchError,
    MathDomainError,
    SingularMatrixError,
)
from elemath.matrix import matrix_identity
from elemath.solvers import solve_linear_system, solve_quadratic

TEST_ITERATIONS = 50
logger = logging.getLogger(__name__)


def test_solve_quadratic_real():
    r1, r2 = solve_quadratic(1, -3, 2)
    assert {r1, r2} == {1.0, 2.0}
    # root1 takes +sqrt(disc)
    assert (r1, r2) == (2.0, 1.0)


def test_solve_quadratic_negative_leading_coefficient():
    r1, r2 = solve_quadratic(-1, 3, -2)
    assert (r1, r2) == (1.0, 2.0)


def test_solve_quadratic_double_root():
    assert solve_quadratic(1, -2, 1) == (1.0, 1.0)


def test_solve_quadratic_complex():
    with pytest.raises(ComplexRootsError) as excinfo:
        solve_quadratic(1, 0, 1)
    assert excinfo.value.discriminant == -4.0


def test_solve_quadratic_degenerate():
    with pytest.raises(DegenerateEquationError):
        solve_quadratic(0, 2, 1)
    with pytest.raises(DegenerateEquationError):
        solve_quadratic(1e-13, 2, 1)


def test_quadratic_failures_are_distinct():
    assert not issubclass(ComplexRootsError, DegenerateEquationError)
    assert not issubclass(DegenerateEquationError, ComplexRootsError)
    assert issubclass(ComplexRootsError, MathDomainError)


def test_solve_linear_system():
    A = [2, 1, -1, -3, -1, 2, -2, 1, 2]
    b = [8, -11, -3]
    x = solve_linear_system(A, b, 3)
    np.testing.assert_allclose(x, [2.0, 3.0, -1.0], rtol=1e-12, atol=1e-12)


def test_solve_linear_system_identity_returns_rhs():
    b = np.array([1.5, -2.0, 3.25])
    np.testing.assert_array_equal(solve_linear_system(matrix_identity(3), b), b)


def test_solve_linear_system_random():
    rng = np.random.default_rng(0)
    for _ in range(TEST_ITERATIONS):
        n = int(rng.integers(1, 25))
        A = rng.standard_normal((n, n)) + n * np.eye(n)
        x_true = rng.random(n)
        b = A @ x_true
        x = solve_linear_system(A.ravel(), b, n)
        np.testing.assert_allclose(x, np.linalg.solve(A, b), rtol=5e-8, atol=1e-12)


def test_solve_linear_system_writes_out_only_on_success():
    out = np.full(2, 9.0)
    result = solve_linear_system([2, 0, 0, 4], [2, 8], out=out)
    assert result is out
    np.testing.assert_array_equal(out, [1.0, 2.0])

    out = np.full(2, 9.0)
    with pytest.raises(SingularMatrixError):
        solve_linear_system([1, 2, 2, 4], [1, 2], out=out)
    np.testing.assert_array_equal(out, [9.0, 9.0])


def test_solve_linear_system_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        solve_linear_system([1, 0, 0, 1], [1, 2, 3])
    with pytest.raises(DimensionMismatchError):
        solve_linear_system([1, 0, 0], [1, 2], 2)


def test_singular_is_not_a_precondition_error():
    with pytest.raises(SingularMatrixError) as excinfo:
        solve_linear_system([0, 0, 0, 0], [0, 0])
    assert not isinstance(excinfo.value, ValueError)
    logger.debug(f"singular system: {excinfo.value}")


@pytest.mark.parametrize(
    "A,b,expected",
    [
        ([2e-13, 0, 0, 2e-13], [2e-13, 4e-13], [1.0, 2.0]),
        ([1e12, 0, 0, 1.0], [1e12, 3.0], [1.0, 3.0]),
        ([1e-13, 2e-13, 3.0, 4.0], [5e-13, 11.0], [1.0, 2.0]),
        ([1e150, 1e150, 1e-150, -1e-150], [2e150, 0.0], [1.0, 1.0]),
    ],
)
def test_solve_linear_system_badly_scaled(A, b, expected):
    x = solve_linear_system(A, b, 2)
    np.testing.assert_allclose(x, expected, rtol=1e-12)


def test_solve_linear_system_small_magnitude_random():
    rng = np.random.default_rng(1)
    for _ in range(TEST_ITERATIONS):
        n = int(rng.integers(1, 10))
        A = 1e-15 * (rng.standard_normal((n, n)) + n * np.eye(n))
        x_true = rng.random(n)
        b = A @ x_true
        x = solve_linear_system(A.ravel(), b, n)
        np.testing.assert_allclose(x, np.linalg.solve(A, b), rtol=5e-8, atol=1e-12)


# x + y = 2, x + (1 + 1e-13) y = 2, singular at the default relative precision
NEARLY_SINGULAR = [1.0, 1.0, 1.0, 1.0 + 1e-13]


@pytest.mark.parametrize(
    "tol,singular",
    [
        (None, True),
        (1e-8, True),
        (1e-15, False),
        (0.0, False),
    ],
)
def test_solve_linear_system_caller_tolerance(tol, singular):
    if singular:
        with pytest.raises(SingularMatrixError):
            solve_linear_system(NEARLY_SINGULAR, [2.0, 2.0], tol=tol)
    else:
        x = solve_linear_system(NEARLY_SINGULAR, [2.0, 2.0], tol=tol)
        np.testing.assert_array_equal(x, [2.0, 0.0])


def test_caller_tolerance_is_absolute():
    # pivots of 1e-10 pass the default relative test but not tol=1e-9
    A = [1e-10, 0, 0, 1e-10]
    np.testing.assert_allclose(solve_linear_system(A, [1e-10, 1e-10]), [1.0, 1.0])
    with pytest.raises(SingularMatrixError):
        solve_linear_system(A, [1e-10, 1e-10], tol=1e-9)
