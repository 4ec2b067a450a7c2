"""Tests for sdf2d/polynomial.py: cubic polynomials and root helpers."""

import numpy as np
import numpy.testing as npt
import pytest

from sdf2d import CubicPolynomial
from sdf2d.polynomial import quadratic, zero_small


class TestZeroSmall:
    def test_small_value_snapped(self):
        assert zero_small(1e-12, 1.0) == 0.0

    def test_large_value_kept(self):
        assert zero_small(0.5, 1.0) == 0.5

    def test_zero_scale(self):
        assert zero_small(0.0, 0.0) == 0.0

    def test_custom_epsilon(self):
        assert zero_small(1e-3, 1.0, epsilon=1e-2) == 0.0
        assert zero_small(1e-3, 1.0, epsilon=1e-4) == 1e-3


class TestQuadratic:
    def test_two_roots_sorted(self):
        npt.assert_allclose(quadratic(1.0, -3.0, 2.0), [1.0, 2.0])

    def test_double_root(self):
        npt.assert_allclose(quadratic(1.0, 2.0, 1.0), [-1.0])

    def test_no_real_roots(self):
        assert quadratic(1.0, 0.0, 1.0) == []

    def test_linear_fallback(self):
        npt.assert_allclose(quadratic(0.0, 2.0, -4.0), [2.0])

    def test_constant_has_no_roots(self):
        assert quadratic(0.0, 0.0, 5.0) == []
        assert quadratic(0.0, 0.0, 0.0) == []

    def test_symmetric_roots(self):
        npt.assert_allclose(quadratic(3.0, 0.0, -3.0), [-1.0, 1.0])

    def test_no_cancellation(self):
        # roots 1e-8 and 1e8
        roots = quadratic(1.0, -(1e8 + 1e-8), 1.0)
        npt.assert_allclose(roots, [1e-8, 1e8], rtol=1e-10)


class TestEvaluate:
    P = CubicPolynomial(1.0, 2.0, 3.0, 4.0)

    def test_f0(self):
        assert self.P.f0(0.0) == 1.0
        assert self.P.f0(1.0) == 10.0
        assert self.P.f0(2.0) == 1.0 + 4.0 + 12.0 + 32.0

    def test_f1(self):
        assert self.P.f1(0.0) == 2.0
        assert self.P.f1(1.0) == 2.0 + 6.0 + 12.0

    def test_f2(self):
        assert self.P.f2(0.0) == 6.0
        assert self.P.f2(1.0) == 6.0 + 24.0

    def test_outside_unit_interval(self):
        assert self.P.f0(-1.0) == 1.0 - 2.0 + 3.0 - 4.0

    def test_array_argument(self):
        t = np.array([0.0, 0.5, 1.0])
        npt.assert_allclose(self.P.f0(t), [1.0, 1.0 + 1.0 + 0.75 + 0.5, 10.0])


class TestFit:
    @pytest.mark.parametrize("y0,y1,D0,D1", [
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 1.0, 1.0, 1.0),
        (2.0, -3.0, 0.5, -4.0),
        (-1.5, 7.25, 10.0, 3.0),
        (100.0, 101.0, -20.0, 20.0),
    ])
    def test_endpoint_conditions(self, y0, y1, D0, D1):
        p = CubicPolynomial.fit(y0, y1, D0, D1)
        npt.assert_allclose(p.f0(0.0), y0, atol=1e-9)
        npt.assert_allclose(p.f0(1.0), y1, atol=1e-9)
        npt.assert_allclose(p.f1(0.0), D0, atol=1e-9)
        npt.assert_allclose(p.f1(1.0), D1, atol=1e-9)

    def test_hermite_coefficients(self):
        p = CubicPolynomial.fit(0.0, 1.0, 1.5, 0.0)
        assert (p.a, p.b, p.c, p.d) == (0.0, 1.5, 0.0, -0.5)

    def test_linear_data_gives_linear_polynomial(self):
        p = CubicPolynomial.fit(0.0, 1.0, 1.0, 1.0)
        assert p.c == 0.0
        assert p.d == 0.0

    def test_small_coefficients_snapped(self):
        p = CubicPolynomial.fit(1.0, 1.0 + 1e-12, 0.0, 0.0)
        assert p == CubicPolynomial(1.0, 0.0, 0.0, 0.0)

    def test_all_zero(self):
        assert CubicPolynomial.fit(0.0, 0.0, 0.0, 0.0) == CubicPolynomial()

    def test_immutable(self):
        p = CubicPolynomial.fit(0.0, 1.0, 0.0, 0.0)
        with pytest.raises(AttributeError):
            p.a = 5.0


class TestStationaryPoints:
    def test_two_extrema(self):
        # f1 = -3 + 3t^2
        p = CubicPolynomial(0.0, -3.0, 0.0, 1.0)
        npt.assert_allclose(p.stationary_points(), [-1.0, 1.0])

    def test_roots_not_clamped(self):
        # f1 = 3(t - 2)(t - 3) = 3t^2 - 15t + 18
        p = CubicPolynomial(0.0, 18.0, -7.5, 1.0)
        npt.assert_allclose(p.stationary_points(), [2.0, 3.0])

    def test_quadratic_polynomial(self):
        # f1 = 1 - 2t
        p = CubicPolynomial(0.0, 1.0, -1.0, 0.0)
        npt.assert_allclose(p.stationary_points(), [0.5])

    def test_linear_has_none(self):
        assert CubicPolynomial(0.0, 1.0, 0.0, 0.0).stationary_points() == []

    def test_monotone_cubic_has_none(self):
        # f1 = 1 + 3t^2 > 0
        assert CubicPolynomial(0.0, 1.0, 0.0, 1.0).stationary_points() == []

    def test_derivative_vanishes(self):
        p = CubicPolynomial.fit(0.0, 0.0, 2.0, 1.0)
        for t in p.stationary_points():
            npt.assert_allclose(p.f1(t), 0.0, atol=1e-10)
