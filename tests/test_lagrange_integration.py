from __future__ import annotations

import math

import pytest

from core.interfaces import SamplePoint
from core.lagrange import PolynomialFitter, integrate_polynomial, trapezoid_area


def test_integral_of_worked_example() -> None:
    fitter = PolynomialFitter([(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)])
    assert fitter.integral() == pytest.approx(14.0 / 3.0, rel=1e-12)


def test_quadrature_differs_from_integral_for_curved_data() -> None:
    fitter = PolynomialFitter([(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)])
    assert fitter.quadrature() == pytest.approx(5.0, rel=1e-12)
    assert abs(fitter.quadrature() - fitter.integral()) > 0.1


def test_integral_and_quadrature_agree_for_linear_data() -> None:
    fitter = PolynomialFitter([(1.0, 3.0), (3.0, 7.0)])
    assert fitter.integral() == pytest.approx(10.0, rel=1e-12)
    assert fitter.quadrature() == pytest.approx(10.0, rel=1e-12)


def test_bounds_follow_sequence_order() -> None:
    # Same parabola, but first sample is x=2 and last is x=1: ∫_2^1 (x^2 + 1) dx = -10/3
    fitter = PolynomialFitter([(2.0, 5.0), (0.0, 1.0), (1.0, 2.0)])
    assert fitter.coefficients() == pytest.approx([1.0, 0.0, 1.0], abs=1e-12)
    assert fitter.integral() == pytest.approx(-10.0 / 3.0, rel=1e-12)
    # trapezoids (2,5)->(0,1) = -6, (0,1)->(1,2) = 1.5
    assert fitter.quadrature() == pytest.approx(-4.5, rel=1e-12)


def test_quadrature_handles_uneven_spacing() -> None:
    pts = [SamplePoint(0.0, 0.0), SamplePoint(0.1, 1.0), SamplePoint(1.0, 1.0)]
    assert trapezoid_area(pts) == pytest.approx(0.05 + 0.9, rel=1e-12)


def test_integrate_polynomial_closed_form() -> None:
    # ∫_0^1 (1 + 2x + 3x^2) dx = 1 + 1 + 1
    assert integrate_polynomial([1.0, 2.0, 3.0], 0.0, 1.0) == pytest.approx(3.0, rel=1e-12)
    assert integrate_polynomial([1.0, 2.0, 3.0], 1.0, 1.0) == 0.0


def test_ti_profile_estimates_are_finite() -> None:
    lambdas = [i / 10.0 for i in range(11)]
    dgdl = [10.0 * math.exp(-5.0 * lam) - 2.0 for lam in lambdas]
    fitter = PolynomialFitter.from_xy(lambdas, dgdl)
    exact = 2.0 * (1.0 - math.exp(-5.0)) - 2.0
    assert math.isfinite(fitter.integral()) and math.isfinite(fitter.quadrature())
    # the smooth fit beats the trapezoid rule on an exponential profile
    assert abs(fitter.integral() - exact) < abs(fitter.quadrature() - exact)
