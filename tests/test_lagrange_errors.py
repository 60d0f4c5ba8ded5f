from __future__ import annotations

import math

import pytest

from core.errors import CapacityExceeded, DegenerateSample, InsufficientData, InvalidInput
from core.lagrange import MAX_SAMPLES, PolynomialFitter


def test_duplicate_x_is_degenerate() -> None:
    with pytest.raises(DegenerateSample) as info:
        PolynomialFitter([(1.0, 5.0), (1.0, 7.0)])
    assert isinstance(info.value, InvalidInput)
    assert isinstance(info.value, ValueError)
    assert info.value.context["x"] == 1.0


def test_non_adjacent_duplicate_is_reported() -> None:
    with pytest.raises(DegenerateSample) as info:
        PolynomialFitter([(0.0, 1.0), (1.0, 2.0), (0.0, 3.0)])
    assert info.value.context["index"] == 0
    assert info.value.context["repeated_at"] == [2]


@pytest.mark.parametrize("samples", [[], [(0.5, 1.0)]])
def test_too_few_points(samples) -> None:
    with pytest.raises(InsufficientData) as info:
        PolynomialFitter(samples)
    assert f"count={len(samples)}" in str(info.value)


def test_capacity_checked_before_expansion() -> None:
    samples = [(float(i), 0.0) for i in range(MAX_SAMPLES + 1)]
    with pytest.raises(CapacityExceeded) as info:
        PolynomialFitter(samples)
    assert info.value.context["count"] == MAX_SAMPLES + 1


def test_parallel_sequences_must_match() -> None:
    with pytest.raises(InvalidInput) as info:
        PolynomialFitter.from_xy([0.0, 1.0, 2.0], [1.0, 2.0])
    assert info.value.to_dict()["context"] == {"len_xs": 3, "len_ys": 2}


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_non_finite_samples_rejected(bad: float) -> None:
    with pytest.raises(InvalidInput):
        PolynomialFitter([(0.0, 1.0), (1.0, bad)])


@pytest.mark.parametrize("record", [(1.0,), (1.0, 2.0, 3.0), ("a", 2.0), (1.0, None), 7.0])
def test_malformed_records_rejected(record) -> None:
    with pytest.raises(InvalidInput) as info:
        PolynomialFitter([(0.0, 1.0), record])
    assert info.value.context["index"] == 1
    assert info.value.to_dict()["error_type"] == "InvalidInput"


@pytest.mark.parametrize("xs, ys", [([0.0, "b"], [1.0, 2.0]), ([0.0, 1.0], [1.0, None])])
def test_from_xy_rejects_non_numeric_values(xs, ys) -> None:
    with pytest.raises(InvalidInput) as info:
        PolynomialFitter.from_xy(xs, ys)
    assert info.value.context["index"] == 1


def test_x_values_whose_powers_overflow_are_rejected() -> None:
    with pytest.raises(InvalidInput) as info:
        PolynomialFitter([(0.0, 1.0), (1.0, 1.0), (1e160, 5.0)])
    assert info.value.context["index"] == 2


def test_accepted_fitter_answers_integral_at_large_but_safe_x() -> None:
    fitter = PolynomialFitter([(0.0, 1.0), (1e100, 1.0)])
    assert fitter.integral() == pytest.approx(1e100)


def test_overflowing_coefficients_are_not_returned() -> None:
    with pytest.raises(DegenerateSample):
        PolynomialFitter([(0.0, 1e308), (1e-300, -1e308)])
