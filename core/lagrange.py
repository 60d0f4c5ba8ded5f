"""Lagrange interpolating polynomial for thermodynamic-integration (TI) samples.

Given samples (λ_i, dG/dλ_i), the unique degree-(N−1) polynomial through all of them is

    p(x) = Σ_i y_i · L_i(x),     L_i(x) = Π_{j≠i} (x − x_j) / (x_i − x_j).

Rather than evaluating L_i pointwise, each numerator Π_{j≠i}(x − x_j) is expanded into
monomial coefficients by enumerating every subset of the other x-values as a bitmask:

    Π_k (x − a_k) = Σ_S (−1)^{|S|} (Π_{k∈S} a_k) x^{m−|S|},   m = N − 1,

with each subset's signed product added to the bucket indexed by its popcount |S|. The
buckets come out highest power first, so the accumulated vector is reversed once at the
end to give ``coefficients()[k]`` = coefficient of x^k. Cost is O(N · 2^(N−1)).

The free-energy difference is then the analytic integral of p over [first λ, last λ];
the trapezoid rule over the raw samples is provided as an independent cross-check.

Usage:
    fitter = PolynomialFitter([(0.0, 1.0), (1.0, 2.0), (2.0, 5.0)])
    fitter.coefficients()   # [1.0, 0.0, 1.0]  ->  p(x) = 1 + x^2
    fitter.integral()       # 14/3
    fitter.quadrature()     # 5.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Sequence, Tuple
import math

import numpy as np

from .errors import CapacityExceeded, DegenerateSample, InsufficientData, InvalidInput
from .interfaces import SamplePoint

__all__ = [
    "MAX_SAMPLES",
    "PolynomialFitter",
    "CurveSamples",
    "expand_linear_factors",
    "derive_coefficients",
    "evaluate_polynomial",
    "integrate_polynomial",
    "trapezoid_area",
]

# Width of the subset register: N − 1 roots must fit in a 32-bit mask.
MAX_SAMPLES = 32

# Masks enumerated per NumPy block; bounds the (block, m) bit matrix.
_MASK_BLOCK = 1 << 14


def expand_linear_factors(roots: Sequence[float]) -> List[float]:
    """Expand Π_k (x − a_k) into monomial coefficients via subset enumeration.

    Args:
        roots: the values a_0..a_{m−1}; mask bit k selects a_k.

    Returns:
        term of length m + 1 with term[c] the coefficient of x^(m−c), i.e. ordered
        from the highest power down to the constant term.
    """
    a = np.asarray(roots, dtype=float)
    assert a.ndim == 1, "roots must be one-dimensional"
    m = int(a.shape[0])
    assert m < MAX_SAMPLES, "too many roots for the subset register"
    neg = -a
    shifts = np.arange(m, dtype=np.int64)
    term = np.zeros(m + 1, dtype=float)
    total = 1 << m
    for start in range(0, total, _MASK_BLOCK):
        masks = np.arange(start, min(start + _MASK_BLOCK, total), dtype=np.int64)
        bits = ((masks[:, None] >> shifts[None, :]) & 1).astype(bool)
        # signed subset product: (−a_j) for each set bit, 1 otherwise
        products = np.where(bits, neg[None, :], 1.0).prod(axis=1)
        counts = bits.sum(axis=1)
        term += np.bincount(counts, weights=products, minlength=m + 1)
    return [float(t) for t in term]


def derive_coefficients(points: Sequence[SamplePoint]) -> List[float]:
    """Coefficients of the interpolating polynomial, lowest power first.

    Raises:
        DegenerateSample: a zero denominator (repeated x) or a non-finite result.
    """
    n = len(points)
    assert n >= 1, "need at least one point"
    factor = np.zeros(n, dtype=float)
    for i, p in enumerate(points):
        denominator = 1.0
        roots: List[float] = []
        for j, q in enumerate(points):
            if i == j:
                continue
            denominator *= p.x - q.x
            roots.append(q.x)
        if denominator == 0.0:
            repeats = [j for j, q in enumerate(points) if j != i and q.x == p.x]
            raise DegenerateSample(
                "repeated x-value makes the Lagrange denominator zero",
                {"index": i, "x": p.x, "repeated_at": repeats},
            )
        term = expand_linear_factors(roots)
        assert len(term) == n, "expansion length mismatch"
        factor += (p.y / denominator) * np.asarray(term, dtype=float)
    # buckets run from x^(n−1) down to x^0
    coefficients = factor[::-1]
    if not np.all(np.isfinite(coefficients)):
        raise DegenerateSample(
            "non-finite polynomial coefficient",
            {"coefficients": [float(c) for c in coefficients]},
        )
    return [float(c) for c in coefficients]


def evaluate_polynomial(coefficients: Sequence[float], x: float) -> float:
    """Direct power sum Σ c_k x^k.

    Raises:
        OverflowError: ``x ** k`` leaves the float range for some k.
    """
    value = 0.0
    for k, c in enumerate(coefficients):
        value += float(c) * float(x) ** k
    return float(value)


def integrate_polynomial(coefficients: Sequence[float], lower: float, upper: float) -> float:
    """Closed-form ∫_lower^upper Σ c_k x^k dx.

    Raises:
        OverflowError: a bound raised to the power ``len(coefficients)`` leaves the float range.
    """
    area = 0.0
    for k, c in enumerate(coefficients):
        power = k + 1
        area += float(c) * (float(upper) ** power - float(lower) ** power) / power
    return float(area)


def trapezoid_area(points: Sequence[SamplePoint]) -> float:
    """Signed trapezoid rule over consecutive pairs, in sequence order."""
    assert len(points) >= 2, "trapezoid rule needs at least two points"
    area = 0.0
    for a, b in zip(points[:-1], points[1:]):
        area += 0.5 * (a.y + b.y) * (b.x - a.x)
    return float(area)


def _to_point(idx: int, record: Any) -> SamplePoint:
    try:
        x, y = record
        return SamplePoint(float(x), float(y))
    except (TypeError, ValueError) as exc:
        raise InvalidInput("malformed sample", {"index": idx, "record": record}) from exc


def _as_floats(name: str, values: Iterable[float]) -> List[float]:
    out: List[float] = []
    for idx, v in enumerate(values):
        try:
            out.append(float(v))
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"non-numeric value in {name}", {"index": idx, "value": v}) from exc
    return out


def _to_points(samples: Iterable[Tuple[float, float]]) -> Tuple[SamplePoint, ...]:
    points = tuple(_to_point(idx, rec) for idx, rec in enumerate(samples))
    n = len(points)
    if n < 2:
        raise InsufficientData("at least 2 samples are required", {"count": n})
    if n > MAX_SAMPLES:
        raise CapacityExceeded(
            f"at most {MAX_SAMPLES} samples are supported", {"count": n}
        )
    for idx, p in enumerate(points):
        if not (math.isfinite(p.x) and math.isfinite(p.y)):
            raise InvalidInput("non-finite sample", {"index": idx, "x": p.x, "y": p.y})
        # integral() raises the bounds to the power n
        try:
            abs(p.x) ** n
        except OverflowError as exc:
            raise InvalidInput(f"x-value too large for a degree-{n - 1} polynomial", {"index": idx, "x": p.x}) from exc
    return points


@dataclass(frozen=True)
class CurveSamples:
    """Lazy view of p(x) on x = s/steps for s = 0..steps; iterable any number of times."""

    coefficients: Tuple[float, ...]
    steps: int

    def __post_init__(self) -> None:
        if isinstance(self.steps, bool) or not isinstance(self.steps, (int, np.integer)):
            raise InvalidInput("steps must be an integer", {"steps": self.steps})
        if self.steps <= 0:
            raise InvalidInput("steps must be positive", {"steps": int(self.steps)})
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))
        object.__setattr__(self, "steps", int(self.steps))

    def __len__(self) -> int:
        return self.steps + 1

    def __iter__(self) -> Iterator[SamplePoint]:
        for s in range(self.steps + 1):
            x = s / self.steps
            yield SamplePoint(x, evaluate_polynomial(self.coefficients, x))


@dataclass(frozen=True)
class PolynomialFitter:
    """Interpolating polynomial through an ordered TI sample, derived at construction.

    Args:
        samples: ordered (x, y) pairs, assumed ascending in x. A private tuple copy is kept.

    Raises:
        InsufficientData: fewer than 2 samples.
        CapacityExceeded: more than ``MAX_SAMPLES`` samples.
        DegenerateSample: repeated x-values.
        InvalidInput: malformed records, non-finite coordinates, or x-values whose
            powers overflow.
    """

    samples: Tuple[SamplePoint, ...]
    _factor: Tuple[float, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        points = _to_points(self.samples)
        object.__setattr__(self, "samples", points)
        object.__setattr__(self, "_factor", tuple(derive_coefficients(points)))

    @classmethod
    def from_xy(cls, xs: Iterable[float], ys: Iterable[float]) -> "PolynomialFitter":
        """Build from two parallel coordinate sequences of equal length."""
        xs_list = _as_floats("xs", xs)
        ys_list = _as_floats("ys", ys)
        if len(xs_list) != len(ys_list):
            raise InvalidInput(
                "xs and ys must have the same length",
                {"len_xs": len(xs_list), "len_ys": len(ys_list)},
            )
        return cls(tuple(zip(xs_list, ys_list)))

    def with_samples(self, samples: Iterable[Tuple[float, float]]) -> "PolynomialFitter":
        """Reload: a new fitter over ``samples``; this one is left as it was."""
        return type(self)(samples)

    @property
    def degree(self) -> int:
        return len(self._factor) - 1

    def __len__(self) -> int:
        return len(self.samples)

    def __repr__(self) -> str:
        return f"PolynomialFitter(n={len(self.samples)}, degree={self.degree})"

    def coefficients(self) -> List[float]:
        """Coefficients c_0..c_{N−1}; index k multiplies x^k."""
        return list(self._factor)

    def evaluate(self, x: float) -> float:
        """p(x) by direct power sum; may raise OverflowError for very large |x|."""
        return evaluate_polynomial(self._factor, x)

    def integral(self) -> float:
        """Analytic ∫ p(x) dx from the first sample's x to the last sample's x."""
        return integrate_polynomial(self._factor, self.samples[0].x, self.samples[-1].x)

    def quadrature(self) -> float:
        """Trapezoid rule over the raw samples; does not use the polynomial."""
        return trapezoid_area(self.samples)

    def sample(self, steps: int) -> CurveSamples:
        """p(x) at ``steps + 1`` evenly spaced points from 0.0 to 1.0 (λ grid)."""
        return CurveSamples(self._factor, steps)
