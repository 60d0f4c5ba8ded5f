"""Interfaces shared by the fitter and its I/O collaborators.

Exposes the sample record type and a typed Protocol for estimate sinks.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, runtime_checkable

__all__ = [
    "SamplePoint",
    "EstimateSink",
]


class SamplePoint(NamedTuple):
    """One (λ, dG/dλ) observation, or one point of a sampled curve."""

    x: float
    y: float


@runtime_checkable
class EstimateSink(Protocol):
    """Anything that accepts (x, y) records, e.g. a plot-data file."""

    def write_point(self, x: float, y: float) -> None:
        """Consume a single (x, p(x)) record."""
        ...
