"""Plot-data output for sampled Lagrange curves.

Each record is written as ``"%.4f, %.8f"`` (λ, estimate), one per line.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO, Tuple

from core.interfaces import EstimateSink

__all__ = ["TextEstimateSink", "emit_estimates", "write_estimates"]


@dataclass
class TextEstimateSink:
    """EstimateSink writing comma-separated lines to an open text stream."""

    stream: TextIO
    count: int = 0

    def write_point(self, x: float, y: float) -> None:
        self.stream.write(f"{float(x):.4f}, {float(y):.8f}\n")
        self.count += 1


def emit_estimates(points: Iterable[Tuple[float, float]], sink: EstimateSink) -> int:
    """Push every (x, y) into ``sink``; returns the number of records."""
    n = 0
    for x, y in points:
        sink.write_point(float(x), float(y))
        n += 1
    return n


def write_estimates(path: str | Path, points: Iterable[Tuple[float, float]]) -> Path:
    """Write points to ``path``, replacing any existing file."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", encoding="utf-8") as f:
        emit_estimates(points, TextEstimateSink(f))
    return out
