"""Reader for thermodynamic-integration data files.

One sample per line: λ followed by dG/dλ, separated by any mix of whitespace, commas and
semicolons. Lines starting with ``#`` are comments; blank lines are ignored; tokens past
the second are ignored.

Example:
    # lambda, dG/dl
    0.0, 51.49866347
    0.1; 23.92508775
    0.2  10.35390700
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List
import re

from core.errors import SampleFormatError
from core.interfaces import SamplePoint

__all__ = ["parse_sample_lines", "read_samples"]

_DELIMITERS = re.compile(r"[\n\t,; ]+")


def parse_sample_lines(lines: Iterable[str]) -> List[SamplePoint]:
    """Turn text lines into samples, in file order.

    Raises:
        SampleFormatError: a data line with fewer than two tokens or a non-numeric token.
    """
    samples: List[SamplePoint] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line.startswith("#"):
            continue
        tokens = [t for t in _DELIMITERS.split(line) if t]
        if not tokens:
            continue
        if len(tokens) < 2:
            raise SampleFormatError("expected λ and dG/dλ on one line", {"line": lineno, "text": line})
        try:
            x = float(tokens[0])
            y = float(tokens[1])
        except ValueError as exc:
            raise SampleFormatError("non-numeric sample value", {"line": lineno, "text": line}) from exc
        samples.append(SamplePoint(x, y))
    return samples


def read_samples(path: str | Path) -> List[SamplePoint]:
    """Read a TI data file (UTF-8 text) into an ordered list of samples."""
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return parse_sample_lines(f)
