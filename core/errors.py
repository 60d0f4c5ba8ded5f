"""Error taxonomy for Lagrange fitting of TI samples.

Every rejected input derives from ``InvalidInput`` (itself a ``ValueError``) so callers can
catch the whole family at once or a specific failure when they care which one it was.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "InvalidInput",
    "InsufficientData",
    "DegenerateSample",
    "CapacityExceeded",
    "SampleFormatError",
]


class InvalidInput(ValueError):
    """Base error for samples the fitter refuses to work with.

    Attributes:
        message: Primary error description.
        context: Offending indices/values, for programmatic inspection.
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = dict(context or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
        }


class InsufficientData(InvalidInput):
    """Fewer than two samples: no polynomial and no interval to integrate over."""


class DegenerateSample(InvalidInput):
    """Repeated x-values (zero Lagrange denominator) or a non-finite coefficient."""


class CapacityExceeded(InvalidInput):
    """More samples than the subset expansion supports."""


class SampleFormatError(InvalidInput):
    """A line of TI data could not be turned into an (x, y) pair."""
