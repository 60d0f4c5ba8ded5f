"""Core package: Lagrange interpolation and integration of TI samples."""

from .errors import CapacityExceeded, DegenerateSample, InsufficientData, InvalidInput, SampleFormatError
from .interfaces import EstimateSink, SamplePoint
from .lagrange import MAX_SAMPLES, CurveSamples, PolynomialFitter

__all__ = [
    "PolynomialFitter",
    "CurveSamples",
    "SamplePoint",
    "EstimateSink",
    "MAX_SAMPLES",
    "InvalidInput",
    "InsufficientData",
    "DegenerateSample",
    "CapacityExceeded",
    "SampleFormatError",
]
