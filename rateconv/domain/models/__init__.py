# rateconv/domain/models/__init__.py
from .units import Bits, BitsPerSecond, SizeUnit, TimeUnit
from .rate import ConversionResult, ParsedRate, RateUnitPair

__all__ = [
    "Bits",
    "BitsPerSecond",
    "SizeUnit",
    "TimeUnit",
    "RateUnitPair",
    "ParsedRate",
    "ConversionResult",
]
