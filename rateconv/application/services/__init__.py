# rateconv/application/services/__init__.py
from .rate_parser import (
    RateParser, check_remainder, parse_input_rate, parse_rate_unit_pair,
)
from .converter import convert, from_bits_per_second, to_bits_per_second

__all__ = [
    "RateParser", "check_remainder", "parse_input_rate", "parse_rate_unit_pair",
    "convert", "to_bits_per_second", "from_bits_per_second",
]
