"""Data rate conversion package."""

from rateconv.application.services.converter import convert
from rateconv.application.services.rate_parser import (
    parse_input_rate,
    parse_rate_unit_pair,
)
from rateconv.infrastructure.output.formatters import describe, format_result

__all__ = [
    "parse_input_rate",
    "parse_rate_unit_pair",
    "convert",
    "describe",
    "format_result",
]
