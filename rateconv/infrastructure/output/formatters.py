"""Output formatting services for console display."""

import json
from typing import Protocol

from rateconv.domain.models.rate import ConversionResult, RateUnitPair
from rateconv.domain.validators import validate_decimal_places


def format_quantity(quantity: float) -> str:
    """Shortest readable form of a quantity: 100.0 -> "100", 0.5 -> "0.5"."""
    if quantity.is_integer() and abs(quantity) < 1e16:
        return str(int(quantity))
    return repr(quantity)


def describe(pair: RateUnitPair, plural: bool) -> str:
    """Human readable unit pair, e.g. "kilobits per second"."""
    return pair.describe(plural)


def format_result(quantity: float, pair: RateUnitPair, decimal_places: int) -> str:
    """Fixed point quantity followed by the compact unit pair, e.g. "12.50 kB/s"."""
    validate_decimal_places(decimal_places)
    return f"{quantity:.{decimal_places}f} {pair.symbol}"


class OutputFormatter(Protocol):
    """Protocol for output formatting strategies"""

    def format_result(self, result: ConversionResult, decimal_places: int) -> str:
        """Render a conversion result as text"""
        ...


class ConsoleOutputFormatter:
    """Compact single line output"""

    def format_result(self, result: ConversionResult, decimal_places: int) -> str:
        return "Converted rate: " + format_result(
            result.quantity, result.target_unit_pair, decimal_places
        )


class VerboseOutputFormatter:
    """Descriptive sentence with spelled out unit names"""

    def format_result(self, result: ConversionResult, decimal_places: int) -> str:
        validate_decimal_places(decimal_places)
        source = result.source
        input_desc = describe(source.unit_pair, source.quantity != 1.0)
        output_desc = describe(result.target_unit_pair, result.quantity != 1.0)
        return (
            f"{format_quantity(source.quantity)} {input_desc} is equivalent to "
            f"{result.quantity:.{decimal_places}f} {output_desc}"
        )


class JSONOutputFormatter:
    """Format conversion results as JSON (for scripting)"""

    def format_result(self, result: ConversionResult, decimal_places: int) -> str:
        validate_decimal_places(decimal_places)
        output_dict = result.to_dict()
        output_dict["output"]["quantity"] = round(result.quantity, decimal_places)
        output_dict["output"]["formatted"] = format_result(
            result.quantity, result.target_unit_pair, decimal_places
        )
        return json.dumps(output_dict, indent=2)
