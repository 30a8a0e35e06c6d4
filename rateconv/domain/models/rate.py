"""Domain models for parsed rates and conversion results"""

from dataclasses import dataclass
from typing import Any, NamedTuple

from rateconv.domain.models.units import SizeUnit, TimeUnit
from rateconv.domain.validators import validate_quantity


class RateUnitPair(NamedTuple):
    """A size unit per time unit, e.g. kilobits per second."""

    size_unit: SizeUnit
    time_unit: TimeUnit

    @property
    def symbol(self) -> str:
        return f"{self.size_unit.symbol}/{self.time_unit.symbol}"

    def describe(self, plural: bool = False) -> str:
        return f"{self.size_unit.describe(plural)} per {self.time_unit.describe()}"


@dataclass(frozen=True, slots=True)
class ParsedRate:
    """A finite quantity together with the unit pair it is expressed in."""

    quantity: float
    unit_pair: RateUnitPair

    def __post_init__(self):
        validate_quantity(self.quantity)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    Result of converting one rate expression into another unit pair.

    Keeps the unconsumed remainders of both inputs so callers can decide
    whether trailing text is acceptable.
    """

    source: ParsedRate
    target_unit_pair: RateUnitPair
    quantity: float
    input_remainder: str = ""
    output_remainder: str = ""

    @property
    def target(self) -> ParsedRate:
        return ParsedRate(self.quantity, self.target_unit_pair)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization"""

        def rate_to_dict(rate: ParsedRate) -> dict[str, Any]:
            return {
                "quantity": rate.quantity,
                "rate": rate.unit_pair.symbol,
                "size_unit": rate.unit_pair.size_unit.display_name,
                "time_unit": rate.unit_pair.time_unit.display_name,
            }

        return {
            "input": rate_to_dict(self.source),
            "output": rate_to_dict(self.target),
        }
