import math

from rateconv.domain.exceptions import ConversionError
from rateconv.domain.models.rate import RateUnitPair
from rateconv.domain.models.units import BitsPerSecond


def to_bits_per_second(quantity: float, source: RateUnitPair) -> BitsPerSecond:
    """
    Normalizes a quantity in the source unit pair to bits per second.

    Raises:
        ConversionError: If the intermediate bits-per-second value overflows
    """
    bits = source.size_unit.to_bits(quantity)
    value = source.time_unit.to_per_second(bits)
    if not math.isfinite(value):
        raise ConversionError(
            f"Could not convert {quantity} {source.symbol}: intermediate "
            "bits-per-second value overflowed"
        )
    return BitsPerSecond(value)


def from_bits_per_second(value: BitsPerSecond, target: RateUnitPair) -> float:
    """
    Expresses a bits-per-second value in the target unit pair.

    Raises:
        ConversionError: If the result overflows
    """
    target_bits = target.size_unit.from_bits(value)
    result = target.time_unit.from_per_second(target_bits)
    if not math.isfinite(result):
        raise ConversionError(
            f"Could not convert {value} bits per second to {target.symbol}: "
            "result is out of range"
        )
    return result


def convert(quantity: float, source: RateUnitPair, target: RateUnitPair) -> float:
    """
    Converts a rate between unit pairs via bits per second.

    The order is fixed: size to bits, time to per-second, then bits to the
    target size and per-second to the target time. Changing it changes the
    floating point result.

    Args:
        quantity: Quantity expressed in the source unit pair
        source: Unit pair the quantity is expressed in
        target: Unit pair to express the result in

    Returns:
        Converted quantity

    Raises:
        ConversionError: If the intermediate value or the result is not finite
    """
    return from_bits_per_second(to_bits_per_second(quantity, source), target)
