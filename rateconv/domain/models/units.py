# rateconv/domain/models/units.py
"""
Unit definitions for data rate conversion.

Every size unit knows how many bits one unit holds, every time unit knows how
to rescale a "per unit" quantity to and from "per second". Bits per second is
the canonical representation all conversions pass through.

Usage:
    from rateconv.domain.models.units import SizeUnit, TimeUnit

    bits = SizeUnit.from_token("KiB").to_bits(4.0)  # 32768.0
    bps = TimeUnit.from_token("min").to_per_second(bits)
"""

from enum import Enum
from typing import NewType

from rateconv.domain.constants import (
    BINARY_BASE,
    BITS_PER_BYTE,
    DECIMAL_BASE,
    MILLISECONDS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from rateconv.domain.exceptions import (
    UnrecognizedSizeUnitError,
    UnrecognizedTimeUnitError,
)

# Canonical intermediate quantities
Bits = NewType("Bits", float)
BitsPerSecond = NewType("BitsPerSecond", float)


class SizeUnit(Enum):
    """A unit of digital information volume.

    Member values are ``(symbol, display_name, tokens, bits_per_unit)``.
    Token matching is case-sensitive: lowercase ``b`` is a bit, uppercase
    ``B`` a byte, and an ``i`` after the prefix selects the binary family.
    """

    BIT = ("b", "bit", ("b", "bits", "Bits"), 1.0)
    KILOBIT = ("kb", "kilobit", ("kb", "kbits", "KBits"), DECIMAL_BASE)
    MEGABIT = ("mb", "megabit", ("mb", "mbits", "MBits"), DECIMAL_BASE**2)
    GIGABIT = ("gb", "gigabit", ("gb", "gbits", "GBits"), DECIMAL_BASE**3)
    TERABIT = ("tb", "terabit", ("tb", "tbits", "TBits"), DECIMAL_BASE**4)
    BYTE = ("B", "byte", ("B", "bytes"), BITS_PER_BYTE)
    KILOBYTE = (
        "kB",
        "kilobyte",
        ("kB", "KB", "kBytes", "KBytes"),
        BITS_PER_BYTE * DECIMAL_BASE,
    )
    MEGABYTE = (
        "MB",
        "megabyte",
        ("mB", "MB", "mBytes", "MBytes"),
        BITS_PER_BYTE * DECIMAL_BASE**2,
    )
    GIGABYTE = (
        "GB",
        "gigabyte",
        ("gB", "GB", "gBytes", "GBytes"),
        BITS_PER_BYTE * DECIMAL_BASE**3,
    )
    TERABYTE = (
        "TB",
        "terabyte",
        ("tB", "TB", "tBytes", "TBytes"),
        BITS_PER_BYTE * DECIMAL_BASE**4,
    )
    KIBIBYTE = (
        "KiB",
        "kibibyte",
        ("kiB", "KiB", "kibiBytes", "KibiBytes"),
        BITS_PER_BYTE * BINARY_BASE,
    )
    MEBIBYTE = (
        "MiB",
        "mebibyte",
        ("miB", "MiB", "mebiBytes", "MebiBytes"),
        BITS_PER_BYTE * BINARY_BASE**2,
    )
    GIBIBYTE = (
        "GiB",
        "gibibyte",
        ("giB", "GiB", "gibiBytes", "GibiBytes"),
        BITS_PER_BYTE * BINARY_BASE**3,
    )
    TEBIBYTE = (
        "TiB",
        "tebibyte",
        ("tiB", "TiB", "tebiBytes", "TebiBytes"),
        BITS_PER_BYTE * BINARY_BASE**4,
    )

    def __init__(
        self,
        symbol: str,
        display_name: str,
        tokens: tuple[str, ...],
        bits_per_unit: float,
    ):
        self.symbol = symbol
        self.display_name = display_name
        self.tokens = tokens
        self.bits_per_unit = bits_per_unit

    @classmethod
    def from_token(cls, token: str) -> "SizeUnit":
        """Look up a size unit by one of its accepted spellings."""
        try:
            return _SIZE_UNITS_BY_TOKEN[token]
        except KeyError:
            raise UnrecognizedSizeUnitError(token) from None

    def to_bits(self, quantity: float) -> Bits:
        return Bits(quantity * self.bits_per_unit)

    def from_bits(self, bits: float) -> float:
        return bits / self.bits_per_unit

    def describe(self, plural: bool = False) -> str:
        return f"{self.display_name}s" if plural else self.display_name

    def __str__(self) -> str:
        return self.display_name


class TimeUnit(Enum):
    """A unit of duration used as the denominator of a rate.

    Member values are ``(symbol, display_name, tokens, seconds, subdivisions)``;
    one unit lasts ``seconds / subdivisions`` seconds.
    """

    MILLISECOND = ("ms", "millisecond", ("ms",), 1, MILLISECONDS_PER_SECOND)
    SECOND = ("s", "second", ("s", "sec", "second"), 1, 1)
    MINUTE = ("min", "minute", ("m", "min"), SECONDS_PER_MINUTE, 1)
    HOUR = ("h", "hour", ("h", "hr", "hour"), SECONDS_PER_HOUR, 1)
    DAY = ("d", "day", ("d", "day"), SECONDS_PER_DAY, 1)

    def __init__(
        self,
        symbol: str,
        display_name: str,
        tokens: tuple[str, ...],
        seconds: int,
        subdivisions: int,
    ):
        self.symbol = symbol
        self.display_name = display_name
        self.tokens = tokens
        self.seconds = seconds
        self.subdivisions = subdivisions

    @classmethod
    def from_token(cls, token: str) -> "TimeUnit":
        """Look up a time unit by one of its accepted spellings."""
        try:
            return _TIME_UNITS_BY_TOKEN[token]
        except KeyError:
            raise UnrecognizedTimeUnitError(token) from None

    def to_per_second(self, quantity: float) -> float:
        """Rescale a quantity per this unit of time into a quantity per second."""
        # ms: x * 1000 / 1, longer units: x * 1 / N
        return quantity * self.subdivisions / self.seconds

    def from_per_second(self, quantity: float) -> float:
        """Rescale a quantity per second into a quantity per this unit of time."""
        return quantity * self.seconds / self.subdivisions

    def describe(self, plural: bool = False) -> str:
        return f"{self.display_name}s" if plural else self.display_name

    def __str__(self) -> str:
        return self.display_name


_SIZE_UNITS_BY_TOKEN: dict[str, SizeUnit] = {
    token: unit for unit in SizeUnit for token in unit.tokens
}
_TIME_UNITS_BY_TOKEN: dict[str, TimeUnit] = {
    token: unit for unit in TimeUnit for token in unit.tokens
}
