import math
import re

from rateconv.domain.constants import RATE_SEPARATORS
from rateconv.domain.exceptions import (
    MalformedNumberError,
    MalformedSeparatorError,
    TrailingInputError,
)
from rateconv.domain.models.rate import ParsedRate, RateUnitPair
from rateconv.domain.models.units import SizeUnit, TimeUnit

# ASCII only: spaces and tabs, digits 0-9
_WHITESPACE_RE = re.compile(r"[ \t]*")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
# A size token never contains the 'p' separator
_SIZE_TOKEN_RE = re.compile(r"[A-OQ-Za-oq-z]*")
_TIME_TOKEN_RE = re.compile(r"[A-Za-z]*")


class RateParser:
    """
    Parses data rate expressions such as "56 kbps", "1024MB/hr" or "  .5 GiB/d".

    Every parse method consumes a prefix of the input and returns a tuple of
    (remaining text, parsed value). Unconsumed trailing text is not an error
    at this level.
    """

    def __init__(self, separators: str = RATE_SEPARATORS) -> None:
        self.separators = separators

    def _skip_whitespace(self, text: str) -> str:
        return text[_WHITESPACE_RE.match(text).end() :]

    def parse_number(self, text: str) -> tuple[str, float]:
        """Parses a floating point literal (sign, fraction and exponent optional)."""
        match = _NUMBER_RE.match(text)
        if match is None:
            raise MalformedNumberError(text)

        value = float(match.group(0))
        if not math.isfinite(value):
            raise MalformedNumberError(match.group(0))
        return text[match.end() :], value

    def parse_size_unit(self, text: str) -> tuple[str, SizeUnit]:
        """Consumes letters up to the first 'p'/'P' and looks them up as a size unit."""
        match = _SIZE_TOKEN_RE.match(text)
        return text[match.end() :], SizeUnit.from_token(match.group(0))

    def parse_time_unit(self, text: str) -> tuple[str, TimeUnit]:
        match = _TIME_TOKEN_RE.match(text)
        return text[match.end() :], TimeUnit.from_token(match.group(0))

    def parse_separator(self, text: str) -> tuple[str, str]:
        if not text or text[0] not in self.separators:
            raise MalformedSeparatorError(text[:1])
        return text[1:], text[0]

    def parse_rate_unit_pair(self, text: str) -> tuple[str, RateUnitPair]:
        """Parses "<size><p|/><time>" with optional leading whitespace, e.g. "kb/s"."""
        text = self._skip_whitespace(text)
        text, size_unit = self.parse_size_unit(text)
        text, _ = self.parse_separator(text)
        text, time_unit = self.parse_time_unit(text)
        return text, RateUnitPair(size_unit, time_unit)

    def parse_input_rate(self, text: str) -> tuple[str, ParsedRate]:
        """
        Parses a quantity followed by a unit pair, e.g. "123 kb/s".
        Whitespace between the quantity and the unit pair is optional.
        """
        text = self._skip_whitespace(text)
        text, quantity = self.parse_number(text)
        text, unit_pair = self.parse_rate_unit_pair(text)
        return text, ParsedRate(quantity, unit_pair)


_default_parser = RateParser()


def check_remainder(remainder: str, strict: bool = False) -> bool:
    """
    Applies the trailing input policy to text left over after a rate.

    Returns:
        True if non-blank text remains and is being ignored

    Raises:
        TrailingInputError: If non-blank text remains and strict is set
    """
    if not remainder.strip():
        return False
    if strict:
        raise TrailingInputError(remainder)
    return True


def parse_input_rate(text: str, strict: bool = False) -> ParsedRate:
    """
    Parses a full rate expression such as "100 kb/s".

    Args:
        text: Quantity followed by a size unit, separator and time unit
        strict: Reject non-blank text left over after the rate

    Returns:
        ParsedRate with the quantity and its unit pair

    Raises:
        ParseException: If any part of the expression is invalid
    """
    remainder, rate = _default_parser.parse_input_rate(text)
    check_remainder(remainder, strict)
    return rate


def parse_rate_unit_pair(text: str, strict: bool = False) -> RateUnitPair:
    """Parses a unit pair without a quantity, such as "mb/hr" or "kBps"."""
    remainder, unit_pair = _default_parser.parse_rate_unit_pair(text)
    check_remainder(remainder, strict)
    return unit_pair
