"""Orchestration service (parse and convert workflow)"""

import logging
from typing import Optional

from rateconv.application.services.converter import (
    from_bits_per_second,
    to_bits_per_second,
)
from rateconv.application.services.rate_parser import RateParser, check_remainder
from rateconv.domain.models.rate import ConversionResult
from rateconv.domain.validators import validate_rate_argument

logger = logging.getLogger(__name__)


class ConversionService:
    """
    Coordinates parsing of both rate arguments and the conversion between them.

    The parser is injected so alternative separators or a stub can be used in tests.
    """

    def __init__(self, parser: Optional[RateParser] = None):
        self.parser = parser or RateParser()

    def convert(
        self, input_rate: str, output_rate: str, strict: bool = False
    ) -> ConversionResult:
        """
        Execute the conversion workflow.

        Steps:
        1. Check both arguments are present
        2. Parse the input rate (quantity + unit pair)
        3. Parse the output unit pair
        4. Convert through bits per second

        Args:
            input_rate: Rate to convert, e.g. "100 kb/s"
            output_rate: Target unit pair, e.g. "mb/hr"
            strict: Reject text left over after either rate

        Returns:
            ConversionResult with the parsed input, target pair and converted quantity
        """
        validate_rate_argument(input_rate, "INPUT_RATE")
        validate_rate_argument(output_rate, "OUTPUT_RATE")

        input_remainder, source = self.parser.parse_input_rate(input_rate)
        self._check_remainder(input_remainder, strict, input_rate)
        output_remainder, target_pair = self.parser.parse_rate_unit_pair(output_rate)
        self._check_remainder(output_remainder, strict, output_rate)

        logger.debug(
            "Parsed input %r as %s %s", input_rate, source.quantity, source.unit_pair
        )
        logger.debug("Parsed output %r as %s", output_rate, target_pair)

        bits_per_second = to_bits_per_second(source.quantity, source.unit_pair)
        logger.debug("Normalized to %s bits per second", bits_per_second)

        quantity = from_bits_per_second(bits_per_second, target_pair)
        logger.debug("Converted to %s %s", quantity, target_pair.symbol)

        return ConversionResult(
            source=source,
            target_unit_pair=target_pair,
            quantity=quantity,
            input_remainder=input_remainder,
            output_remainder=output_remainder,
        )

    def _check_remainder(self, remainder: str, strict: bool, original: str) -> None:
        if check_remainder(remainder, strict):
            logger.warning("Ignoring trailing input %r in %r", remainder, original)
