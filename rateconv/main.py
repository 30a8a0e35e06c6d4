import argparse
import sys
from environs import Env, EnvError

from rateconv.logging_config import get_logger, setup_logging
from rateconv.application.orchestration import ConversionService
from rateconv.domain.constants import DEFAULT_DECIMAL_PLACES, DEFAULT_OUTPUT_RATE
from rateconv.domain.exceptions import ConverterException
from rateconv.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
    OutputFormatter,
    VerboseOutputFormatter,
)

logger = get_logger(__name__)


def get_output_formatter(args: argparse.Namespace) -> OutputFormatter:
    """Factory for creating output formatters."""
    if args.json:
        return JSONOutputFormatter()
    elif args.verbose:
        return VerboseOutputFormatter()
    else:
        return ConsoleOutputFormatter()


def build_parser(env: Env) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rateconv",
        description=(
            "Converts data rates e.g. `56 kb/s` between different size and time units. "
            "Lowercase 'b' means bits, uppercase 'B' means bytes, 'KiB' style "
            "units are binary (base 1024)."
        ),
    )
    parser.add_argument(
        "input_rate",
        metavar="INPUT_RATE",
        help="The data rate to convert (e.g. '64 kb/s' or 64kbps)",
    )
    parser.add_argument(
        "output_rate",
        metavar="OUTPUT_RATE",
        nargs="?",
        default=env.str("RATECONV_OUTPUT_RATE", DEFAULT_OUTPUT_RATE),
        help="The desired output size and time units (e.g. mb/sec, default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-d",
        "--decimals",
        dest="decimal_places",
        type=int,
        default=env.int("RATECONV_DECIMALS", DEFAULT_DECIMAL_PLACES),
        help="The number of decimal places in the output (default: %(default)s)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON document",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject text left over after a rate instead of ignoring it",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    env = Env()
    try:
        setup_logging(env)
        parser = build_parser(env)
    except (EnvError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = parser.parse_args(argv)

    service = ConversionService()
    formatter = get_output_formatter(args)

    try:
        result = service.convert(args.input_rate, args.output_rate, strict=args.strict)
        output = formatter.format_result(result, args.decimal_places)
    except ConverterException as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
