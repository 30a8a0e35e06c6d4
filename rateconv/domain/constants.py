"""Constants used across the application."""

# Characters accepted between the size and the time unit ("56 kbps", "56 kb/s")
RATE_SEPARATORS = "p/"

# CLI defaults, overridable via RATECONV_OUTPUT_RATE / RATECONV_DECIMALS
DEFAULT_OUTPUT_RATE = "kB/s"
DEFAULT_DECIMAL_PLACES = 2

# Base multipliers for the decimal and binary (IEC) size families
DECIMAL_BASE = 1000.0
BINARY_BASE = 1024.0
BITS_PER_BYTE = 8.0

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 3600 * 24
MILLISECONDS_PER_SECOND = 1000
