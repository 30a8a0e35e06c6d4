import itertools

import pytest

from rateconv.application.services.converter import (
    convert,
    from_bits_per_second,
    to_bits_per_second,
)
from rateconv.domain.exceptions import ConversionError
from rateconv.domain.models.rate import RateUnitPair
from rateconv.domain.models.units import SizeUnit, TimeUnit


def pair(size_unit: SizeUnit, time_unit: TimeUnit) -> RateUnitPair:
    return RateUnitPair(size_unit, time_unit)


@pytest.mark.parametrize(
    "quantity, source, target, expected",
    [
        # kbit/s -> mbit/s
        (
            1000.0,
            pair(SizeUnit.KILOBIT, TimeUnit.SECOND),
            pair(SizeUnit.MEGABIT, TimeUnit.SECOND),
            1.0,
        ),
        # GB/h -> GB/s
        (
            1.0,
            pair(SizeUnit.GIGABYTE, TimeUnit.HOUR),
            pair(SizeUnit.GIGABYTE, TimeUnit.SECOND),
            1.0 / 3600.0,
        ),
        # MiB/min -> GiB/h
        (
            500.0,
            pair(SizeUnit.MEBIBYTE, TimeUnit.MINUTE),
            pair(SizeUnit.GIBIBYTE, TimeUnit.HOUR),
            500.0 * 60.0 / 1024.0,
        ),
        # mbit/min -> gbit/h
        (
            500.0,
            pair(SizeUnit.MEGABIT, TimeUnit.MINUTE),
            pair(SizeUnit.GIGABIT, TimeUnit.HOUR),
            30.0,
        ),
        # kbit/ms -> kbit/s
        (
            1000.0,
            pair(SizeUnit.KILOBIT, TimeUnit.MILLISECOND),
            pair(SizeUnit.KILOBIT, TimeUnit.SECOND),
            1_000_000.0,
        ),
        # B/day -> B/s
        (
            1.0,
            pair(SizeUnit.BYTE, TimeUnit.DAY),
            pair(SizeUnit.BYTE, TimeUnit.SECOND),
            1.0 / (3600.0 * 24.0),
        ),
        # kB/s -> KiB/s
        (
            1024.0,
            pair(SizeUnit.KILOBYTE, TimeUnit.SECOND),
            pair(SizeUnit.KIBIBYTE, TimeUnit.SECOND),
            1000.0,
        ),
        # bytes -> bits
        (
            3.0,
            pair(SizeUnit.BYTE, TimeUnit.SECOND),
            pair(SizeUnit.BIT, TimeUnit.SECOND),
            24.0,
        ),
    ],
)
def test_convert(quantity, source, target, expected):
    # very large or small values are only accurate to around 6 significant digits
    assert convert(quantity, source, target) == pytest.approx(expected, rel=1e-6)


def test_convert_exact_reference_values():
    assert convert(
        1000.0,
        pair(SizeUnit.KILOBIT, TimeUnit.SECOND),
        pair(SizeUnit.MEGABIT, TimeUnit.SECOND),
    ) == 1.0
    assert convert(
        500.0,
        pair(SizeUnit.MEGABIT, TimeUnit.MINUTE),
        pair(SizeUnit.GIGABIT, TimeUnit.HOUR),
    ) == pytest.approx(30.0)


def test_decimal_output_matches_reference():
    result = convert(
        1.0,
        pair(SizeUnit.GIGABYTE, TimeUnit.HOUR),
        pair(SizeUnit.GIGABYTE, TimeUnit.SECOND),
    )
    assert f"{result:.6f}" == f"{1.0 / 3600.0:.6f}" == "0.000278"


@pytest.mark.parametrize("quantity", [0.0, -250.0])
def test_convert_is_linear_for_zero_and_negative(quantity):
    source = pair(SizeUnit.KILOBYTE, TimeUnit.SECOND)
    target = pair(SizeUnit.KILOBIT, TimeUnit.SECOND)
    assert convert(quantity, source, target) == pytest.approx(quantity * 8)


def test_every_unit_pair_converts():
    pairs = [pair(s, t) for s in SizeUnit for t in TimeUnit]
    for source, target in itertools.product(pairs, pairs):
        result = convert(1000.0, source, target)
        assert result > 0
        assert convert(result, target, source) == pytest.approx(1000.0, rel=1e-6)


def test_normalization_helpers():
    bps = to_bits_per_second(1.0, pair(SizeUnit.KILOBYTE, TimeUnit.MILLISECOND))
    assert bps == 8_000_000.0
    assert from_bits_per_second(bps, pair(SizeUnit.MEGABYTE, TimeUnit.SECOND)) == 1.0


def test_convert_intermediate_overflow_raises():
    """Identity conversions still overflow when bits per second is not finite"""
    tib_ms = pair(SizeUnit.TEBIBYTE, TimeUnit.MILLISECOND)
    with pytest.raises(ConversionError, match="intermediate bits-per-second value overflowed"):
        convert(1e300, tib_ms, tib_ms)


def test_convert_result_overflow_raises():
    # 1e306 b/s is finite, 1e306 * 86400 b/d is not
    with pytest.raises(ConversionError, match="result is out of range"):
        convert(
            1e306,
            pair(SizeUnit.BIT, TimeUnit.SECOND),
            pair(SizeUnit.BIT, TimeUnit.DAY),
        )
