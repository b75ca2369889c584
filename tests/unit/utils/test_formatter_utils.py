from datetime import datetime, timezone
from decimal import Decimal

import pytest

from utils.formatter_utils import (
    decimal_to_str,
    format_units,
    parse_units,
    timestamp_to_datetime,
    to_normalized_address,
)


def test_donation_amount_round_trip():
    units = parse_units("10", 6)

    assert units == 10_000_000
    assert decimal_to_str(format_units(units, 6)) == "10"


@pytest.mark.parametrize("amount, decimals, expected", [
    ("1.5", 6, 1_500_000),
    (Decimal("0.000001"), 6, 1),
    (3, 18, 3 * 10 ** 18),
    (" 2.50 ", 6, 2_500_000),
    (0.1, 6, 100_000),
])
def test_parse_units(amount, decimals, expected):
    assert parse_units(amount, decimals) == expected


@pytest.mark.parametrize("amount", ["1.0000001", "ten", "", "NaN", "Infinity"])
def test_parse_units_rejects(amount):
    with pytest.raises(ValueError):
        parse_units(amount, 6)


def test_format_units_keeps_full_uint256_precision():
    max_uint256 = 2 ** 256 - 1

    scaled = format_units(max_uint256, 18)

    assert parse_units(scaled, 18) == max_uint256


@pytest.mark.parametrize("value, expected", [
    (Decimal("10.000000"), "10"),
    (Decimal("0.250"), "0.25"),
    (Decimal("1E-18"), "0.000000000000000001"),
    (Decimal("0"), "0"),
])
def test_decimal_to_str(value, expected):
    assert decimal_to_str(value) == expected


def test_to_normalized_address():
    assert to_normalized_address(None) is None
    assert to_normalized_address("0xcf9933743d2312ea1383574907cf1a9c6fe4808d") == "0xcf9933743D2312ea1383574907cF1A9c6fE4808d"
    with pytest.raises(ValueError):
        to_normalized_address("0xzz")


def test_timestamp_to_datetime_is_utc():
    assert timestamp_to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("timestamp", [2 ** 62, 2 ** 63 - 1, 2 ** 256 - 1])
def test_timestamp_to_datetime_out_of_range(timestamp):
    with pytest.raises(ValueError, match="out of range"):
        timestamp_to_datetime(timestamp)
