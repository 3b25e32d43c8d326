from __future__ import annotations

from decimal import Decimal

import pytest

from moneta.domain.monetary.currency import Currency, CurrencyType
from moneta.domain.monetary.currency_registry import BTC, CHF, CZK, ETH, EUR, JPY, USD
from moneta.domain.monetary.errors import InvalidArgument
from moneta.domain.monetary.money import Money
from moneta.domain.monetary.units import amount_to_units, units_to_amount

# region Minor units


@pytest.mark.parametrize(
    "amount, currency, expected",
    [
        (5.999, USD, 599),
        (-5.999, USD, -599),
        (Decimal("0.01"), USD, 1),
        (Decimal("1234.9"), JPY, 1234),
        (Decimal("0.00000001"), BTC, 1),
        (Decimal("12345678901234567890.12"), USD, 1234567890123456789012),
        (Decimal("5.9999999999999999999999999999"), USD, 599),
        (Decimal("-5.9999999999999999999999999999"), USD, -599),
    ],
)
def test_get_units_truncates_toward_zero(amount, currency, expected):
    assert Money(amount, currency).get_units() == expected


def test_units_round_trip_through_from_units():
    assert Money.from_units(123456, USD).get_units() == 123456
    assert amount_to_units(units_to_amount(-42, BTC), BTC) == -42


def test_units_round_trip_beyond_default_decimal_precision():
    units = 10**40 + 1
    assert Money.from_units(units, USD).get_units() == units
    assert Money.from_units(units, USD).amount == Decimal("100000000000000000000000000000000000000.01")


# endregion

# region String to units


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-12.3", -1230),
        ("42", 4200),
        ("42.", 4200),
        ("0.05", 5),
        ("1,05", 105),
        ("-0,5", -50),
        (" 7.25 ", 725),
        ("007.10", 710),
        ("123456789012345678.99", 12345678901234567899),
    ],
)
def test_string_to_units(text, expected):
    assert Money.string_to_units(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "12.345", "1,234.56", "+5", "--1", "$5", ".5", "5 USD", "1e3", "\u0661\u0662.\u0665", "\uff11\uff12"])
def test_string_to_units_rejects_malformed_text(text):
    with pytest.raises(InvalidArgument, match="The value could not be parsed as money"):
        Money.string_to_units(text)


def test_string_to_units_rejects_non_string():
    with pytest.raises(InvalidArgument, match="The value could not be parsed as money"):
        Money.string_to_units(12.3)


# endregion

# region Formatting


@pytest.mark.parametrize(
    "money, expected",
    [
        (Money(5.0, USD), "$5.00"),
        (Money.from_units(5, USD), "$0.05"),
        (Money(1234567.891, USD), "$1,234,567.89"),
        (Money(-1234.5, USD), "-$1,234.50"),
        (Money(0.005, USD), "$0.01"),
        (Money(1234.5, EUR), "1.234,50€"),
        (Money(-1234.5, EUR), "-1.234,50€"),
        (Money(1234567.5, CZK), "1 234 567,50 Kč"),
        (Money(9876.5, CHF), "CHF 9'876.50"),
        (Money(1234.5, JPY), "¥1,235"),
        (Money(Decimal("0.5"), BTC), "₿0.50000000"),
    ],
)
def test_formatted_string(money, expected):
    assert money.formatted_string() == expected


def test_formatted_string_of_amounts_wider_than_default_decimal_precision():
    assert Money(12345678901.0, ETH).formatted_string() == "\u039e12,345,678,901.000000000000000000"
    assert Money(Decimal("100000000000000000000.5"), BTC).formatted_string() == "\u20bf100,000,000,000,000,000,000.50000000"
    assert Money(Decimal("-99999999999999999999999999999.995"), USD).formatted_string() == "-$100,000,000,000,000,000,000,000,000,000.00"


def test_formatted_string_omits_sign_when_rounded_to_zero():
    assert Money(-0.001, USD).formatted_string() == "$0.00"


def test_formatted_string_uses_custom_currency_metadata():
    points = Currency("PTS", 3, "Loyalty Points", CurrencyType.COMMODITY, " pts", symbol_first=False, decimal_separator=",", thousand_separator="_")
    assert Money(Decimal("-12345.6789"), points).formatted_string() == "-12_345,679 pts"


# endregion
