from __future__ import annotations

from decimal import Decimal

import pytest

from moneta.domain.monetary.currency import Currency, CurrencyType
from moneta.domain.monetary.currency_registry import EUR, JPY, USD
from moneta.domain.monetary.errors import InvalidArgument
from moneta.domain.monetary.money import Money


# region Construction


def test_construct_from_float_keeps_exact_decimal_value():
    money = Money(5.999, USD)
    assert money.amount == Decimal("5.999")
    assert money.currency is USD


def test_construct_from_decimal_is_not_quantized():
    money = Money(Decimal("1.23456"), USD)
    assert money.amount == Decimal("1.23456")


@pytest.mark.parametrize("amount", [5, 0, True, "5.0", None, [5.0]])
def test_construct_rejects_non_float_amount(amount):
    with pytest.raises(InvalidArgument, match="must be a float or Decimal"):
        Money(amount, USD)


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), Decimal("-Infinity")])
def test_construct_rejects_non_finite_amount(amount):
    with pytest.raises(InvalidArgument, match="is not finite"):
        Money(amount, USD)


def test_construct_rejects_non_currency():
    with pytest.raises(InvalidArgument, match="must be a Currency instance"):
        Money(5.0, "USD")


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        Money(5, USD)


def test_of_looks_up_currency_by_code():
    money = Money.of("usd", 5.0)
    assert money.currency is USD
    assert money.amount == Decimal("5.0")


def test_of_still_rejects_integer_amount():
    with pytest.raises(InvalidArgument):
        Money.of("USD", 5)


def test_of_rejects_unknown_code():
    with pytest.raises(InvalidArgument, match="not found in registry"):
        Money.of("XYZ", 5.0)


def test_from_units_converts_minor_units_exactly():
    assert Money.from_units(505, USD).amount == Decimal("5.05")
    assert Money.from_units(-7, USD).amount == Decimal("-0.07")
    assert Money.from_units(1500, JPY).amount == Decimal("1500")


def test_from_units_rejects_non_integer():
    with pytest.raises(InvalidArgument, match="must be an integer"):
        Money.from_units(5.5, USD)


def test_money_is_immutable():
    money = Money(5.0, USD)
    with pytest.raises(AttributeError):
        money.amount = Decimal("6")
    with pytest.raises(AttributeError):
        money.extra = 1


# endregion

# region Equality and ordering


def test_is_same_currency_compares_codes():
    usd_copy = Currency("usd", 2, "Other Dollar", CurrencyType.FIAT, "US$")
    assert Money(1.0, USD).is_same_currency(Money(2.0, usd_copy))
    assert not Money(1.0, USD).is_same_currency(Money(1.0, EUR))


def test_equals_requires_same_currency_and_amount():
    assert Money(1.0, USD).equals(Money(Decimal("1.00"), USD))
    assert Money(1.0, USD) == Money(Decimal("1.00"), USD)
    assert not Money(1.0, USD).equals(Money(1.0, EUR))
    assert not Money(1.0, USD).equals(Money(1.5, USD))
    assert Money(1.0, USD) != "1.0 USD"


def test_equal_money_has_equal_hash():
    assert hash(Money(1.0, USD)) == hash(Money(Decimal("1.000"), USD))
    assert len({Money(1.0, USD), Money(Decimal("1.00"), USD), Money(1.0, EUR)}) == 2


def test_compare_returns_ordering():
    small, large = Money(1.0, USD), Money(2.5, USD)
    assert small.compare(large) == -1
    assert large.compare(small) == 1
    assert small.compare(Money(1.0, USD)) == 0
    assert large.greater_than(small)
    assert small.less_than(large)
    assert not small.greater_than(Money(1.0, USD))
    assert not small.less_than(Money(1.0, USD))


def test_rich_comparisons_follow_compare():
    small, large = Money(1.0, USD), Money(2.5, USD)
    assert small < large
    assert small <= Money(1.0, USD)
    assert large > small
    assert large >= Money(2.5, USD)
    assert sorted([large, small]) == [small, large]


@pytest.mark.parametrize("method", ["compare", "greater_than", "less_than"])
def test_compare_rejects_different_currencies(method):
    with pytest.raises(InvalidArgument, match="Different currencies"):
        getattr(Money(1.0, USD), method)(Money(1.0, EUR))


def test_rich_comparison_rejects_different_currencies():
    with pytest.raises(InvalidArgument, match="Different currencies"):
        _ = Money(1.0, USD) < Money(1.0, EUR)


@pytest.mark.parametrize(
    "amount, is_zero, is_positive, is_negative",
    [
        (0.0, True, False, False),
        (-0.0, True, False, False),
        (Decimal("0.01"), False, True, False),
        (-3.5, False, False, True),
    ],
)
def test_sign_predicates(amount, is_zero, is_positive, is_negative):
    money = Money(amount, USD)
    assert money.is_zero() is is_zero
    assert money.is_positive() is is_positive
    assert money.is_negative() is is_negative


# endregion


def test_str_and_repr():
    money = Money(Decimal("1000.50"), USD)
    assert str(money) == "1000.50 USD"
    assert repr(money) == "Money(1000.50, USD)"
