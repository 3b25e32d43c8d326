from __future__ import annotations

import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from fractions import Fraction

from moneta.domain.monetary.currency import Currency
from moneta.domain.monetary.errors import InvalidArgument
from moneta.utils.numeric_tools import digit_span

# Optional minus, ASCII integer digits, optional "." or "," and up to two fractional digits
_MONEY_STRING_PATTERN = re.compile(r"(?P<sign>-)?(?P<integer>\d+)(?:[.,](?P<fraction>\d{0,2}))?", re.ASCII)

# Fixed scale of `string_to_units`, independent of any currency precision
STRING_UNITS_DECIMALS = 2


def amount_to_units(amount: Decimal, currency: Currency) -> int:
    """Convert major-unit $amount into minor units of $currency, truncating toward zero.

    Examples:
        >>> amount_to_units(Decimal("5.999"), USD)
        599
        >>> amount_to_units(Decimal("-5.999"), USD)
        -599
    """
    # Exact rational product; `int` truncates toward zero
    return int(Fraction(amount) * currency.multiplier)


def units_to_amount(units: int, currency: Currency) -> Decimal:
    """Convert minor $units of $currency into an exact major-unit amount."""
    # Raise: minor units are whole numbers by definition
    if isinstance(units, bool) or not isinstance(units, int):
        raise InvalidArgument(f"$units must be an integer, but provided value is: {units!r}")

    # String construction is exact for any number of digits
    return Decimal(f"{units}E-{currency.precision}")


def string_to_units(text: str) -> int:
    """Parse a money string into minor units scaled to exactly two fractional digits.

    Accepts an optional leading minus, one or more digits, an optional "." or ","
    separator and at most two fractional digits. Missing fractional digits count as 0.
    Surrounding whitespace is ignored.

    Raises:
        InvalidArgument: If $text does not have that shape.

    Examples:
        >>> string_to_units("-12.3")
        -1230
        >>> string_to_units("42")
        4200
        >>> string_to_units("1,05")
        105
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"The value could not be parsed as money, $text must be a string but provided value is: {text!r}")

    match = _MONEY_STRING_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidArgument(f"The value could not be parsed as money: '{text}'")

    fraction = (match.group("fraction") or "").ljust(STRING_UNITS_DECIMALS, "0")
    units = int(match.group("integer") + fraction)
    return -units if match.group("sign") else units


def format_amount(amount: Decimal, currency: Currency) -> str:
    """Render major-unit $amount with the separators and symbol of $currency.

    The number is rounded half-up to `currency.precision` decimals and grouped by
    thousands. A negative sign goes in front of the whole symbol/number block.

    Examples:
        >>> format_amount(Decimal("-1234.5"), USD)
        '-$1,234.50'
        >>> format_amount(Decimal("1234.5"), EUR)
        '1.234,50€'
    """
    quantum = Decimal(f"1E-{currency.precision}")
    with localcontext() as context:
        # Room for every integer digit, the currency decimals and a carry from rounding
        context.prec = digit_span(amount) + currency.precision
        number = amount.copy_abs().quantize(quantum, rounding=ROUND_HALF_UP)

    # Group with "," and "." first, then swap in the currency separators in one pass
    grouped = f"{number:,.{currency.precision}f}"
    value = grouped.translate(str.maketrans({",": currency.thousand_separator, ".": currency.decimal_separator}))

    # A value that rounds to zero is rendered without a sign
    sign = "-" if amount < 0 and number != 0 else ""
    if currency.symbol_first:
        return f"{sign}{currency.symbol}{value}"
    return f"{sign}{value}{currency.symbol}"
