from __future__ import annotations

from decimal import Decimal
from typing import Any, TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | float

# Scalars accepted as operands of `Money.multiply` / `Money.divide` and as allocation ratios
NumericScalar: TypeAlias = int | float | Decimal


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise
    (e.g. `5.999` becomes `Decimal("5.999")`, not `Decimal("5.99899999...")`).

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def is_numeric_scalar(value: Any) -> bool:
    """Check whether $value is an `int`, `float` or `Decimal`.

    `bool` is a subclass of `int` but is never accepted as a number here.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def digit_span(*values: Decimal) -> int:
    """Number of significant digits needed to hold $values and any sum of them exactly.

    Counts from the highest integer digit down to the lowest fractional digit of all
    $values, plus one digit for a carry.

    Examples:
        >>> digit_span(Decimal("123.45"))
        6
        >>> digit_span(Decimal("1E+30"), Decimal("0.01"))
        34
    """
    top = max(max(value.adjusted(), 0) for value in values)
    bottom = min(min(value.as_tuple().exponent, 0) for value in values)
    return top - bottom + 2


def digit_count(value: Decimal) -> int:
    """Number of digits in the coefficient of $value."""
    return len(value.as_tuple().digits)
