from __future__ import annotations

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum

from moneta.domain.monetary.errors import InvalidArgument

_HALF = Decimal("0.5")


class RoundingMode(Enum):
    """Tie-breaking rule used when a value lies exactly between two integers."""

    HALF_UP = "HALF_UP"  # Ties away from zero
    HALF_DOWN = "HALF_DOWN"  # Ties toward zero
    HALF_EVEN = "HALF_EVEN"  # Ties to the nearest even integer (banker's rounding)
    HALF_ODD = "HALF_ODD"  # Ties to the nearest odd integer

    @classmethod
    def from_str(cls, name: str) -> RoundingMode:
        """Get rounding mode by its name (case-insensitive, e.g. "half_even").

        Raises:
            InvalidArgument: If $name is not a known rounding mode.
        """
        if not isinstance(name, str):
            raise InvalidArgument(f"$name must be a string, but provided value is: {name!r}")

        try:
            return cls[name.strip().upper()]
        except KeyError as e:
            raise InvalidArgument(f"Unknown rounding mode '{name}'. Available rounding modes: {[m.name for m in cls]}") from e


# Rounding modes supported directly by the `decimal` module
_DECIMAL_ROUNDING = {
    RoundingMode.HALF_UP: ROUND_HALF_UP,
    RoundingMode.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingMode.HALF_EVEN: ROUND_HALF_EVEN,
}


def round_to_integer(value: Decimal, mode: RoundingMode) -> Decimal:
    """Round $value to zero decimal places using tie-breaking rule $mode.

    Args:
        value: Value to round.
        mode: Tie-breaking rule applied when $value is exactly halfway between two integers.

    Returns:
        Integral `Decimal` with exponent 0.

    Raises:
        InvalidArgument: If $mode is not a `RoundingMode`.

    Examples:
        >>> round_to_integer(Decimal("2.5"), RoundingMode.HALF_EVEN)
        Decimal('2')
        >>> round_to_integer(Decimal("2.5"), RoundingMode.HALF_ODD)
        Decimal('3')
        >>> round_to_integer(Decimal("-2.5"), RoundingMode.HALF_DOWN)
        Decimal('-2')
    """
    # Raise: only the four tie-breaking rules are supported
    if not isinstance(mode, RoundingMode):
        raise InvalidArgument(f"Rounding mode should be one of {[m.name for m in RoundingMode]}, but provided value is: {mode!r}")

    if mode is RoundingMode.HALF_ODD:
        # `decimal` has no half-odd rounding; resolve the tie manually
        lower = value.to_integral_value(rounding=ROUND_FLOOR)
        if value - lower == _HALF:
            return lower if lower % 2 != 0 else lower + 1
        return value.to_integral_value(rounding=ROUND_HALF_UP)

    return value.to_integral_value(rounding=_DECIMAL_ROUNDING[mode])
