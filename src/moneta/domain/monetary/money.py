from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from moneta.config import decimal_context, settings
from moneta.domain.monetary.allocation import allocate_amounts
from moneta.domain.monetary.currency import Currency
from moneta.domain.monetary.currency_registry import get_currency
from moneta.domain.monetary.errors import InvalidArgument
from moneta.domain.monetary.rounding_mode import RoundingMode, round_to_integer
from moneta.domain.monetary.units import amount_to_units, format_amount, string_to_units, units_to_amount
from moneta.utils.numeric_tools import NumericScalar, as_decimal, digit_count, digit_span, is_numeric_scalar


class Money:
    """Immutable monetary amount bound to a currency.

    $amount is kept as `Decimal` in major units (dollars, not cents) at full precision;
    it is never quantized to the currency precision. Operations return new instances.

    Arithmetic runs in a local `decimal` context (see `moneta.config.decimal_context`)
    wide enough for the operands, so sums and products are exact in every thread.

    Construction only accepts `float` or `Decimal` amounts. Integers are rejected on
    purpose: use `Money.from_units` to build a value from minor units.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: float | Decimal, currency: Currency):
        """Initialize Money with $amount and $currency.

        Args:
            amount: Amount in major units, as `float` or `Decimal`.
            currency: Currency of the amount.

        Raises:
            InvalidArgument: If $amount is not a finite float/Decimal or $currency is not a Currency.
        """
        # Raise: integers (and bools) are not accepted as amounts
        if isinstance(amount, bool) or not isinstance(amount, (float, Decimal)):
            raise InvalidArgument(f"Cannot call `Money.__init__` because $amount ({amount!r}) must be a float or Decimal (got type '{type(amount).__name__}')")

        if not isinstance(currency, Currency):
            raise InvalidArgument(f"Cannot call `Money.__init__` because $currency must be a Currency instance, but provided value is: {currency!r}")

        decimal_amount = as_decimal(amount)
        # Raise: NaN and infinities have no monetary meaning
        if not decimal_amount.is_finite():
            raise InvalidArgument(f"Cannot call `Money.__init__` because $amount ({amount!r}) is not finite")

        self._amount = decimal_amount
        self._currency = currency

    # region Construction

    @classmethod
    def of(cls, code: str, amount: float | Decimal) -> Money:
        """Create Money in the registered currency with $code.

        Example: `Money.of("USD", 5.0)`.

        Raises:
            InvalidArgument: If $code is not registered or $amount is invalid.
        """
        return cls(amount, get_currency(code))

    @classmethod
    def from_units(cls, units: int, currency: Currency) -> Money:
        """Create Money from an integer count of minor units (e.g. cents).

        Example: `Money.from_units(505, USD)` is 5.05 USD.
        """
        return cls(units_to_amount(units, currency), currency)

    # endregion

    # region Properties

    @property
    def amount(self) -> Decimal:
        """Get the amount in major units."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    # endregion

    # region Comparison

    def is_same_currency(self, other: Money) -> bool:
        return self._currency == other.currency

    def _check_same_currency(self, other: Money, operation: str) -> None:
        """Check that $other is Money in the same currency.

        Raises:
            InvalidArgument: If $other is not Money or currencies don't match.
        """
        if not isinstance(other, Money):
            raise InvalidArgument(f"Cannot call `Money.{operation}` because $other must be Money, but provided value is: {other!r}")

        if not self.is_same_currency(other):
            raise InvalidArgument(f"Different currencies: cannot call `Money.{operation}` on {self.currency} and {other.currency}")

    def equals(self, other: Money) -> bool:
        """Check that $other has the same currency and a numerically equal amount."""
        if not isinstance(other, Money):
            return False
        return self.is_same_currency(other) and self._amount == other.amount

    def compare(self, other: Money) -> int:
        """Compare amounts of two Money objects in the same currency.

        Returns:
            -1, 0 or 1 when this amount is lower, equal or greater.

        Raises:
            InvalidArgument: If currencies differ.
        """
        self._check_same_currency(other, "compare")
        if self._amount < other.amount:
            return -1
        if self._amount == other.amount:
            return 0
        return 1

    def greater_than(self, other: Money) -> bool:
        return self.compare(other) == 1

    def less_than(self, other: Money) -> bool:
        return self.compare(other) == -1

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        return self.equals(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    # endregion

    # region Arithmetic

    def add(self, other: Money) -> Money:
        """Add Money in the same currency.

        Raises:
            InvalidArgument: If currencies differ.
        """
        self._check_same_currency(other, "add")
        with decimal_context(digit_span(self._amount, other.amount)):
            total = self._amount + other.amount
        return Money(total, self._currency)

    def subtract(self, other: Money) -> Money:
        """Subtract Money in the same currency.

        Raises:
            InvalidArgument: If currencies differ.
        """
        self._check_same_currency(other, "subtract")
        with decimal_context(digit_span(self._amount, other.amount)):
            difference = self._amount - other.amount
        return Money(difference, self._currency)

    def multiply(self, multiplier: NumericScalar, rounding_mode: RoundingMode | None = None) -> Money:
        """Multiply by a scalar and round the product to zero decimal places.

        Args:
            multiplier: Integer, float or Decimal factor.
            rounding_mode: Tie-breaking rule; None uses the configured default (HALF_UP).

        Raises:
            InvalidArgument: If $multiplier is not numeric or $rounding_mode is not a RoundingMode.
        """
        mode = self._resolve_operand_and_mode(multiplier, rounding_mode)
        decimal_multiplier = as_decimal(multiplier)
        # Coefficient of a product never has more digits than both coefficients together
        with decimal_context(digit_count(self._amount) + digit_count(decimal_multiplier) + 1):
            product = round_to_integer(self._amount * decimal_multiplier, mode)
        return Money(product, self._currency)

    def divide(self, divisor: NumericScalar, rounding_mode: RoundingMode | None = None) -> Money:
        """Divide by a scalar and round the quotient to zero decimal places.

        Args:
            divisor: Non-zero integer, float or Decimal.
            rounding_mode: Tie-breaking rule; None uses the configured default (HALF_UP).

        Raises:
            InvalidArgument: If $divisor is not numeric or zero, or $rounding_mode is not a RoundingMode.
        """
        mode = self._resolve_operand_and_mode(divisor, rounding_mode)
        decimal_divisor = as_decimal(divisor)
        if decimal_divisor == 0:
            raise InvalidArgument(f"Division by zero: cannot call `Money.divide` on {self!r} with $divisor ({divisor!r})")

        # Keep the configured number of fractional digits on top of the integer digits
        integer_digits = max(self._amount.adjusted() - decimal_divisor.adjusted() + 2, 0)
        with decimal_context(integer_digits + settings.decimal_precision):
            quotient = round_to_integer(self._amount / decimal_divisor, mode)
        return Money(quotient, self._currency)

    @staticmethod
    def _resolve_operand_and_mode(operand: NumericScalar, rounding_mode: RoundingMode | None) -> RoundingMode:
        # Raise: scalar operand must be a plain number
        if not is_numeric_scalar(operand):
            raise InvalidArgument(f"Operand should be an integer or a float, but provided value is: {operand!r}")

        # Raise: NaN and infinities cannot scale an amount
        if not as_decimal(operand).is_finite():
            raise InvalidArgument(f"Operand should be a finite integer or float, but provided value is: {operand!r}")

        if rounding_mode is None:
            return settings.default_rounding_mode

        # Raise: only the four tie-breaking rules are supported
        if not isinstance(rounding_mode, RoundingMode):
            raise InvalidArgument(f"Rounding mode should be one of {[m.name for m in RoundingMode]}, but provided value is: {rounding_mode!r}")

        return rounding_mode

    def __add__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        """Multiply Money by number using the default rounding mode."""
        if not is_numeric_scalar(other):
            return NotImplemented  # Money * Money doesn't make sense
        return self.multiply(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Divide Money by number using the default rounding mode."""
        if not is_numeric_scalar(other):
            return NotImplemented
        return self.divide(other)

    def __neg__(self):
        return Money(self._amount.copy_negate(), self._currency)

    def __abs__(self):
        return Money(self._amount.copy_abs(), self._currency)

    # endregion

    # region Allocation

    def allocate(self, ratios: Sequence[NumericScalar]) -> list[Money]:
        """Split this amount across $ratios so that the parts sum exactly to it.

        Shares are floored and the remainder is handed out one unit at a time in the
        order of $ratios, starting with the first one.

        Example: `Money(100.0, USD).allocate([1, 1, 1])` gives amounts 34, 33, 33.

        Raises:
            InvalidArgument: If $ratios is empty, contains a negative or non-numeric ratio,
                or sums to zero.
        """
        return [Money(share, self._currency) for share in allocate_amounts(self._amount, ratios)]

    def allocate_to(self, n: int) -> list[Money]:
        """Split this amount into $n equal parts (see `allocate`)."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise InvalidArgument(f"Cannot call `Money.allocate_to` because $n ({n!r}) is not a positive integer")
        return self.allocate([1] * n)

    # endregion

    # region Conversion

    def get_units(self) -> int:
        """Get the amount in minor units of the currency (e.g. cents), truncated toward zero."""
        return amount_to_units(self._amount, self._currency)

    @staticmethod
    def string_to_units(text: str) -> int:
        """Parse strings like "-12.3" or "42,05" into units scaled to two fractional digits.

        Raises:
            InvalidArgument: If $text is not a plain decimal number with at most two fractional digits.
        """
        return string_to_units(text)

    def formatted_string(self) -> str:
        """Render the amount with the currency symbol and separators, e.g. "-$1,234.50"."""
        return format_amount(self._amount, self._currency)

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"

    # endregion
