from enum import Enum

from moneta.domain.monetary.errors import InvalidArgument

MAX_PRECISION = 18


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"


class Currency:
    """Represents a currency with code, precision and display metadata.

    Attributes:
        code (str): Currency code (e.g., "USD", "BTC").
        precision (int): Number of decimal places of the minor unit (0-18).
        name (str): Full currency name.
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY).
        symbol (str): Display symbol (e.g., "$", "Kč").
        symbol_first (bool): Whether the symbol is placed before the number.
        decimal_separator (str): Single character between integer and fractional digits.
        thousand_separator (str): Single character between groups of thousands.
    """

    __slots__ = (
        "_code",
        "_precision",
        "_name",
        "_currency_type",
        "_symbol",
        "_symbol_first",
        "_decimal_separator",
        "_thousand_separator",
    )

    def __init__(
        self,
        code: str,
        precision: int,
        name: str,
        currency_type: CurrencyType,
        symbol: str,
        symbol_first: bool = True,
        decimal_separator: str = ".",
        thousand_separator: str = ",",
    ):
        """Initialize a Currency instance.

        Raises:
            InvalidArgument: If any of the parameters is invalid.
        """
        # Raise: $code identifies the currency, so it cannot be empty
        if not isinstance(code, str) or not code.strip():
            raise InvalidArgument(f"$code must be a non-empty string, but provided value is: '{code}'")

        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0 or precision > MAX_PRECISION:
            raise InvalidArgument(f"$precision must be an integer between 0 and {MAX_PRECISION}, but provided value is: {precision}")

        if not isinstance(name, str) or not name.strip():
            raise InvalidArgument(f"$name must be a non-empty string, but provided value is: '{name}'")

        if not isinstance(currency_type, CurrencyType):
            raise InvalidArgument(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        if not isinstance(symbol, str) or not symbol.strip():
            raise InvalidArgument(f"$symbol must be a non-empty string, but provided value is: '{symbol}'")

        if not isinstance(symbol_first, bool):
            raise InvalidArgument(f"$symbol_first must be a bool, but provided value is: {symbol_first!r}")

        for param_name, separator in (("decimal_separator", decimal_separator), ("thousand_separator", thousand_separator)):
            if not isinstance(separator, str) or len(separator) != 1:
                raise InvalidArgument(f"${param_name} must be a single character, but provided value is: '{separator}'")

        # Raise: identical separators would make formatted amounts ambiguous
        if decimal_separator == thousand_separator:
            raise InvalidArgument(f"$decimal_separator and $thousand_separator must differ, but both are: '{decimal_separator}'")

        self._code = code.upper().strip()
        self._precision = precision
        self._name = name.strip()
        self._currency_type = currency_type
        self._symbol = symbol
        self._symbol_first = symbol_first
        self._decimal_separator = decimal_separator
        self._thousand_separator = thousand_separator

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def precision(self) -> int:
        """Get the number of decimal places of the minor unit."""
        return self._precision

    @property
    def multiplier(self) -> int:
        """Get the power-of-ten factor converting major units to minor units (e.g. 100 for USD)."""
        return 10**self._precision

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def currency_type(self) -> CurrencyType:
        """Get the currency type."""
        return self._currency_type

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def symbol_first(self) -> bool:
        return self._symbol_first

    @property
    def decimal_separator(self) -> str:
        return self._decimal_separator

    @property
    def thousand_separator(self) -> str:
        return self._thousand_separator

    @property
    def is_fiat(self) -> bool:
        """Check if currency is fiat."""
        return self._currency_type == CurrencyType.FIAT

    @property
    def is_crypto(self) -> bool:
        """Check if currency is cryptocurrency."""
        return self._currency_type == CurrencyType.CRYPTO

    @property
    def is_commodity(self) -> bool:
        """Check if currency is commodity."""
        return self._currency_type == CurrencyType.COMMODITY

    def __eq__(self, other) -> bool:
        """Check equality with another Currency (by code)."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', {self.precision}, '{self.name}', {self.currency_type}, '{self.symbol}')"
