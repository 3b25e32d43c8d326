from __future__ import annotations

import logging

from bidict import bidict

from moneta.domain.monetary.currency import Currency, CurrencyType
from moneta.domain.monetary.errors import InvalidArgument

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Bi-directional mapping between currency codes and `Currency` instances.

    Lookups by code are case-insensitive; codes are stored upper-cased.
    """

    def __init__(self) -> None:
        self._currencies_by_code_bidict: bidict[str, Currency] = bidict()

    def register(self, currency: Currency, overwrite: bool = False) -> None:
        """Register $currency under its code.

        Args:
            currency: The currency to register.
            overwrite: Whether to replace a currency already registered under the same code.

        Raises:
            InvalidArgument: If $currency is not a Currency, or its code is already
                registered and $overwrite is False.
        """
        if not isinstance(currency, Currency):
            raise InvalidArgument(f"$currency must be a Currency instance, but provided value is: {currency}")

        if currency.code in self._currencies_by_code_bidict and not overwrite:
            raise InvalidArgument(f"Currency with code '{currency.code}' already exists in registry. Use overwrite=True to replace it.")

        # bidict ignores a put of an equal (code, currency) pair, so remove the old entry first
        self._currencies_by_code_bidict.pop(currency.code, None)
        self._currencies_by_code_bidict.put(currency.code, currency)
        logger.debug(f"CurrencyRegistry registered {currency!r} (overwrite={overwrite})")

    def get(self, code: str) -> Currency:
        """Get currency from registry by $code.

        Raises:
            InvalidArgument: If $code is not a string or is not registered.
        """
        if not isinstance(code, str):
            raise InvalidArgument(f"$code must be a string, but provided value is: {code!r}")

        normalized_code = code.upper().strip()
        if normalized_code not in self._currencies_by_code_bidict:
            raise InvalidArgument(f"Currency with code '{normalized_code}' not found in registry. Available currencies: {self.codes}")

        return self._currencies_by_code_bidict[normalized_code]

    def code_of(self, currency: Currency) -> str:
        """Get the code under which $currency is registered.

        Raises:
            InvalidArgument: If $currency is not registered.
        """
        try:
            return self._currencies_by_code_bidict.inverse[currency]
        except (KeyError, TypeError) as e:
            raise InvalidArgument(f"Currency {currency!r} is not registered") from e

    @property
    def codes(self) -> list[str]:
        """Get registered currency codes."""
        return list(self._currencies_by_code_bidict.keys())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper().strip() in self._currencies_by_code_bidict

    def __len__(self) -> int:
        return len(self._currencies_by_code_bidict)


# Fiat currencies
USD = Currency("USD", 2, "US Dollar", CurrencyType.FIAT, "$")
EUR = Currency("EUR", 2, "Euro", CurrencyType.FIAT, "€", symbol_first=False, decimal_separator=",", thousand_separator=".")
GBP = Currency("GBP", 2, "British Pound", CurrencyType.FIAT, "£")
CHF = Currency("CHF", 2, "Swiss Franc", CurrencyType.FIAT, "CHF ", decimal_separator=".", thousand_separator="'")
CZK = Currency("CZK", 2, "Czech Koruna", CurrencyType.FIAT, " Kč", symbol_first=False, decimal_separator=",", thousand_separator=" ")
JPY = Currency("JPY", 0, "Japanese Yen", CurrencyType.FIAT, "¥")

# Crypto currencies
BTC = Currency("BTC", 8, "Bitcoin", CurrencyType.CRYPTO, "₿")
ETH = Currency("ETH", 18, "Ethereum", CurrencyType.CRYPTO, "Ξ")

# Default registry used by `Money.of`
default_registry = CurrencyRegistry()
for _currency in (USD, EUR, GBP, CHF, CZK, JPY, BTC, ETH):
    default_registry.register(_currency, overwrite=True)


def register_currency(currency: Currency, overwrite: bool = False) -> None:
    """Register $currency in the default registry."""
    default_registry.register(currency, overwrite=overwrite)


def get_currency(code: str) -> Currency:
    """Get currency by $code from the default registry."""
    return default_registry.get(code)
