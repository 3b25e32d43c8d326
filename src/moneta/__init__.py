__version__ = "0.1.0"

from moneta.domain.monetary.currency import Currency, CurrencyType
from moneta.domain.monetary.currency_registry import get_currency, register_currency
from moneta.domain.monetary.errors import InvalidArgument
from moneta.domain.monetary.money import Money
from moneta.domain.monetary.rounding_mode import RoundingMode

__all__ = ["Currency", "CurrencyType", "InvalidArgument", "Money", "RoundingMode", "get_currency", "register_currency"]
