from decimal import Decimal

import moneta
from moneta import Money, RoundingMode


def test_public_api_exports():
    assert set(moneta.__all__) == {"Currency", "CurrencyType", "InvalidArgument", "Money", "RoundingMode", "get_currency", "register_currency"}


def test_end_to_end_invoice_split():
    invoice = Money.of("USD", Decimal("1000.00"))
    fee = invoice.multiply(Decimal("0.025"), RoundingMode.HALF_EVEN)
    assert fee.amount == Decimal("25")

    parts = invoice.subtract(fee).allocate([50, 30, 20])
    assert [p.formatted_string() for p in parts] == ["$488.00", "$292.00", "$195.00"]
    assert sum((p.get_units() for p in parts), 0) == 97500
