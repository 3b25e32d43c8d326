from __future__ import annotations

import logging
import math
from decimal import Decimal, ROUND_FLOOR, localcontext
from fractions import Fraction
from typing import Sequence

from moneta.domain.monetary.errors import InvalidArgument
from moneta.utils.numeric_tools import NumericScalar, as_decimal, digit_span, is_numeric_scalar

logger = logging.getLogger(__name__)

def allocate_amounts(amount: Decimal, ratios: Sequence[NumericScalar]) -> list[Decimal]:
    """Split $amount into shares proportional to $ratios without losing any value.

    Each share starts as `floor(amount * ratio / total)`. The remainder is then handed
    out one whole unit at a time in input order, starting at index 0. A fractional
    leftover (only possible when $amount has a fractional part) goes to the next
    share in the same order, so the shares always sum exactly to $amount.

    Args:
        amount: Amount to split.
        ratios: Non-negative weights; their order decides who receives the remainder.

    Returns:
        List of shares, one per ratio, in the order of $ratios.

    Raises:
        InvalidArgument: If $ratios is empty, contains a non-numeric or negative ratio,
            or sums to zero.

    Examples:
        >>> allocate_amounts(Decimal("100"), [1, 1, 1])
        [Decimal('34'), Decimal('33'), Decimal('33')]
        >>> allocate_amounts(Decimal("5"), [3, 7])
        [Decimal('2'), Decimal('3')]
    """
    # Raise: there must be at least one share to allocate into
    if len(ratios) == 0:
        raise InvalidArgument("Cannot call `allocate_amounts` because $ratios is empty")

    decimal_ratios: list[Decimal] = []
    for index, ratio in enumerate(ratios):
        # Raise: every ratio must be a plain number
        if not is_numeric_scalar(ratio):
            raise InvalidArgument(f"Cannot call `allocate_amounts` because $ratios[{index}] ({ratio!r}) is not an integer, float or Decimal")
        decimal_ratio = as_decimal(ratio)
        # Raise: negative weights would make shares exceed their fair proportion
        if not decimal_ratio.is_finite() or decimal_ratio < 0:
            raise InvalidArgument(f"Cannot call `allocate_amounts` because $ratios[{index}] ({ratio!r}) is negative or not finite")
        decimal_ratios.append(decimal_ratio)

    exact_ratios = [Fraction(ratio) for ratio in decimal_ratios]
    total = sum(exact_ratios, Fraction(0))
    # Raise: proportions are undefined for a zero total
    if total <= 0:
        raise InvalidArgument(f"Cannot call `allocate_amounts` because the total of $ratios ({float(total)}) is not positive")

    # Exact rational arithmetic keeps every floor at or below its true proportion and loses nothing
    exact_amount = Fraction(amount)
    unit_shares = [math.floor(exact_amount * ratio / total) for ratio in exact_ratios]
    remainder = exact_amount - sum(unit_shares)

    index = 0
    while remainder >= 1:
        unit_shares[index] += 1
        remainder -= 1
        index += 1

    shares = [Decimal(share) for share in unit_shares]
    if remainder > 0:
        # The leftover is the fractional part of $amount
        with localcontext() as context:
            context.prec = digit_span(amount, shares[index])
            shares[index] += amount - amount.to_integral_value(rounding=ROUND_FLOOR)

    logger.debug(f"Allocated {amount} across {len(shares)} ratio(s): {shares}")
    return shares
