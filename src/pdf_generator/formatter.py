"""Currency formatting for statement cells."""

from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from src.config.settings import CURRENCY_SYMBOL

CENTS = Decimal("0.01")


def format_currency(amount: Optional[Decimal], symbol: str = CURRENCY_SYMBOL) -> str:
    """Format an amount for display in a table cell.

    An absent amount (None) is an empty cell, not a zero. The sign goes
    before the symbol and there is no thousands separator. Amounts of any
    magnitude are formatted exactly.

    Examples:
        >>> format_currency(None)
        ''
        >>> format_currency(Decimal("1234.5"))
        '$1234.50'
        >>> format_currency(Decimal("-12.3"))
        '-$12.30'
    """
    if amount is None:
        return ""

    value = Decimal(amount)
    with localcontext() as ctx:
        # every integer digit plus two decimals must fit
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(CENTS, rounding=ROUND_HALF_UP)

    # copy_abs() is exact and also drops the sign of a negative zero
    if rounded < 0:
        return f"-{symbol}{rounded.copy_abs()}"
    return f"{symbol}{rounded.copy_abs()}"
