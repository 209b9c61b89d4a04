"""
Text rendering for the variant listing.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable, List

from ..models import LineItem
from .currency import resolve_symbol

NO_RESULTS_MESSAGE = "No product data was found for the search string: {search_term}"

_CENTS = Decimal("0.01")


def format_price(amount: Decimal) -> str:
    """
    Format an amount with exactly two decimals, rounding half up.

    19.5 -> "19.50", 19.999 -> "20.00", 0.005 -> "0.01"
    """
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return f"{amount.quantize(_CENTS, rounding=ROUND_HALF_UP):f}"


def render_line(item: LineItem) -> str:
    return f"{item.display_title} - price {resolve_symbol(item.currency_code)}{format_price(item.price)}"


def render_lines(items: Iterable[LineItem], search_term: str) -> List[str]:
    """
    Render line items in the given order.

    Args:
        items: Ordered line items
        search_term: Term shown in the message when there are no items

    Returns:
        One line per item, or a single "no product data" line
    """
    lines = [render_line(item) for item in items]
    if not lines:
        return [NO_RESULTS_MESSAGE.format(search_term=search_term)]
    return lines
