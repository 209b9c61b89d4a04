"""
Currency symbol lookup.

Unknown codes fall back to DEFAULT_CURRENCY_SYMBOL ("$") instead of raising.
This is a known limitation of the listing: a store selling in an unlisted
currency will show dollar signs.
"""

import logging
from typing import Mapping

from ..common.constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY_SYMBOL

logger = logging.getLogger(__name__)


def resolve_symbol(currency_code: str, symbols: Mapping[str, str] = CURRENCY_SYMBOLS) -> str:
    """
    Return the display symbol for an ISO 4217 currency code.

    Args:
        currency_code: Code such as "USD" or "JPY" (case-sensitive)
        symbols: Lookup table, defaults to CURRENCY_SYMBOLS

    Returns:
        Symbol from the table, or "$" when the code is unknown
    """
    symbol = symbols.get(currency_code)
    if symbol is None:
        logger.debug("Unknown currency code %r, using %r", currency_code, DEFAULT_CURRENCY_SYMBOL)
        return DEFAULT_CURRENCY_SYMBOL
    return symbol
