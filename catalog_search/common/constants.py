"""
Shared constants for the project.

This module contains application-wide constants that should have a single source of truth.
"""

from types import MappingProxyType

# ISO 4217 code -> display symbol. Read-only; never changes at runtime.
CURRENCY_SYMBOLS = MappingProxyType({
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "CNY": "¥",
    "INR": "₹",
    "NZD": "NZ$",
    "CHF": "CHF",
    "HKD": "HK$",
    "SGD": "S$",
    "SEK": "kr",
    "KRW": "₩",
    "BRL": "R$",
    "RUB": "₽",
    "ZAR": "R",
    "MXN": "MX$",
    "PLN": "zł",
    "THB": "฿",
})

# Used for any currency code missing from CURRENCY_SYMBOLS
DEFAULT_CURRENCY_SYMBOL = "$"

# Joins product title and variant title in the listing
TITLE_SEPARATOR = " - "

# Storefront API
DEFAULT_API_VERSION = "2025-01"
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 250
