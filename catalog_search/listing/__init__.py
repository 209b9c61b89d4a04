"""
Listing pipeline: flatten product variants, sort by price, render text lines.

Modules:
    currency  - Currency code to display symbol lookup
    variants  - Variant flattening and price ordering
    presenter - Text rendering of the ordered listing
    pipeline  - Composition of the above
"""

from .currency import resolve_symbol
from .pipeline import build_listing
from .presenter import NO_RESULTS_MESSAGE, format_price, render_lines
from .variants import flatten_variants, sort_by_price

__all__ = [
    'resolve_symbol',
    'flatten_variants',
    'sort_by_price',
    'format_price',
    'render_lines',
    'build_listing',
    'NO_RESULTS_MESSAGE',
]
