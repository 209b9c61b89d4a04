"""
Listing pipeline: query result -> flattened -> sorted -> rendered lines.
"""

from typing import Any, List, Mapping, Union

from ..models import Catalog
from .presenter import render_lines
from .variants import flatten_variants, sort_by_price


def build_listing(query_result: Union[Catalog, Mapping[str, Any]], search_term: str) -> List[str]:
    """Produce the printable, price-ordered listing for one search result."""
    return render_lines(sort_by_price(flatten_variants(query_result)), search_term)
