"""
Variant flattening and price ordering.

flatten_variants() turns the two-level product -> variant tree into one
LineItem per variant; sort_by_price() orders those rows for display.
"""

import logging
from typing import Any, Iterable, List, Mapping, Union

from ..common.constants import TITLE_SEPARATOR
from ..models import Catalog, LineItem

logger = logging.getLogger(__name__)


def flatten_variants(query_result: Union[Catalog, Mapping[str, Any]]) -> List[LineItem]:
    """
    Expand every variant of every product into a LineItem.

    Products are visited in input order, then variants within each product,
    so the output order mirrors the query result. The input is not modified.

    Args:
        query_result: Catalog, or a raw query result mapping with "products"

    Returns:
        One LineItem per variant (empty list for an empty catalog)

    Raises:
        MalformedCatalogError: If a raw mapping does not have the expected shape
    """
    catalog = query_result if isinstance(query_result, Catalog) else Catalog.from_dict(query_result)

    items = [
        LineItem(
            display_title=f"{product.title}{TITLE_SEPARATOR}{variant.title}",
            price=variant.price.amount,
            currency_code=variant.price.currency_code,
        )
        for product in catalog.products
        for variant in product.variants
    ]
    logger.debug("Flattened %d products into %d line items", len(catalog.products), len(items))
    return items


def sort_by_price(items: Iterable[LineItem]) -> List[LineItem]:
    """Return a new list ordered by ascending price; ties keep their input order."""
    return sorted(items, key=lambda item: item.price)
