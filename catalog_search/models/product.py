"""
Catalog data models.

Frozen data classes for the product search result and the flattened
listing rows. Catalog.from_dict() is the only place raw API data is
checked; everything downstream assumes well-formed records.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, List, Mapping, Tuple

from ..exceptions import MalformedCatalogError


def _require(raw: Any, key: str, path: str) -> Any:
    """Return raw[key] or raise MalformedCatalogError naming path.key."""
    if not isinstance(raw, Mapping):
        raise MalformedCatalogError(f"{path or 'result'}: expected an object, got {type(raw).__name__}")
    if raw.get(key) is None:
        where = f"{path}.{key}" if path else key
        raise MalformedCatalogError(f"{where}: missing")
    return raw[key]


def _connection_items(value: Any, path: str) -> List[Any]:
    """
    Normalize a GraphQL connection or plain list into a list of nodes.

    Accepts [...], {"nodes": [...]} and {"edges": [{"node": ...}, ...]}.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, Mapping):
        if isinstance(value.get("nodes"), list):
            return value["nodes"]
        if isinstance(value.get("edges"), list):
            return [_require(edge, "node", f"{path}.edges[{i}]")
                    for i, edge in enumerate(value["edges"])]
    raise MalformedCatalogError(f"{path}: expected a list or connection")


def _parse_amount(value: Any, path: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise MalformedCatalogError(f"{path}: expected a numeric string, got {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise MalformedCatalogError(f"{path}: not a number: {value!r}") from None
    if not amount.is_finite() or amount < 0:
        raise MalformedCatalogError(f"{path}: must be a non-negative number, got {value!r}")
    return amount


@dataclass(frozen=True)
class Price:
    """Amount plus ISO currency code, as returned by MoneyV2."""
    amount: Decimal
    currency_code: str

    @classmethod
    def from_dict(cls, raw: Any, path: str = "price") -> "Price":
        return cls(
            amount=_parse_amount(_require(raw, "amount", path), f"{path}.amount"),
            currency_code=str(_require(raw, "currencyCode", path)),
        )


@dataclass(frozen=True)
class Variant:
    """Purchasable variant of a product."""
    id: str
    title: str
    price: Price

    @classmethod
    def from_dict(cls, raw: Any, path: str = "variant") -> "Variant":
        return cls(
            id=str(_require(raw, "id", path)),
            title=str(_require(raw, "title", path)),
            price=Price.from_dict(_require(raw, "price", path), f"{path}.price"),
        )


@dataclass(frozen=True)
class Product:
    """Product with its variants in storefront order."""
    title: str
    variants: Tuple[Variant, ...] = ()

    @classmethod
    def from_dict(cls, raw: Any, path: str = "product") -> "Product":
        title = str(_require(raw, "title", path))
        variants = _connection_items(_require(raw, "variants", path), f"{path}.variants")
        return cls(
            title=title,
            variants=tuple(
                Variant.from_dict(v, f"{path}.variants[{i}]") for i, v in enumerate(variants)
            ),
        )


@dataclass(frozen=True)
class Catalog:
    """One page of product search results."""
    products: Tuple[Product, ...] = ()

    @property
    def variant_count(self) -> int:
        return sum(len(p.variants) for p in self.products)

    @classmethod
    def from_dict(cls, raw: Any) -> "Catalog":
        """
        Validate a raw query result and build the typed catalog.

        Args:
            raw: Mapping with a top-level "products" collection

        Returns:
            Catalog preserving product and variant order

        Raises:
            MalformedCatalogError: If any required field is missing or invalid
        """
        products = _connection_items(_require(raw, "products", ""), "products")
        return cls(products=tuple(
            Product.from_dict(p, f"products[{i}]") for i, p in enumerate(products)
        ))


@dataclass(frozen=True)
class LineItem:
    """One row of the listing: a single variant with its product title."""
    display_title: str
    price: Decimal
    currency_code: str
