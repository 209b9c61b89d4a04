"""Shared test fixtures."""

from decimal import Decimal

import pytest

from catalog_search.models import LineItem


def make_variant(title, amount, currency="USD", variant_id=None):
    """Raw Storefront variant node."""
    return {
        "id": variant_id or f"gid://shopify/ProductVariant/{title}",
        "title": title,
        "price": {"amount": amount, "currencyCode": currency},
    }


def make_product(title, variants):
    """Raw Storefront product node with a plain variant list."""
    return {"title": title, "variants": variants}


@pytest.fixture
def shirt_result():
    """One product, two variants already in price order."""
    return {"products": [
        make_product("Shirt", [
            make_variant("Small", "19.99"),
            make_variant("Large", "24.50"),
        ]),
    ]}


@pytest.fixture
def mug_result():
    """One product, two GBP variants in descending price order."""
    return {"products": [
        make_product("Mug", [
            make_variant("Red", "30.00", "GBP"),
            make_variant("Blue", "10.00", "GBP"),
        ]),
    ]}


@pytest.fixture
def multi_product_result():
    """Three products with 2, 0 and 3 variants."""
    return {"products": [
        make_product("Hat", [
            make_variant("Red", "15.00"),
            make_variant("Blue", "12.00"),
        ]),
        make_product("Hoodie", []),
        make_product("Hat Deluxe", [
            make_variant("S", "12.00"),
            make_variant("M", "12.00"),
            make_variant("L", "40.00"),
        ]),
    ]}


@pytest.fixture
def empty_result():
    return {"products": []}


@pytest.fixture
def line_items():
    """Unsorted line items with a price tie."""
    return [
        LineItem("Hat - Red", Decimal("15.00"), "USD"),
        LineItem("Hat - Blue", Decimal("12.00"), "USD"),
        LineItem("Cap - One", Decimal("12.00"), "USD"),
        LineItem("Cap - Two", Decimal("9.5"), "EUR"),
    ]
