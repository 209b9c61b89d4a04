"""Tests for catalog_search/listing/variants.py"""

import copy
from decimal import Decimal

import pytest

from catalog_search.exceptions import MalformedCatalogError
from catalog_search.listing.variants import flatten_variants, sort_by_price
from catalog_search.models import Catalog, LineItem


class TestFlattenVariants:
    def test_one_item_per_variant(self, multi_product_result):
        items = flatten_variants(multi_product_result)
        assert len(items) == 5

    def test_product_then_variant_order(self, multi_product_result):
        titles = [i.display_title for i in flatten_variants(multi_product_result)]
        assert titles == [
            "Hat - Red",
            "Hat - Blue",
            "Hat Deluxe - S",
            "Hat Deluxe - M",
            "Hat Deluxe - L",
        ]

    def test_line_item_fields(self, mug_result):
        first = flatten_variants(mug_result)[0]
        assert first == LineItem("Mug - Red", Decimal("30.00"), "GBP")

    def test_empty_catalog(self, empty_result):
        assert flatten_variants(empty_result) == []

    def test_accepts_typed_catalog(self, shirt_result):
        catalog = Catalog.from_dict(shirt_result)
        assert flatten_variants(catalog) == flatten_variants(shirt_result)

    def test_does_not_mutate_input(self, multi_product_result):
        before = copy.deepcopy(multi_product_result)
        flatten_variants(multi_product_result)
        assert multi_product_result == before

    def test_restartable(self, shirt_result):
        assert flatten_variants(shirt_result) == flatten_variants(shirt_result)

    def test_unknown_currency_is_carried_through(self):
        result = {"products": [{"title": "Tea", "variants": [
            {"id": "1", "title": "Tin", "price": {"amount": "4.00", "currencyCode": "ZZZ"}},
        ]}]}
        assert flatten_variants(result)[0].currency_code == "ZZZ"

    def test_full_precision_kept(self):
        result = {"products": [{"title": "Tea", "variants": [
            {"id": "1", "title": "Tin", "price": {"amount": "4.005", "currencyCode": "USD"}},
        ]}]}
        assert flatten_variants(result)[0].price == Decimal("4.005")

    def test_missing_variants_raises(self):
        with pytest.raises(MalformedCatalogError, match=r"products\[0\]\.variants"):
            flatten_variants({"products": [{"title": "Tea"}]})

    def test_missing_price_raises(self):
        result = {"products": [{"title": "Tea", "variants": [{"id": "1", "title": "Tin"}]}]}
        with pytest.raises(MalformedCatalogError, match=r"variants\[0\]\.price"):
            flatten_variants(result)


class TestSortByPrice:
    def test_ascending(self, line_items):
        prices = [i.price for i in sort_by_price(line_items)]
        assert prices == sorted(prices)
        assert all(a <= b for a, b in zip(prices, prices[1:]))

    def test_stable_for_ties(self, line_items):
        titles = [i.display_title for i in sort_by_price(line_items)]
        assert titles == ["Cap - Two", "Hat - Blue", "Cap - One", "Hat - Red"]

    def test_numeric_not_lexical(self):
        items = [
            LineItem("A", Decimal("100.00"), "USD"),
            LineItem("B", Decimal("9.99"), "USD"),
        ]
        assert [i.display_title for i in sort_by_price(items)] == ["B", "A"]

    def test_full_precision_comparison(self):
        items = [
            LineItem("A", Decimal("10.006"), "USD"),
            LineItem("B", Decimal("10.004"), "USD"),
        ]
        assert [i.display_title for i in sort_by_price(items)] == ["B", "A"]

    def test_returns_new_list(self, line_items):
        original = list(line_items)
        result = sort_by_price(line_items)
        assert result is not line_items
        assert line_items == original

    def test_empty(self):
        assert sort_by_price([]) == []
