"""
Data models for catalog search.

This module contains data classes with no business logic beyond
validating raw query results.
"""

from .product import Catalog, LineItem, Price, Product, Variant

__all__ = ['Price', 'Variant', 'Product', 'Catalog', 'LineItem']
