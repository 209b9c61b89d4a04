"""
Storefront Variant Search

Modules:
    models      - Catalog data models (Price, Variant, Product, Catalog, LineItem)
    common      - Shared utilities (config loader, logging, constants)
    shopify     - Shopify Storefront API client
    listing     - Flatten, sort and render the price-ordered variant listing
    cli         - Command-line entry point
"""

__version__ = "1.0.0"
