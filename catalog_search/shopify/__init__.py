"""
Shopify integration modules.

Modules:
    api_client - GraphQL client for the Shopify Storefront API
"""

from .api_client import StorefrontAPIClient, build_search_query

__all__ = [
    'StorefrontAPIClient',
    'build_search_query',
]
