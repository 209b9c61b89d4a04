"""
Shopify Storefront API Client

Client for the Shopify Storefront GraphQL API.
Handles authentication, rate limiting, and error handling.
"""

import logging
import math
import time
from typing import Dict, Optional

import requests

from ..common.constants import DEFAULT_API_VERSION, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

PRODUCT_SEARCH_QUERY = """
query searchProducts($query: String!, $first: Int!) {
  products(first: $first, query: $query) {
    nodes {
      title
      variants(first: 250) {
        nodes {
          id
          title
          price {
            amount
            currencyCode
          }
        }
      }
    }
  }
}
"""


def build_search_query(name: str) -> str:
    """
    Build a product title prefix search for the Storefront query syntax.

    Args:
        name: Product name prefix typed by the user

    Returns:
        Search string, e.g. 'title:shirt*' or 'title:"summer hat"*'
    """
    term = name.strip().replace("\\", "\\\\").replace('"', '\\"')
    if any(ch.isspace() for ch in term):
        term = f'"{term}"'
    return f"title:{term}*"


def _retry_delay(header: Optional[str], attempt: int) -> float:
    """Seconds to wait before retrying: Retry-After (may be fractional) or 2**attempt."""
    try:
        delay = float(header)
    except (TypeError, ValueError):
        return float(2 ** attempt)
    if not math.isfinite(delay) or delay < 0:
        return float(2 ** attempt)
    return delay


def normalize_domain(shop: str) -> str:
    """Return the storefront host for a shop name, myshopify domain or URL."""
    host = shop.strip().replace("https://", "").replace("http://", "").rstrip("/")
    if "." not in host:
        return f"{host}.myshopify.com"
    return host


class StorefrontAPIClient:
    """
    Client for the Shopify Storefront API.

    Handles:
    - Authentication
    - Rate limiting (2 requests/second)
    - Error handling and retries

    Usage:
        with StorefrontAPIClient(shop="my-store", access_token="xxx") as client:
            data = client.search_products("shirt")
    """

    MAX_RETRIES = 5
    RETRYABLE_STATUS_CODES = {429, 502, 503, 504}

    def __init__(self, shop: str, access_token: str, api_version: str = DEFAULT_API_VERSION):
        """
        Initialize the API client.

        Args:
            shop: Shop name (without .myshopify.com), full domain or URL
            access_token: Storefront API access token
            api_version: Storefront API version (e.g. "2025-01")
        """
        self.domain = normalize_domain(shop)
        self.api_version = api_version
        self.graphql_url = f"https://{self.domain}/api/{api_version}/graphql.json"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Storefront-Access-Token": access_token,
            "Content-Type": "application/json",
        })

        # Rate limiting
        self.last_request_time = 0.0
        self.min_request_interval = 0.5  # 2 req/sec

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _rate_limit(self):
        """Implement rate limiting (2 requests/second max)."""
        now = time.time()
        elapsed = now - self.last_request_time

        if elapsed < self.min_request_interval:
            time.sleep(self.min_request_interval - elapsed)

        self.last_request_time = time.time()

    def graphql_request(
        self,
        query: str,
        variables: Optional[Dict] = None,
        timeout: int = 30
    ) -> Optional[Dict]:
        """
        Make GraphQL API request with rate limiting and error handling.

        Args:
            query: GraphQL query
            variables: Query variables
            timeout: Request timeout in seconds

        Returns:
            Response data (without 'data' wrapper) or None on error
        """
        payload = {"query": query}
        if variables:
            payload["variables"] = variables

        for attempt in range(self.MAX_RETRIES):
            self._rate_limit()

            try:
                response = self.session.post(
                    self.graphql_url,
                    json=payload,
                    timeout=timeout
                )

                # Retry on rate limiting or server errors
                if response.status_code in self.RETRYABLE_STATUS_CODES:
                    retry_after = _retry_delay(response.headers.get("Retry-After"), attempt)
                    logger.warning("HTTP %d on GraphQL, retry %d/%d in %.1fs...",
                                   response.status_code, attempt + 1,
                                   self.MAX_RETRIES, retry_after)
                    time.sleep(retry_after)
                    continue

                if response.status_code >= 400:
                    logger.error("API Error %d: %s", response.status_code, response.text[:200])
                    return None

                result = response.json()

                if "errors" in result:
                    logger.error("GraphQL Errors: %s", result['errors'])
                    return None

                return result.get("data")

            except requests.exceptions.Timeout:
                logger.error("GraphQL request timeout")
                return None
            except requests.exceptions.RequestException as e:
                logger.error("Request failed: %s", e)
                return None

        logger.error("Max retries (%d) exceeded for GraphQL request", self.MAX_RETRIES)
        return None

    def search_products(self, name: str, first: int = DEFAULT_PAGE_SIZE) -> Optional[Dict]:
        """
        Search products whose title starts with name.

        Only the first page of results is fetched.

        Args:
            name: Product name prefix
            first: Number of products to return (1-250)

        Returns:
            Query data ({"products": {...}}) or None on error
        """
        if not 1 <= first <= MAX_PAGE_SIZE:
            raise ValueError(f"first must be between 1 and {MAX_PAGE_SIZE}, got {first}")

        search = build_search_query(name)
        logger.debug("Searching %s for %s (first=%d)", self.domain, search, first)
        return self.graphql_request(
            PRODUCT_SEARCH_QUERY,
            {"query": search, "first": first},
        )
