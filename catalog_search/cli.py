"""
Storefront Variant Search

Searches the storefront for products whose title starts with a name,
then prints every variant ordered by price.

Usage:
    catalog-search --name shirt
    catalog-search --name "summer hat" --first 25
    catalog-search --name mug --shop my-store --token xxx

Credentials (in order of precedence):
    1. --shop / --token flags
    2. STORE_DOMAIN / STOREFRONT_TOKEN environment variables
    3. .env file (or the file given with --env-file)

Exit codes:
    0 = listing printed (including the "no product data" message)
    1 = configuration, API or data error
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .common.config_loader import load_store_config
from .common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .common.log_config import setup_logging
from .exceptions import CatalogSearchError
from .listing import build_listing
from .shopify import StorefrontAPIClient

logger = logging.getLogger(__name__)


def _search_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise argparse.ArgumentTypeError("search name must not be empty")
    return name


def _page_size(value: str) -> int:
    try:
        first = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid page size: {value!r}") from None
    if not 1 <= first <= MAX_PAGE_SIZE:
        raise argparse.ArgumentTypeError(f"page size must be between 1 and {MAX_PAGE_SIZE}")
    return first


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-search",
        description="List storefront product variants matching a name prefix, cheapest first",
    )
    parser.add_argument("--name", required=True, type=_search_name,
                        help="Product name prefix to search for")
    parser.add_argument(
        "--first",
        type=_page_size,
        default=DEFAULT_PAGE_SIZE,
        metavar="N",
        help=f"Number of products to fetch (default: {DEFAULT_PAGE_SIZE}, max: {MAX_PAGE_SIZE})",
    )
    parser.add_argument("--shop", help="Store domain (default: reads STORE_DOMAIN env var)")
    parser.add_argument("--token", help="Storefront access token (default: reads STOREFRONT_TOKEN env var)")
    parser.add_argument("--env-file", metavar="PATH", help="Path to .env file (default: search upwards from cwd)")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.env_file and not os.path.isfile(args.env_file):
        print(f"ERROR: env file not found: {args.env_file}", file=sys.stderr)
        return 1
    load_dotenv(args.env_file or find_dotenv(usecwd=True))
    setup_logging(verbose=args.verbose, quiet=args.quiet)

    try:
        config = load_store_config(store_domain=args.shop, storefront_token=args.token)
    except CatalogSearchError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.debug("Using %r", config)

    with StorefrontAPIClient(
        shop=config.store_domain,
        access_token=config.storefront_token,
        api_version=config.api_version,
    ) as client:
        result = client.search_products(args.name, first=args.first)

    if result is None:
        print("ERROR: Product search failed. Check store domain and token.", file=sys.stderr)
        return 1

    try:
        lines = build_listing(result, args.name)
    except CatalogSearchError as e:
        print(f"ERROR: Could not read search result: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
