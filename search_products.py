#!/usr/bin/env python3
"""
Storefront variant search.

Usage:
    python3 search_products.py --name shirt [--first 25] [--verbose]

Same as the installed `catalog-search` command.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from catalog_search.cli import main

if __name__ == "__main__":
    sys.exit(main())
