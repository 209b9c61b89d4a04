"""
Logging Configuration

Diagnostics go to stderr so stdout carries only the product listing,
which keeps `catalog-search --name x > prices.txt` clean.
"""

import logging
import sys

PACKAGE_LOGGER = "catalog_search"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        verbose: If True, set level to DEBUG and show HTTP connection logs
        quiet: If True, set level to WARNING

    Returns:
        The configured package logger
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-8s %(name)s: %(message)s"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate handlers if called multiple times
    logger.handlers.clear()
    logger.addHandler(handler)

    # requests/urllib3 log every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
