"""Package-level exceptions.

Everything raised on purpose derives from CatalogSearchError so the CLI can
catch it in one place and print a short message instead of a traceback.
"""


class CatalogSearchError(Exception):
    """Base class for all catalog search errors."""


class MalformedCatalogError(CatalogSearchError, ValueError):
    """The catalog query result does not have the expected product/variant shape."""


class ConfigError(CatalogSearchError):
    """Required store configuration is missing."""
