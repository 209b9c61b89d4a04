"""
Configuration Loader

Resolves the store connection settings from the process environment.
Values usually come from a .env file loaded with python-dotenv before
load_store_config() is called.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..exceptions import ConfigError
from .constants import DEFAULT_API_VERSION

REQUIRED_VARIABLES = ("STORE_DOMAIN", "STOREFRONT_TOKEN")


def _mask(token: str) -> str:
    """Hide all but the last four characters of a token."""
    if len(token) <= 4:
        return "****"
    return "****" + token[-4:]


@dataclass(frozen=True)
class StoreConfig:
    """Validated connection settings for one storefront."""
    store_domain: str
    storefront_token: str
    api_version: str = DEFAULT_API_VERSION
    admin_token: str = ""   # Not needed for search, kept for other tooling

    def __repr__(self) -> str:
        return (
            f"StoreConfig(store_domain={self.store_domain!r}, "
            f"storefront_token={_mask(self.storefront_token)!r}, "
            f"api_version={self.api_version!r}, "
            f"admin_token={_mask(self.admin_token) if self.admin_token else ''!r})"
        )


def _read(env: Mapping[str, str], name: str) -> str:
    return (env.get(name) or "").strip()


def load_store_config(
    env: Optional[Mapping[str, str]] = None,
    store_domain: Optional[str] = None,
    storefront_token: Optional[str] = None,
) -> StoreConfig:
    """
    Build a StoreConfig from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)
        store_domain: Explicit value overriding STORE_DOMAIN
        storefront_token: Explicit value overriding STOREFRONT_TOKEN

    Returns:
        StoreConfig with stripped values

    Raises:
        ConfigError: If any required variable is missing or blank
    """
    if env is None:
        env = os.environ

    values = {name: _read(env, name) for name in REQUIRED_VARIABLES}
    if store_domain:
        values["STORE_DOMAIN"] = store_domain.strip()
    if storefront_token:
        values["STOREFRONT_TOKEN"] = storefront_token.strip()

    missing = [name for name in REQUIRED_VARIABLES if not values[name]]
    if missing:
        raise ConfigError(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )

    return StoreConfig(
        store_domain=values["STORE_DOMAIN"],
        storefront_token=values["STOREFRONT_TOKEN"],
        api_version=_read(env, "SHOPIFY_API_VERSION") or DEFAULT_API_VERSION,
        admin_token=_read(env, "ADMIN_TOKEN"),
    )
