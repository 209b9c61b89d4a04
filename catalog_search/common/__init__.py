# Common utilities
from .config_loader import StoreConfig, load_store_config
from .constants import CURRENCY_SYMBOLS, DEFAULT_CURRENCY_SYMBOL, TITLE_SEPARATOR
from .log_config import setup_logging
