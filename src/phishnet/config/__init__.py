"""Configuration surface: constants and the ``ClientConfig`` model."""

from .client_config import (
    ClientConfig,
    ClientConfigError,
    ClientConfigParseError,
    ClientConfigValidationError,
    client_config_from_mapping,
    load_client_config,
)
from .settings import BASE_URL, DATE_FORMAT, DEFAULT_QUERY_RATE

__all__ = [
    "BASE_URL",
    "ClientConfig",
    "ClientConfigError",
    "ClientConfigParseError",
    "ClientConfigValidationError",
    "DATE_FORMAT",
    "DEFAULT_QUERY_RATE",
    "client_config_from_mapping",
    "load_client_config",
]
