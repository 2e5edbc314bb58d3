"""Configuration for the model catalog: env vars, defaults, settings, logging."""

from model_catalog.config.enums import CacheNamespace, Provider
from model_catalog.config.env_vars import (
    EnvVar,
    get_env,
    get_env_float,
    get_env_list,
)
from model_catalog.config.logging import setup_logging
from model_catalog.config.settings import CatalogSettings

__all__ = [
    "CacheNamespace",
    "CatalogSettings",
    "EnvVar",
    "Provider",
    "get_env",
    "get_env_float",
    "get_env_list",
    "setup_logging",
]
