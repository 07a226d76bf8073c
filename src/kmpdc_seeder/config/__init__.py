"""Application configuration helpers."""

from __future__ import annotations

from .degrees import DEGREE_SYNONYMS_ENV, load_degree_synonyms
from .env import env_bool, env_float, env_int, env_str
from .errors import ConfigurationError
from .logging import configure_logging
from .registry import RegistryConfig, RetryPolicy, get_registry_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEGREE_SYNONYMS_ENV",
    "ConfigurationError",
    "DatabaseConfig",
    "RegistryConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "env_bool",
    "env_float",
    "env_int",
    "env_str",
    "get_database_config",
    "get_registry_config",
    "get_storage_config",
    "load_degree_synonyms",
]
