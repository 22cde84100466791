"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.

Configuration can be overridden via environment variables:
- LAND_ROUTER_DATA_SOURCE=file
- LAND_ROUTER_DATA_DATA_FILE=/path/to/countries.json
- LAND_ROUTER_SERVER_PORT=9000
- LAND_ROUTER_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_COUNTRIES_URL = (
    "https://raw.githubusercontent.com/mledoze/countries/master/countries.json"
)


class CountryDataConfig(BaseSettings):
    """Country data source configuration.

    Environment variables prefixed with LAND_ROUTER_DATA_.
    """

    model_config = SettingsConfigDict(env_prefix="LAND_ROUTER_DATA_")

    source: Literal["http", "file"] = "http"
    data_url: str = DEFAULT_COUNTRIES_URL
    data_file: Optional[Path] = None
    timeout_seconds: float = 10.0


class ServerConfig(BaseSettings):
    """HTTP server configuration.

    Environment variables prefixed with LAND_ROUTER_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="LAND_ROUTER_SERVER_")

    host: str = "127.0.0.1"
    port: int = 8080


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with LAND_ROUTER_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LAND_ROUTER_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.data.data_url)
        print(config.server.port)

    Environment variables prefixed with LAND_ROUTER_.
    """

    model_config = SettingsConfigDict(env_prefix="LAND_ROUTER_")

    data: CountryDataConfig = Field(default_factory=CountryDataConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger."""
    config = config or get_config().observability
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        handlers=[logging.StreamHandler()],
        force=True,
    )
