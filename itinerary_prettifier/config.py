"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the configurable
parts of the prettifier: where the airport reference data lives, how
annotated output is styled, and how logging is set up.

Configuration can be overridden via environment variables:
- ITIN_DIRECTORY_DATA_DIR=/path/to/data
- ITIN_DIRECTORY_LOOKUP_FILE=airports.csv
- ITIN_RENDER_AIRPORT_STYLE="bold green"
- ITIN_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectoryConfig(BaseSettings):
    """Airport reference data location.

    Environment variables prefixed with ITIN_DIRECTORY_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_DIRECTORY_")

    data_dir: Path = Field(default_factory=Path.cwd)
    lookup_file: str = "airport-lookup.csv"
    # utf-8-sig tolerates a byte order mark in front of the header row
    encoding: str = "utf-8-sig"

    @property
    def lookup_path(self) -> Path:
        """Full path to the airport lookup CSV file."""
        return self.data_dir / self.lookup_file


class RenderingConfig(BaseSettings):
    """Styles used for annotated output.

    Values are rich style definitions ("green", "bold cyan", "#ff8800").
    Environment variables prefixed with ITIN_RENDER_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_RENDER_")

    airport_style: str = "green"
    city_style: str = "cyan"
    date_style: str = "magenta"
    time_style: str = "cyan"
    offset_style: str = "yellow"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with ITIN_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.directory.lookup_path)
        print(config.rendering.airport_style)

    Environment variables prefixed with ITIN_.
    """

    model_config = SettingsConfigDict(env_prefix="ITIN_")

    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the observability settings to the root logger."""
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
    )
