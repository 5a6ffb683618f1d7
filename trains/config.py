"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration.

Configuration can be overridden via environment variables:
- TRAINS_GRAPH_DATA_DIR=/path/to/data
- TRAINS_GRAPH_ROUTES_FILE=routes.txt
- TRAINS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Edge data configuration.

    Environment variables prefixed with TRAINS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINS_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    routes_file: str = "routes.txt"
    encoding: str = "utf-8"

    @property
    def routes_path(self) -> Path:
        """Full path to the edge token file."""
        return self.data_dir / self.routes_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TRAINS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINS_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_path)

    Environment variables prefixed with TRAINS_.
    """

    model_config = SettingsConfigDict(env_prefix="TRAINS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
