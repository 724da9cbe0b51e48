"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- TOUR_GRAPH_DATA_DIR=/path/to/data
- TOUR_GRAPH_ROUTES_FILES='["routes.csv"]'
- TOUR_HTTP_PORT=9090
- TOUR_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Route data configuration.

    Environment variables prefixed with TOUR_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="TOUR_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    routes_files: List[str] = Field(default_factory=list)
    encoding: str = "utf-8"

    @property
    def routes_paths(self) -> List[Path]:
        """Full paths to the route CSV files, in load order."""
        return [self.data_dir / name for name in self.routes_files]


class HTTPConfig(BaseSettings):
    """HTTP transport configuration.

    Environment variables prefixed with TOUR_HTTP_.
    """

    model_config = SettingsConfigDict(env_prefix="TOUR_HTTP_")

    host: str = "127.0.0.1"
    port: int = 8080


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with TOUR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="TOUR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.routes_paths)
        print(config.http.port)

    Environment variables prefixed with TOUR_.
    """

    model_config = SettingsConfigDict(env_prefix="TOUR_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    http: HTTPConfig = Field(default_factory=HTTPConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format to the root logger."""
    logging.basicConfig(level=config.level.upper(), format=config.format, force=True)
