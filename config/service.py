"""Configuration facade.

Flattens the nested AppConfig so callers write ``service.min_trips``
instead of ``config.analysis.min_trips``.
"""
from __future__ import annotations

from typing import Any

from config.config import AppConfig, ConfigLoader


class ConfigurationService:
    """Read-only shortcuts over an AppConfig.

    Example:
        config_service = ConfigurationService(config)
        min_trips = config_service.min_trips
    """

    def __init__(self, config: AppConfig):
        self._config = config

    # Analysis
    @property
    def min_trips(self) -> int:
        return self._config.analysis.min_trips

    @property
    def spot_group_limit(self) -> int:
        return self._config.analysis.spot_group_limit

    # Data
    @property
    def trips_path(self) -> str:
        return self._config.data.trips_path

    @property
    def spots_path(self) -> str:
        return self._config.data.spots_path

    @property
    def load_timeout_ms(self) -> int:
        return self._config.data.load_timeout_ms

    # General
    @property
    def output_format(self) -> str:
        return self._config.output_format

    @property
    def debug(self) -> bool:
        return self._config.debug

    @property
    def log_level(self) -> str:
        """Effective log level; debug mode forces DEBUG."""
        return "DEBUG" if self._config.debug else self._config.log_level

    @property
    def raw_config(self) -> AppConfig:
        return self._config

    def to_dict(self) -> dict[str, Any]:
        """Serializable view of the configuration, for logging."""
        return {
            "analysis": {
                "min_trips": self.min_trips,
                "spot_group_limit": self.spot_group_limit,
            },
            "data": {
                "trips_path": self.trips_path,
                "spots_path": self.spots_path,
                "load_timeout_ms": self.load_timeout_ms,
            },
            "output_format": self.output_format,
            "debug": self.debug,
            "log_level": self.log_level,
        }


class ConfigurationServiceFactory:
    """Common ways of building a ConfigurationService."""

    @staticmethod
    def create_from_args(args: list[str]) -> tuple[ConfigurationService, list[str]]:
        """Load configuration from all sources, with ``args`` as the CLI layer.

        Returns:
            Tuple of (ConfigurationService, unknown_args)
        """
        loader = ConfigLoader()
        config, unknown_args = loader.load(args)
        return ConfigurationService(config), unknown_args

    @staticmethod
    def create_from_config(config: AppConfig) -> ConfigurationService:
        return ConfigurationService(config)

    @staticmethod
    def create_default() -> ConfigurationService:
        loader = ConfigLoader()
        config, _ = loader.load([])
        return ConfigurationService(config)
