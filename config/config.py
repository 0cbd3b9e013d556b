"""Configuration loading and validation.

Precedence, lowest to highest:
1. Default values
2. JSON configuration file (config/analysis.json)
3. Environment variables
4. Command-line arguments

Sources are deep-merged, so any of them may override a single nested key.
"""
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

from loguru import logger

from core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("text", "json")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AnalysisConfig:
    """Pattern analysis settings.

    Attributes:
        min_trips: Sample size a bucket needs to be preferred when ranking
        spot_group_limit: Most spots shown in the spot chart group
    """
    min_trips: int = 3
    spot_group_limit: int = 10

    def __post_init__(self):
        if not _is_int(self.min_trips) or self.min_trips < 1:
            raise ConfigurationError(f"Invalid min_trips: {self.min_trips}")
        if not _is_int(self.spot_group_limit) or self.spot_group_limit < 1:
            raise ConfigurationError(f"Invalid spot_group_limit: {self.spot_group_limit}")


@dataclass(frozen=True)
class DataConfig:
    """Trip data input settings.

    Attributes:
        trips_path: JSON file holding a list of trip records
        spots_path: JSON file holding a list of spots
        load_timeout_ms: Deadline for reading each file
    """
    trips_path: str = "data/trips.json"
    spots_path: str = "data/spots.json"
    load_timeout_ms: int = 15000

    def __post_init__(self):
        if not _is_int(self.load_timeout_ms) or self.load_timeout_ms <= 0:
            raise ConfigurationError(f"Invalid load_timeout_ms: {self.load_timeout_ms}")


@dataclass(frozen=True)
class AppConfig:
    analysis: AnalysisConfig
    data: DataConfig
    output_format: str = "text"
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(f"Invalid output_format: {self.output_format}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")


class ConfigLoader:
    """Builds an AppConfig from defaults, file, environment and CLI."""

    def __init__(self, config_dir: Path = Path("config"), config_file: str = "analysis.json"):
        self.config_dir = config_dir
        self.config_file = config_file

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration with proper hierarchy: defaults → file → env → CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)
        """
        config_dict = self._get_defaults()
        self._deep_update(config_dict, self._load_json_config())
        self._deep_update(config_dict, self._load_env_overrides())
        cli_overrides, unknown_args = self._parse_cli_args(argv)
        self._deep_update(config_dict, cli_overrides)
        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        return {
            "analysis": {
                "min_trips": 3,
                "spot_group_limit": 10,
            },
            "data": {
                "trips_path": "data/trips.json",
                "spots_path": "data/spots.json",
                "load_timeout_ms": 15000,
            },
            "output_format": "text",
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_config(self) -> Dict[str, Any]:
        """Read the optional JSON config file; a broken file is skipped with a warning."""
        file_path = self.config_dir / self.config_file
        if not file_path.exists():
            return {}
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"[config] Failed to load {file_path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[config] Ignoring {file_path}: expected a JSON object")
            return {}
        return data

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Read overrides from the environment.

        Supported variables:
        - PATTERN_MIN_TRIPS, PATTERN_SPOT_LIMIT: analysis settings
        - TRIPS_PATH, SPOTS_PATH, LOAD_TIMEOUT_MS: data settings
        - OUTPUT_FORMAT, DEBUG, LOG_LEVEL: general settings
        """
        overrides: Dict[str, Any] = {}

        min_trips = self._env_int("PATTERN_MIN_TRIPS")
        if min_trips is not None:
            overrides.setdefault("analysis", {})["min_trips"] = min_trips

        spot_limit = self._env_int("PATTERN_SPOT_LIMIT")
        if spot_limit is not None:
            overrides.setdefault("analysis", {})["spot_group_limit"] = spot_limit

        trips_path = os.getenv("TRIPS_PATH")
        if trips_path:
            overrides.setdefault("data", {})["trips_path"] = trips_path

        spots_path = os.getenv("SPOTS_PATH")
        if spots_path:
            overrides.setdefault("data", {})["spots_path"] = spots_path

        timeout_ms = self._env_int("LOAD_TIMEOUT_MS")
        if timeout_ms is not None:
            overrides.setdefault("data", {})["load_timeout_ms"] = timeout_ms

        output_format = os.getenv("OUTPUT_FORMAT")
        if output_format:
            overrides["output_format"] = output_format.lower()

        if self._env_bool("DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.upper()

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        parser = argparse.ArgumentParser(description="Catch pattern analysis")
        parser.add_argument("--trips", help="Path to the trips JSON file")
        parser.add_argument("--spots", help="Path to the spots JSON file")
        parser.add_argument("--min-trips", type=int, help="Trips a bucket needs to be preferred")
        parser.add_argument("--spot-limit", type=int, help="Most spots shown in the spot group")
        parser.add_argument("--timeout-ms", type=int, help="Deadline for loading each data file")
        parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Report output format")
        parser.add_argument("--debug", action="store_true", help="Enable debug mode")
        parser.add_argument("--log-level", choices=LOG_LEVELS, help="Set logging level")

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        if known.min_trips is not None:
            overrides.setdefault("analysis", {})["min_trips"] = known.min_trips
        if known.spot_limit is not None:
            overrides.setdefault("analysis", {})["spot_group_limit"] = known.spot_limit
        if known.trips:
            overrides.setdefault("data", {})["trips_path"] = known.trips
        if known.spots:
            overrides.setdefault("data", {})["spots_path"] = known.spots
        if known.timeout_ms is not None:
            overrides.setdefault("data", {})["load_timeout_ms"] = known.timeout_ms
        if known.format:
            overrides["output_format"] = known.format
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build and validate the final configuration object.

        Raises:
            ConfigurationError: If a section has unknown keys or invalid values
        """
        try:
            analysis_config = AnalysisConfig(**config_dict.get("analysis", {}))
            data_config = DataConfig(**config_dict.get("data", {}))
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}") from e

        return AppConfig(
            analysis=analysis_config,
            data=data_config,
            output_format=config_dict.get("output_format", "text"),
            debug=config_dict.get("debug", False),
            log_level=config_dict.get("log_level", "INFO"),
        )

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """True for "1", "true", "yes", "y", "on" (case-insensitive)."""
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _env_int(name: str):
        val = os.getenv(name)
        if val is None or not val.strip():
            return None
        try:
            return int(val.strip())
        except ValueError as e:
            raise ConfigurationError(f"{name} must be an integer, got {val!r}") from e

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively merge ``updates`` into ``target`` without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)  # type: ignore[index]
            else:
                target[key] = new_val


def parse_app_args(argv: List[str]) -> Tuple[AppConfig, List[str]]:
    """Load configuration with a default ConfigLoader."""
    loader = ConfigLoader()
    return loader.load(argv)


__all__ = ["AppConfig", "AnalysisConfig", "DataConfig", "ConfigLoader", "parse_app_args"]
