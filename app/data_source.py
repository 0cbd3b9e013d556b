"""JSON file source for trip records and the spot directory."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from loguru import logger

from core.exceptions import TripDataError


class JsonTripSource:
    """Reads trips and spots from two JSON files holding lists of objects.

    A missing spots file is treated as an empty directory, since spot names
    fall back to ``"Spot #<id>"``; a missing trips file is an error.
    """

    def __init__(self, trips_path: str, spots_path: str):
        self.trips_path = Path(trips_path)
        self.spots_path = Path(spots_path)

    def load_trips(self) -> List[Dict[str, Any]]:
        if not self.trips_path.exists():
            raise TripDataError(f"Trips file not found: {self.trips_path}")
        return self._read_list(self.trips_path)

    def load_spots(self) -> List[Dict[str, Any]]:
        if not self.spots_path.exists():
            logger.info(f"[data] no spots file at {self.spots_path}, using generated names")
            return []
        return self._read_list(self.spots_path)

    @staticmethod
    def _read_list(path: Path) -> List[Dict[str, Any]]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise TripDataError(f"Failed to read {path}: {e}") from e

        if not isinstance(data, list):
            raise TripDataError(f"{path} must contain a JSON list, got {type(data).__name__}")

        records = [item for item in data if isinstance(item, dict)]
        if len(records) != len(data):
            logger.warning(f"[data] skipped {len(data) - len(records)} non-object entries in {path}")
        logger.debug(f"[data] read {len(records)} records from {path}")
        return records
