"""Readers for loosely shaped trip records.

Trip records come straight from storage as dictionaries. Environmental
readings live in a JSON ``meta_json`` blob, catch times in
``fish_events_json``; either may be missing or malformed, in which case the
readers return empty values instead of raising.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from .buckets import is_number

# Evaluation keys that may hold the wind direction, in order of preference
WIND_DIR_KEYS = ("windDirDeg", "windDeg", "windFromDirDeg", "windFromDir")

# Legacy evaluation keys and the names they were renamed to
EVALUATION_ALIASES = {
    "seaTempC": "waterTempC",
    "waterLevelCm": "waterLevelCM",
    "seaTempSeries": "waterTempSeries",
    "waterLevelCmSeries": "waterLevelSeries",
}


@dataclass(frozen=True)
class TripConditions:
    """Averaged environmental readings for one trip."""
    water_level_cm: Optional[float] = None
    air_temp_c: Optional[float] = None
    water_temp_c: Optional[float] = None
    wind_ms: Optional[float] = None
    wind_dir_deg: Optional[float] = None
    coast_wind: Optional[str] = None


def _load_json(raw: Any) -> Any:
    if raw is None or isinstance(raw, (dict, list)):
        return raw
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO string or epoch milliseconds into local time.

    Naive ISO strings are taken to be local already.
    """
    if isinstance(value, datetime):
        parsed = value
    elif is_number(value):
        try:
            return datetime.fromtimestamp(value / 1000)
        except (OverflowError, OSError, ValueError):
            return None
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def fish_events_count(trip: Mapping[str, Any]) -> int:
    """Number of logged catch events, falling back to ``fish_count``."""
    events = _load_json(trip.get("fish_events_json"))
    if isinstance(events, list):
        return len(events)
    return trip.get("fish_count") or 0


def trip_evaluation(trip: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Environmental evaluation stored in the trip's metadata, if any."""
    meta = _load_json(trip.get("meta_json"))
    if not isinstance(meta, dict):
        return None

    summary = meta.get("summary")
    evaluation = meta.get("evaluation")
    if not evaluation and isinstance(summary, dict):
        evaluation = summary.get("evaluation")
    if not evaluation and meta.get("source"):
        evaluation = meta
    if not isinstance(evaluation, dict):
        return None

    normalized = dict(evaluation)
    for legacy, current in EVALUATION_ALIASES.items():
        if normalized.get(legacy) and not normalized.get(current):
            normalized[current] = normalized[legacy]
    return normalized


def _average(evaluation: Mapping[str, Any], key: str) -> Any:
    entry = evaluation.get(key)
    if isinstance(entry, Mapping):
        return entry.get("avg")
    return None


def trip_conditions(trip: Mapping[str, Any]) -> TripConditions:
    evaluation = trip_evaluation(trip)
    if evaluation is None:
        return TripConditions()

    wind_dir = None
    for key in WIND_DIR_KEYS:
        wind_dir = _average(evaluation, key)
        if wind_dir is not None:
            break

    coast_wind = evaluation.get("coastWind")
    category = coast_wind.get("category") if isinstance(coast_wind, Mapping) else None

    return TripConditions(
        water_level_cm=_average(evaluation, "waterLevelCM"),
        air_temp_c=_average(evaluation, "airTempC"),
        water_temp_c=_average(evaluation, "waterTempC"),
        wind_ms=_average(evaluation, "windMS"),
        wind_dir_deg=wind_dir,
        coast_wind=category,
    )


def trip_duration_seconds(trip: Mapping[str, Any]) -> Optional[float]:
    """Recorded duration, or the span between start and end timestamps."""
    duration = trip.get("duration_sec")
    if is_number(duration):
        return duration
    start = parse_timestamp(trip.get("start_ts"))
    end = parse_timestamp(trip.get("end_ts"))
    if start is None or end is None:
        return None
    return max(0.0, (end - start).total_seconds())


def catch_times(trip: Mapping[str, Any]) -> List[datetime]:
    """When each fish of the trip was caught.

    Without logged events every fish is placed at the trip's start.
    """
    times: List[datetime] = []
    events = _load_json(trip.get("fish_events_json"))
    if isinstance(events, list):
        for event in events:
            if isinstance(event, (str, int, float)):
                parsed = parse_timestamp(event)
                if parsed is not None:
                    times.append(parsed)

    fish_count = trip.get("fish_count") or 0
    if not times and fish_count > 0:
        start = parse_timestamp(trip.get("start_ts"))
        if start is not None:
            times = [start] * int(fish_count)
    return times
