"""Catch pattern statistics and the weather summary report.

Every caught fish counts once in each dimension it can be labelled in:
season and time of day come from the catch time, everything else from the
trip it was caught on. The best label of each dimension becomes a short
Danish summary line, and every dimension becomes a ranked group for charts.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger

from .aggregation import BestBucket, BucketItem, SimpleBucket, build_bucket_items, pick_best_bucket
from .buckets import (
    coast_wind_label,
    duration_bucket_label,
    is_number,
    movement_label,
    season_from_month,
    temp_bucket_label,
    time_of_day_bucket,
    water_level_bucket,
    wind_dir_label_from_deg,
    wind_speed_bucket_label,
)
from .labels import UNKNOWN_LABEL
from .trips import catch_times, trip_conditions, trip_duration_seconds

DEFAULT_MIN_TRIPS = 3
DEFAULT_SPOT_LIMIT = 10

SEASON = "season"
TIME_OF_DAY = "time_of_day"
WATER_LEVEL = "water_level"
WATER_TEMP = "water_temp"
AIR_TEMP = "air_temp"
WIND_SPEED = "wind_speed"
WIND_DIR = "wind_dir"
COAST_WIND = "coast_wind"
DURATION = "duration"
MOVEMENT = "movement"
SPOT = "spot"

# Chart groups in display order
GROUP_TITLES = (
    (SEASON, "Årstid"),
    (TIME_OF_DAY, "Tid på dagen"),
    (WATER_LEVEL, "Vandstand"),
    (WATER_TEMP, "Havtemperatur"),
    (AIR_TEMP, "Lufttemperatur"),
    (WIND_SPEED, "Vindstyrke"),
    (WIND_DIR, "Vindretning"),
    (COAST_WIND, "Vind ift. kyst"),
    (DURATION, "Turlængde"),
    (MOVEMENT, "Bevægelse"),
    (SPOT, "Spots med flest fisk"),
)

DIMENSIONS = tuple(key for key, _ in GROUP_TITLES)


@dataclass
class PatternGroup:
    title: str
    items: List[BucketItem]

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "items": [item.to_dict() for item in self.items]}


@dataclass
class PatternReport:
    """Summary lines plus ranked groups for one set of trips."""
    lines: List[str]
    groups: List[PatternGroup]

    def to_dict(self) -> Dict[str, Any]:
        return {"lines": list(self.lines), "groups": [group.to_dict() for group in self.groups]}


@dataclass
class PatternStats:
    """Per-dimension label counts gathered while scanning trips."""
    total_fish: int = 0
    buckets: Dict[str, Dict[str, SimpleBucket]] = field(
        default_factory=lambda: {dimension: {} for dimension in DIMENSIONS}
    )

    def record(self, dimension: str, label: Optional[str]) -> None:
        if not label:
            return
        bucket = self.buckets[dimension].setdefault(label, SimpleBucket())
        bucket.add(trips=1, fish=1)

    def dimension(self, name: str) -> Dict[str, SimpleBucket]:
        return self.buckets[name]


def collect_pattern_stats(trips: Iterable[Mapping[str, Any]]) -> PatternStats:
    stats = PatternStats()

    for trip in trips:
        if (trip.get("fish_count") or 0) <= 0:
            continue

        times = catch_times(trip)
        if not times:
            continue

        conditions = trip_conditions(trip)
        wind_dir = wind_dir_label_from_deg(conditions.wind_dir_deg) if is_number(conditions.wind_dir_deg) else None
        trip_labels = {
            WATER_LEVEL: water_level_bucket(conditions.water_level_cm),
            AIR_TEMP: temp_bucket_label(conditions.air_temp_c),
            WATER_TEMP: temp_bucket_label(conditions.water_temp_c),
            WIND_SPEED: wind_speed_bucket_label(conditions.wind_ms),
            COAST_WIND: coast_wind_label(conditions.coast_wind),
            WIND_DIR: wind_dir,
            DURATION: duration_bucket_label(trip_duration_seconds(trip)),
            MOVEMENT: movement_label(trip.get("distance_m"), trip.get("duration_sec")),
            SPOT: trip.get("spot_name") or None,
        }

        for caught_at in times:
            stats.total_fish += 1
            # datetime months are 1-based, the season table is 0-based
            stats.record(SEASON, season_from_month(caught_at.month - 1))
            stats.record(TIME_OF_DAY, time_of_day_bucket(caught_at.hour))
            for dimension, label in trip_labels.items():
                stats.record(dimension, label)

    return stats


def build_pattern_groups(
    stats: PatternStats,
    min_trips: int,
    spot_limit: int = DEFAULT_SPOT_LIMIT,
) -> List[PatternGroup]:
    groups: List[PatternGroup] = []
    for dimension, title in GROUP_TITLES:
        buckets = stats.dimension(dimension)
        limit = None
        if dimension == SPOT and len(buckets) > spot_limit:
            limit = spot_limit
        items = build_bucket_items(buckets, stats.total_fish, min_trips, limit)
        if items:
            groups.append(PatternGroup(title=title, items=items))
    return groups


def _known(best: Optional[BestBucket]) -> Optional[str]:
    if best is None or best.label == UNKNOWN_LABEL:
        return None
    return best.label


def _wind_speed_line(label: str) -> str:
    if label.endswith("vind"):
        return f"{label[0].upper()}{label[1:]}styrke"
    return label


def _coast_wind_line(label: str) -> str:
    key = label.lower()
    if "fraland" in key:
        return "Ved fralandsvind"
    if "påland" in key or "på-land" in key:
        return "Ved pålandsvind"
    if "side" in key or "langs" in key or "tvaers" in key:
        return "Ved sidevind"
    return f"Vind ift. kyst: {label}"


def _movement_line(label: str) -> str:
    key = label.lower()
    if "affiskning" in key:
        return "Flest fisk ved affiskning af vand"
    if "still" in key:
        return "Flest fisk ved stillestående/rolig placering"
    return f"Flest fisk ved {key}"


def build_summary_lines(stats: PatternStats, min_trips: int) -> List[str]:
    best = {dimension: pick_best_bucket(stats.dimension(dimension), min_trips) for dimension in DIMENSIONS}

    spot = _known(best[SPOT])
    tide = _known(best[WATER_LEVEL])
    wind_speed = _known(best[WIND_SPEED])
    wind_dir = _known(best[WIND_DIR])
    water_temp = _known(best[WATER_TEMP])
    air_temp = _known(best[AIR_TEMP])

    lines: List[str] = []
    if spot:
        lines.append(f"Spot: {spot}")
    if tide:
        lines.append(tide)
    if wind_speed:
        lines.append(_wind_speed_line(wind_speed))
    if wind_dir:
        lines.append(f"Vindretning: {wind_dir}")
    if best[TIME_OF_DAY]:
        lines.append(f"Om {best[TIME_OF_DAY].label.lower()}")
    if best[SEASON]:
        lines.append(f"Om {best[SEASON].label.lower()}")
    if water_temp:
        lines.append(f"Havtemperatur: {water_temp}")
    if air_temp:
        lines.append(f"Lufttemperatur: {air_temp}")
    if best[COAST_WIND]:
        lines.append(_coast_wind_line(best[COAST_WIND].label))
    if best[DURATION]:
        lines.append(f"Turlængde: {best[DURATION].label} giver flest fisk")
    if best[MOVEMENT]:
        lines.append(_movement_line(best[MOVEMENT].label))

    hints = [hint for hint in (wind_speed, tide, water_temp and f"Havtemp {water_temp}") if hint]
    if hints:
        lines.append(f"Prognose: kig efter {', '.join(hints)} for bedste match")
    return lines


def build_weather_summary(
    trips: Iterable[Mapping[str, Any]],
    min_trips: int = DEFAULT_MIN_TRIPS,
    spot_limit: int = DEFAULT_SPOT_LIMIT,
) -> Optional[PatternReport]:
    """Build the pattern report for a set of trips.

    Returns None when no fish were caught or nothing could be derived.
    """
    stats = collect_pattern_stats(trips)
    if stats.total_fish <= 0:
        logger.debug("[patterns] no catches to analyse")
        return None

    lines = build_summary_lines(stats, min_trips)
    groups = build_pattern_groups(stats, min_trips, spot_limit)
    if not lines and not groups:
        return None

    logger.info(f"[patterns] {stats.total_fish} fish -> {len(lines)} lines, {len(groups)} groups")
    return PatternReport(lines=lines, groups=groups)
