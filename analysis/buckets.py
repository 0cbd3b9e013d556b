"""Scalar bucketizers.

Every function here maps one raw reading to a label and never raises:
missing, non-numeric or NaN input gives the dimension's unknown sentinel
(``"ukendt"`` for string labels, ``None`` for nullable ones).
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Any, Optional

from .labels import (
    COMPASS_ORDER,
    UNKNOWN_LABEL,
    CoastWind,
    Movement,
    Season,
    TemperatureBand,
    TimeOfDay,
    TripDuration,
    WaterLevel,
    WindSpeed,
)

# (lower bound inclusive, label); the last band is open-ended
TEMP_BANDS = (
    (0.0, TemperatureBand.FREEZING),
    (4.0, TemperatureBand.COLD),
    (8.0, TemperatureBand.COOL),
    (12.0, TemperatureBand.MILD),
    (16.0, TemperatureBand.WARM),
)

LOW_WATER_CM = -20
HIGH_WATER_CM = 20

STATIONARY_MAX_M_PER_H = 300
COVERING_WATER_MIN_M_PER_H = 1500

OFFSHORE_HINTS = ("fraland", "offshore")
ONSHORE_HINTS = ("påland", "på-land", "onshore")
CROSS_SHORE_HINTS = ("sidevind", "langs kysten", "tvaers")


def is_number(value: Any) -> bool:
    """True for finite real numbers; bools and numeric strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def water_level_bucket(cm: Optional[float]) -> str:
    if not is_number(cm):
        return WaterLevel.UNKNOWN.value
    if cm < LOW_WATER_CM:
        return WaterLevel.LOW.value
    if cm > HIGH_WATER_CM:
        return WaterLevel.HIGH.value
    return WaterLevel.MIDDLE.value


def season_from_month(month: Optional[int]) -> str:
    """Season for a zero-based month (0 = January)."""
    if not is_number(month):
        return Season.UNKNOWN.value
    if 2 <= month <= 4:
        return Season.SPRING.value
    if 5 <= month <= 7:
        return Season.SUMMER.value
    if 8 <= month <= 10:
        return Season.AUTUMN.value
    return Season.WINTER.value


def time_of_day_bucket(hour: Optional[int]) -> str:
    if not is_number(hour):
        return TimeOfDay.UNKNOWN.value
    if 5 <= hour < 9:
        return TimeOfDay.MORNING.value
    if 9 <= hour < 12:
        return TimeOfDay.FORENOON.value
    if 12 <= hour < 17:
        return TimeOfDay.AFTERNOON.value
    if 17 <= hour < 22:
        return TimeOfDay.EVENING.value
    return TimeOfDay.NIGHT.value


def temp_bucket_label(celsius: Optional[float]) -> str:
    """Four-degree band for a temperature; below freezing is unknown."""
    if not is_number(celsius):
        return TemperatureBand.UNKNOWN.value
    label = TemperatureBand.UNKNOWN
    for lower, band in TEMP_BANDS:
        if celsius >= lower:
            label = band
    return label.value


def wind_speed_bucket_label(ms: Optional[float]) -> str:
    if not is_number(ms):
        return WindSpeed.UNKNOWN.value
    if ms < 4:
        return WindSpeed.LIGHT.value
    if ms < 8:
        return WindSpeed.MODERATE.value
    if ms < 12:
        return WindSpeed.FRESH.value
    return WindSpeed.STRONG.value


def coast_wind_label(raw: Optional[str]) -> Optional[str]:
    """Normalize a free-text coast wind category.

    Recognised phrases map onto the three coast wind labels; anything else is
    passed through untouched so new categories still show up in statistics.
    """
    if not raw or not isinstance(raw, str):
        return None
    text = raw.lower()
    if any(hint in text for hint in OFFSHORE_HINTS):
        return CoastWind.OFFSHORE.value
    if any(hint in text for hint in ONSHORE_HINTS):
        return CoastWind.ONSHORE.value
    if any(hint in text for hint in CROSS_SHORE_HINTS):
        return CoastWind.CROSS_SHORE.value
    if text == UNKNOWN_LABEL:
        return None
    return raw


def wind_dir_label_from_deg(deg: Optional[float]) -> str:
    if not is_number(deg):
        return UNKNOWN_LABEL
    normalized = deg % 360
    sector = int(((normalized + 22.5) % 360) // 45)
    return COMPASS_ORDER[sector].value


def duration_bucket_label(duration_sec: Optional[float]) -> Optional[str]:
    if not is_number(duration_sec):
        return None
    if duration_sec < 7200:
        return TripDuration.UNDER_TWO_HOURS.value
    if duration_sec < 14400:
        return TripDuration.TWO_TO_FOUR_HOURS.value
    if duration_sec < 21600:
        return TripDuration.FOUR_TO_SIX_HOURS.value
    return TripDuration.OVER_SIX_HOURS.value


def movement_label(distance_m: Optional[float], duration_sec: Optional[float]) -> Optional[str]:
    """Classify how much an angler moved, from metres covered per hour."""
    if not is_number(distance_m) or not is_number(duration_sec):
        return None
    if duration_sec <= 0:
        return None
    metres_per_hour = distance_m * 3600 / duration_sec
    if metres_per_hour <= STATIONARY_MAX_M_PER_H:
        return Movement.STATIONARY.value
    if metres_per_hour >= COVERING_WATER_MIN_M_PER_H:
        return Movement.COVERING_WATER.value
    return Movement.STEADY.value
