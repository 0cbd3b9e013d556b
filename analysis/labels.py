"""Label vocabularies for every bucket dimension.

Each vocabulary is a ``str`` enum with an explicit UNKNOWN member so the
"could not classify" case is a named value rather than a stray string.
Bucketizers return ``.value`` so labels behave as plain strings in
dictionaries and JSON output.
"""
from __future__ import annotations

from enum import Enum

UNKNOWN_LABEL = "ukendt"


class WaterLevel(str, Enum):
    LOW = "Lavvande"
    HIGH = "Højvande"
    MIDDLE = "Middel vandstand"
    UNKNOWN = UNKNOWN_LABEL


class Season(str, Enum):
    WINTER = "Vinteren"
    SPRING = "Foråret"
    SUMMER = "Sommeren"
    AUTUMN = "Efteråret"
    UNKNOWN = UNKNOWN_LABEL


class TimeOfDay(str, Enum):
    NIGHT = "Natten"
    MORNING = "Morgenen"
    FORENOON = "Formiddagen"
    AFTERNOON = "Eftermiddagen"
    EVENING = "Aftenen"
    UNKNOWN = UNKNOWN_LABEL


class TemperatureBand(str, Enum):
    FREEZING = "0–4°C"
    COLD = "4–8°C"
    COOL = "8–12°C"
    MILD = "12–16°C"
    WARM = "16°C+"
    UNKNOWN = UNKNOWN_LABEL


class WindSpeed(str, Enum):
    LIGHT = "svag vind"
    MODERATE = "mild vind"
    FRESH = "frisk vind"
    STRONG = "hård vind"
    UNKNOWN = UNKNOWN_LABEL


class CoastWind(str, Enum):
    OFFSHORE = "fralandsvind"
    ONSHORE = "pålandsvind"
    CROSS_SHORE = "sidevind"


class CompassDirection(str, Enum):
    NORTH = "Nord"
    NORTHEAST = "Nordøst"
    EAST = "Øst"
    SOUTHEAST = "Sydøst"
    SOUTH = "Syd"
    SOUTHWEST = "Sydvest"
    WEST = "Vest"
    NORTHWEST = "Nordvest"
    UNKNOWN = UNKNOWN_LABEL


class TripDuration(str, Enum):
    UNDER_TWO_HOURS = "<2 timer"
    TWO_TO_FOUR_HOURS = "2-4 timer"
    FOUR_TO_SIX_HOURS = "4-6 timer"
    OVER_SIX_HOURS = "6+ timer"


class Movement(str, Enum):
    STATIONARY = "Stillestående/let bevægelse"
    STEADY = "Roligt tempo"
    COVERING_WATER = "Affiskning af vand"


# Clockwise from north in 45° sectors centred on each heading
COMPASS_ORDER = (
    CompassDirection.NORTH,
    CompassDirection.NORTHEAST,
    CompassDirection.EAST,
    CompassDirection.SOUTHEAST,
    CompassDirection.SOUTH,
    CompassDirection.SOUTHWEST,
    CompassDirection.WEST,
    CompassDirection.NORTHWEST,
)
