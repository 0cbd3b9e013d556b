"""
Catch pattern analysis engine.

Turns raw trip records (catch times, temperature, wind, water level,
distance travelled, location) into categorical buckets, ranks the buckets
by fish caught and picks out the most productive conditions and spots.

Modules:
    labels: Label vocabularies, each with an explicit unknown member
    buckets: Scalar bucketizers for single readings
    aggregation: Best-bucket selection and ranked share lists
    spots: Visit and catch summaries per location
    trips: Readers for loosely shaped trip records
    patterns: Pattern statistics, chart groups and the summary report
    timeout: Deadline guard for slow asynchronous lookups

All classification and aggregation is synchronous and pure; bad or missing
readings degrade to the unknown label instead of raising.
"""

from __future__ import annotations

from .aggregation import BestBucket, BucketItem, SimpleBucket, build_bucket_items, pick_best_bucket
from .buckets import (
    coast_wind_label,
    duration_bucket_label,
    movement_label,
    season_from_month,
    temp_bucket_label,
    time_of_day_bucket,
    water_level_bucket,
    wind_dir_label_from_deg,
    wind_speed_bucket_label,
)
from .labels import UNKNOWN_LABEL
from .patterns import PatternGroup, PatternReport, PatternStats, build_pattern_groups, build_weather_summary
from .spots import Spot, SpotHighlight, SpotSummary, build_spot_summary
from .timeout import with_timeout

__all__ = [
    # Bucketizers
    "water_level_bucket",
    "season_from_month",
    "time_of_day_bucket",
    "temp_bucket_label",
    "wind_speed_bucket_label",
    "coast_wind_label",
    "wind_dir_label_from_deg",
    "duration_bucket_label",
    "movement_label",
    "UNKNOWN_LABEL",

    # Aggregation
    "SimpleBucket",
    "BestBucket",
    "BucketItem",
    "pick_best_bucket",
    "build_bucket_items",

    # Spots
    "Spot",
    "SpotHighlight",
    "SpotSummary",
    "build_spot_summary",

    # Reports
    "PatternStats",
    "PatternGroup",
    "PatternReport",
    "build_pattern_groups",
    "build_weather_summary",

    # Async
    "with_timeout",
]
