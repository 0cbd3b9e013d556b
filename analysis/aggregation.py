"""Selection and ranking over per-label catch counts."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from loguru import logger

from .labels import UNKNOWN_LABEL


@dataclass
class SimpleBucket:
    """Accumulated outcome for one label.

    Owned by whoever is accumulating; the aggregators only read it.
    """
    trips: int = 0
    fish: int = 0

    def add(self, trips: int = 1, fish: int = 1) -> None:
        self.trips += trips
        self.fish += fish


@dataclass(frozen=True)
class BestBucket:
    label: str
    trips: int
    fish: int

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "trips": self.trips, "fish": self.fish}


@dataclass(frozen=True)
class BucketItem:
    """Display-ready view of one bucket; ``share`` is a whole percentage."""
    label: str
    trips: int
    fish: int
    share: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "trips": self.trips,
            "fish": self.fish,
            "share": self.share,
        }


def _counts(bucket: Any) -> Tuple[int, int]:
    """Read (trips, fish) from a SimpleBucket or a plain mapping."""
    if isinstance(bucket, Mapping):
        return bucket.get("trips") or 0, bucket.get("fish") or 0
    return bucket.trips, bucket.fish


def _entries(stats: Mapping[str, Any]) -> List[Tuple[str, int, int]]:
    return [(label, *_counts(bucket)) for label, bucket in stats.items()]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def pick_best_bucket(stats: Mapping[str, Any], min_trips: int) -> Optional[BestBucket]:
    """Pick the label with the most fish.

    Labels with at least ``min_trips`` trips are preferred; when none
    qualify, every label is considered. Ties keep the earliest label.
    """
    entries = _entries(stats)
    if not entries:
        return None

    qualified = [entry for entry in entries if entry[1] >= min_trips]
    candidates = qualified or entries

    best = candidates[0]
    for entry in candidates[1:]:
        if entry[2] > best[2]:
            best = entry

    label, trips, fish = best
    return BestBucket(label=label, trips=trips, fish=fish)


def build_bucket_items(
    stats: Mapping[str, Any],
    total_fish: int,
    min_trips: int,
    limit: Optional[int] = None,
) -> List[BucketItem]:
    """Rank labels by fish caught with their share of ``total_fish``.

    Filtering runs in two passes, each undone if it would leave nothing:
    first labels below ``min_trips`` are dropped, then the unknown label.
    The result is sorted by fish descending (stable for ties) and cut to
    ``limit`` entries when a positive limit is given.
    """
    entries = _entries(stats)
    if not entries or total_fish <= 0:
        return []

    qualified = [entry for entry in entries if entry[1] >= min_trips] or entries
    known = [entry for entry in qualified if entry[0] != UNKNOWN_LABEL] or qualified

    ranked = sorted(known, key=lambda entry: entry[2], reverse=True)
    if limit is not None and limit > 0 and len(ranked) > limit:
        ranked = ranked[:limit]

    logger.debug(f"[patterns] ranked {len(ranked)} of {len(entries)} buckets")
    return [
        BucketItem(
            label=label,
            trips=trips,
            fish=fish,
            share=_round_half_up(fish / total_fish * 100),
        )
        for label, trips, fish in ranked
    ]
