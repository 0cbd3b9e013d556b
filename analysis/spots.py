"""Per-location visit and catch summaries."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from loguru import logger

# Tried in order; the first key holding a value wins
SPOT_ID_KEYS = ("spot_id", "spotId", "spotID")


@dataclass(frozen=True)
class Spot:
    id: str
    name: str


@dataclass(frozen=True)
class SpotHighlight:
    """One location singled out in a summary."""
    id: str
    name: str
    trips: int
    fish: int
    avg: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "trips": self.trips,
            "fish": self.fish,
            "avg": self.avg,
        }


@dataclass(frozen=True)
class SpotSummary:
    """Visit statistics across all locations found in a set of trips.

    Attributes:
        total_spots: Number of distinct location ids seen
        most_visited: Location with the most trips
        best_catch: Location with the highest fish-per-trip average
    """
    total_spots: int
    most_visited: SpotHighlight
    best_catch: SpotHighlight

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSpots": self.total_spots,
            "mostVisited": self.most_visited.to_dict(),
            "bestCatch": self.best_catch.to_dict(),
        }


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _id_text(raw: Any) -> str:
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw)


def spot_id_of(trip: Mapping[str, Any]) -> Optional[str]:
    """Location id of a trip under any of its aliased keys, as text."""
    for key in SPOT_ID_KEYS:
        raw = trip.get(key)
        if raw is not None:
            return _id_text(raw)
    return None


def _spot_names(spots: Iterable[Any]) -> Dict[str, str]:
    names: Dict[str, str] = {}
    for spot in spots:
        spot_id = _field(spot, "id")
        if spot_id is None:
            continue
        names.setdefault(_id_text(spot_id), _field(spot, "name") or "")
    return names


def build_spot_summary(
    trips: Iterable[Mapping[str, Any]],
    spots: Iterable[Any],
) -> Optional[SpotSummary]:
    """Summarize trips per location.

    Trips without a location id are skipped. Returns None when no trip
    carries one. Names come from ``spots``; unknown ids are shown as
    ``"Spot #<id>"``.
    """
    totals: Dict[str, List[int]] = {}
    for trip in trips:
        spot_id = spot_id_of(trip)
        if spot_id is None:
            continue
        counts = totals.setdefault(spot_id, [0, 0])
        counts[0] += 1
        counts[1] += trip.get("fish_count") or 0

    if not totals:
        return None

    names = _spot_names(spots)
    highlights = [
        SpotHighlight(
            id=spot_id,
            name=names.get(spot_id) or f"Spot #{spot_id}",
            trips=trip_count,
            fish=fish,
            avg=fish / max(trip_count, 1),
        )
        for spot_id, (trip_count, fish) in totals.items()
    ]

    most_visited = highlights[0]
    best_catch = highlights[0]
    for highlight in highlights[1:]:
        if highlight.trips > most_visited.trips:
            most_visited = highlight
        if highlight.avg > best_catch.avg:
            best_catch = highlight

    logger.debug(
        f"[spots] {len(highlights)} spots, most visited={most_visited.id} best catch={best_catch.id}"
    )
    return SpotSummary(
        total_spots=len(highlights),
        most_visited=most_visited,
        best_catch=best_catch,
    )
