"""Use cases for catch pattern analysis.

Each use case wraps one engine operation and reports the outcome as a
Result, so the startup code can branch on success without try/except.
"""
from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from analysis.patterns import DEFAULT_MIN_TRIPS, DEFAULT_SPOT_LIMIT, PatternReport, build_weather_summary
from analysis.spots import SpotSummary, build_spot_summary
from analysis.timeout import with_timeout
from core.error_handler import as_result, log_execution_time
from core.exceptions import OperationTimeoutError, ReportError, TripDataError
from core.result import Success, Failure, Result


@dataclass
class TripDataset:
    """Trips and spots loaded together for one analysis run."""
    trips: List[Dict[str, Any]] = field(default_factory=list)
    spots: List[Dict[str, Any]] = field(default_factory=list)


def _as_report_result(result: Result[Any, Exception], what: str) -> Result[Any, ReportError]:
    if result.is_success():
        return result
    logger.error(f"Failed to build {what}: {result.error}")
    return Failure(ReportError(f"Failed to build {what}: {result.error}"))


class LoadTripDataUseCase:
    """Loads trips and spots, bounding each read by a deadline."""

    def __init__(self, source, timeout_ms: int):
        self.source = source
        self.timeout_ms = timeout_ms

    async def execute(self) -> Result[TripDataset, TripDataError]:
        """Read both inputs concurrently.

        The reads run on a pool owned by this call, so a read that misses
        its deadline is abandoned and does not hold up the caller.

        Returns:
            Result containing the TripDataset or a TripDataError
        """
        loop = asyncio.get_running_loop()
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="trip-data")
        reads = [
            loop.run_in_executor(executor, self.source.load_trips),
            loop.run_in_executor(executor, self.source.load_spots),
        ]
        try:
            trips, spots = await asyncio.gather(
                with_timeout(reads[0], self.timeout_ms, "trips"),
                with_timeout(reads[1], self.timeout_ms, "spots"),
            )
        except OperationTimeoutError as e:
            logger.error(f"[data] {e}")
            return Failure(TripDataError(str(e)))
        except TripDataError as e:
            logger.error(f"[data] {e}")
            return Failure(e)
        finally:
            # a late result must not be delivered to a closed loop
            for read in reads:
                read.cancel()
            executor.shutdown(wait=False)

        logger.info(f"[data] loaded {len(trips)} trips and {len(spots)} spots")
        return Success(TripDataset(trips=trips, spots=spots))


class BuildPatternReportUseCase:
    """Builds the weather pattern report for a set of trips."""

    def __init__(self, min_trips: int = DEFAULT_MIN_TRIPS, spot_limit: int = DEFAULT_SPOT_LIMIT):
        self.min_trips = min_trips
        self.spot_limit = spot_limit

    @log_execution_time()
    def execute(self, trips: List[Dict[str, Any]]) -> Result[Optional[PatternReport], ReportError]:
        """Returns Success(None) when the trips hold no catches to analyse."""
        result = as_result(build_weather_summary)(trips, self.min_trips, self.spot_limit)
        return _as_report_result(result, "pattern report")


class BuildSpotSummaryUseCase:
    """Summarizes visits and catches per spot."""

    def execute(
        self,
        trips: List[Dict[str, Any]],
        spots: List[Dict[str, Any]],
    ) -> Result[Optional[SpotSummary], ReportError]:
        return _as_report_result(as_result(build_spot_summary)(trips, spots), "spot summary")
