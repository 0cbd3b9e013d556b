"""Application startup.

Runs the analysis end to end: configuration, logging, data loading,
pattern report and spot summary, then prints the result.
"""
from __future__ import annotations

import asyncio
import json
import sys
from typing import List, Optional

from loguru import logger

from analysis.patterns import PatternReport
from analysis.spots import SpotSummary
from app.data_source import JsonTripSource
from app.services import LoggingService
from app.use_cases import BuildPatternReportUseCase, BuildSpotSummaryUseCase, LoadTripDataUseCase
from config.service import ConfigurationServiceFactory
from core.error_handler import ErrorHandler
from core.exceptions import ConfigurationError


def render_text(report: Optional[PatternReport], spot_summary: Optional[SpotSummary]) -> str:
    """Plain text rendering of a report for the terminal."""
    out: List[str] = []
    if report is None:
        out.append("Ingen fangster at analysere.")
    else:
        out.append("Bedste forhold:")
        out.extend(f"  - {line}" for line in report.lines)
        for group in report.groups:
            out.append("")
            out.append(f"{group.title}:")
            out.extend(
                f"  {item.label:<30} {item.fish:>5} fisk {item.share:>4}%"
                for item in group.items
            )

    if spot_summary is not None:
        out.append("")
        out.append(f"Spots besøgt: {spot_summary.total_spots}")
        visited = spot_summary.most_visited
        best = spot_summary.best_catch
        out.append(f"  Mest besøgt: {visited.name} ({visited.trips} ture)")
        out.append(f"  Bedste fangst: {best.name} ({best.avg:.1f} fisk pr. tur)")
    return "\n".join(out)


def render_json(report: Optional[PatternReport], spot_summary: Optional[SpotSummary]) -> str:
    payload = {
        "report": report.to_dict() if report is not None else None,
        "spots": spot_summary.to_dict() if spot_summary is not None else None,
    }
    return json.dumps(payload, ensure_ascii=False, indent=2)


def run_application(argv: Optional[List[str]] = None) -> int:
    """Run one analysis and print the result.

    Startup sequence:
    1. Parse configuration from all sources (defaults, file, env, CLI)
    2. Configure logging
    3. Load trips and spots under the configured deadline
    4. Build the pattern report and spot summary
    5. Print as text or JSON

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        config_service, unknown_args = ConfigurationServiceFactory.create_from_args(args)
    except ConfigurationError as e:
        ErrorHandler().handle(e, context="configuration")
        return 1

    LoggingService().configure(level=config_service.log_level)
    logger.debug(f"Configuration: {config_service.to_dict()}")
    if unknown_args:
        logger.warning(f"Ignoring unknown arguments: {unknown_args}")

    source = JsonTripSource(config_service.trips_path, config_service.spots_path)
    loaded = asyncio.run(LoadTripDataUseCase(source, config_service.load_timeout_ms).execute())
    if loaded.is_failure():
        return 1
    dataset = loaded.unwrap()

    report_result = BuildPatternReportUseCase(
        config_service.min_trips, config_service.spot_group_limit
    ).execute(dataset.trips)
    spot_result = BuildSpotSummaryUseCase().execute(dataset.trips, dataset.spots)
    if report_result.is_failure() or spot_result.is_failure():
        return 1

    render = render_json if config_service.output_format == "json" else render_text
    print(render(report_result.unwrap(), spot_result.unwrap()))
    return 0
