"""Infrastructure services kept apart from the analysis logic."""
from __future__ import annotations

import sys
from typing import List, Optional

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
FILE_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss}] {level}: {message}"


class LoggingService:
    """Owns the loguru sinks for one application run.

    The default loguru sink is replaced by a stderr sink at the configured
    level; an optional file sink mirrors everything at the same level.
    """

    def __init__(self):
        self._sink_ids: List[int] = []

    def configure(self, level: str = "INFO", log_file: Optional[str] = None) -> None:
        self.reset()
        logger.remove()
        self._sink_ids.append(logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT))
        if log_file:
            self._sink_ids.append(logger.add(log_file, level=level, format=FILE_FORMAT))
        logger.debug(f"[logging] configured level={level} file={log_file}")

    def reset(self) -> None:
        """Remove the sinks added by this service."""
        for sink_id in self._sink_ids:
            try:
                logger.remove(sink_id)
            except ValueError:
                logger.debug(f"[logging] sink {sink_id} already removed")
        self._sink_ids.clear()
