"""Long-running host that repeats the cleanup on a fixed interval."""

from __future__ import annotations

import datetime
import threading
from typing import Optional

from common_utils import configure_logger, log_exception

from .models import CleanupReport
from .service import FileDeletionService

logger = configure_logger(__name__)


class CleanupWorker:
    """Run a cleanup now, then once every ``interval_hours`` until stopped."""

    def __init__(
        self,
        service: FileDeletionService,
        interval_hours: float,
        stop_event: Optional[threading.Event] = None,
    ) -> None:
        if interval_hours <= 0:
            raise ValueError("interval_hours must be positive")
        self.service = service
        self.interval_hours = interval_hours
        self._stop = stop_event or threading.Event()
        self.runs = 0

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        logger.info("Stop requested for file cleanup service")
        self._stop.set()

    def run_once(self) -> Optional[CleanupReport]:
        started = datetime.datetime.now(datetime.timezone.utc)
        logger.info("File cleanup started at: %s", started.isoformat())
        try:
            report = self.service.delete_old_files()
        except Exception as exc:
            log_exception("An error occurred during the file cleanup process", exc, logger)
            return None
        finally:
            self.runs += 1
        logger.info(
            "File cleanup completed at: %s (%s)",
            datetime.datetime.now(datetime.timezone.utc).isoformat(),
            report.outcome.value,
        )
        return report

    def run_forever(self) -> None:
        logger.info(
            "File cleanup service started at: %s",
            datetime.datetime.now(datetime.timezone.utc).isoformat(),
        )
        while not self._stop.is_set():
            self.run_once()
            logger.info(
                "Waiting for the next cleanup cycle (interval: %s hours)...",
                self.interval_hours,
            )
            if self._stop.wait(self.interval_hours * 60 * 60):
                break
        logger.info(
            "File cleanup service stopped at: %s",
            datetime.datetime.now(datetime.timezone.utc).isoformat(),
        )
