"""
Monthly report scheduler.

Runs a job once per calendar month at a fixed day and hour (by default the
1st at 08:00) on an asyncio task owned by the application lifespan. The job
itself is synchronous and runs in a worker thread.
"""

import asyncio
import calendar
import contextlib
import logging
from datetime import datetime
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


def _fire_time(year: int, month: int, day_of_month: int, hour: int) -> datetime:
    # Clamp to the month's last day so day 31 still fires in short months
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, min(day_of_month, last_day), hour)


def next_run_after(now: datetime, day_of_month: int = 1, hour: int = 8) -> datetime:
    """
    Return the first scheduled fire time strictly after ``now``.

    Example:
        >>> next_run_after(datetime(2024, 1, 1, 8, 0))
        datetime.datetime(2024, 2, 1, 8, 0)
    """
    if not 1 <= day_of_month <= 31:
        raise ValueError("day_of_month must be between 1 and 31")
    if not 0 <= hour <= 23:
        raise ValueError("hour must be between 0 and 23")

    candidate = _fire_time(now.year, now.month, day_of_month, hour)
    if candidate > now:
        return candidate
    if now.month == 12:
        return _fire_time(now.year + 1, 1, day_of_month, hour)
    return _fire_time(now.year, now.month + 1, day_of_month, hour)


class MonthlyReportScheduler:
    """Fire ``job`` once per month until stopped."""

    def __init__(
        self,
        job: Callable[[], Any],
        day_of_month: int = 1,
        hour: int = 8,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.job = job
        self.day_of_month = day_of_month
        self.hour = hour
        self.clock = clock
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def run_once(self) -> Any:
        """Run the job in a worker thread. Failures are logged and do not stop the schedule."""
        logger.info("Running scheduled monthly report job")
        try:
            return await asyncio.to_thread(self.job)
        except Exception:
            logger.exception("Scheduled monthly report job failed")
            return None

    async def run_forever(self) -> None:
        while True:
            now = self.clock()
            next_run = next_run_after(now, self.day_of_month, self.hour)
            delay = (next_run - now).total_seconds()
            logger.info(f"Next monthly report run scheduled at {next_run.isoformat()}")
            await asyncio.sleep(delay)
            await self.run_once()

    def start(self) -> None:
        """Start the schedule on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self.run_forever(), name="monthly-report-scheduler")

    async def stop(self) -> None:
        """Cancel the schedule and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Monthly report scheduler stopped")
