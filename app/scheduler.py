from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from app.mappers.schedule import next_run_at
from app.services.orchestrator import ScrapeOrchestrator

logger = logging.getLogger(__name__)


class DailyScrapeScheduler:
    """Runs a full scrape every day at a fixed local time."""

    def __init__(
        self,
        orchestrator: ScrapeOrchestrator,
        hour: int,
        minute: int,
        tz: str,
    ) -> None:
        self._orchestrator = orchestrator
        self._hour = hour
        self._minute = minute
        self._tz = tz
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _loop(self) -> None:
        while True:
            now = datetime.now(timezone.utc)
            run_at = next_run_at(now, self._hour, self._minute, self._tz)
            logger.info("Next scheduled scrape at %s", run_at.isoformat())
            await asyncio.sleep((run_at - now).total_seconds())
            await run_scrape(self._orchestrator, "scheduled")


async def run_scrape(orchestrator: ScrapeOrchestrator, trigger: str) -> None:
    """Background entry point: logs failures instead of raising."""
    logger.info("Running %s scrape", trigger)
    try:
        await orchestrator.perform_full_scrape()
    except Exception:
        logger.exception("%s scrape failed", trigger.capitalize())
