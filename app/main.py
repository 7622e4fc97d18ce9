import asyncio
import logging
import random
import sys
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings
from app.exceptions.custom import OrchestrationError
from app.exceptions.handlers import orchestration_error_handler
from app.routers.properties import router as properties_router
from app.scheduler import DailyScrapeScheduler, run_scrape
from app.services.browser import PlaywrightLauncher
from app.services.listing_scraper import ListingSiteScraperService
from app.services.orchestrator import ScrapeOrchestrator
from app.services.page_scraper import PageScraperService
from app.snapshot import SnapshotStore
from app.targets import SCRAPE_TARGETS


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    launcher = PlaywrightLauncher(
        headless=settings.browser_headless,
        navigation_timeout_ms=settings.navigation_timeout_ms,
    )
    store = SnapshotStore()
    orchestrator = ScrapeOrchestrator(
        PageScraperService(launcher, settings.user_agent),
        ListingSiteScraperService(launcher, settings.listing_search_url, settings.user_agent),
        store,
        SCRAPE_TARGETS,
        rng=random.Random(),
    )

    app.state.snapshot_store = store
    app.state.orchestrator = orchestrator
    app.state.started_at = time.monotonic()

    scheduler: DailyScrapeScheduler | None = None
    if settings.scrape_schedule_enabled:
        scheduler = DailyScrapeScheduler(
            orchestrator,
            settings.scrape_hour,
            settings.scrape_minute,
            settings.scrape_timezone,
        )
        scheduler.start()

    startup_task: asyncio.Task | None = None
    if settings.scrape_on_startup:
        startup_task = asyncio.create_task(run_scrape(orchestrator, "startup"))

    yield

    if startup_task is not None and not startup_task.done():
        startup_task.cancel()
    if scheduler is not None:
        await scheduler.stop()


_settings = Settings()

app = FastAPI(title="Campus Housing Scraper", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)
app.add_exception_handler(OrchestrationError, orchestration_error_handler)

app.include_router(properties_router)
