import logging
from datetime import datetime, timezone

from bs4 import BeautifulSoup

from app.exceptions.custom import TargetScrapeError
from app.mappers.page_extractor import extract_property_page
from app.schemas.property import PRICE_PLACEHOLDER, PageExtract, PropertyRecord, ScrapeTarget
from app.services.browser import BrowserLauncher, RenderedPage

logger = logging.getLogger(__name__)


def degraded_record(target: ScrapeTarget, error: str) -> PropertyRecord:
    return PropertyRecord(
        name=target.name,
        address=target.address,
        phone=target.phone,
        images=[],
        prices=[PRICE_PLACEHOLDER],
        amenities=[],
        source=target.key,
        scraped_at=datetime.now(timezone.utc),
        error=error,
    )


def _reason(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class PageScraperService:
    def __init__(self, launcher: BrowserLauncher, user_agent: str):
        self._launcher = launcher
        self._user_agent = user_agent

    async def scrape(self, target: ScrapeTarget) -> PropertyRecord:
        """Scrape one property website. Never raises for page failures: yields a degraded record."""
        logger.info("Scraping %s...", target.name)
        try:
            extract = await self._do_scrape(target)
        except TargetScrapeError as exc:
            logger.error("Error scraping %s: %s", target.name, exc.message)
            return degraded_record(target, exc.message)

        return PropertyRecord(
            name=target.name,
            address=target.address,
            phone=target.phone,
            images=extract.images,
            prices=extract.prices,
            amenities=extract.amenities,
            source=target.key,
            scraped_at=datetime.now(timezone.utc),
        )

    async def _do_scrape(self, target: ScrapeTarget) -> PageExtract:
        try:
            page = await self._render(target.url)
        except Exception as exc:
            raise TargetScrapeError(_reason(exc), source=target.key) from exc

        try:
            soup = BeautifulSoup(page.html, "html.parser")
            return extract_property_page(soup, page.url)
        except Exception as exc:
            raise TargetScrapeError(_reason(exc), source=target.key) from exc

    async def _render(self, url: str) -> RenderedPage:
        # Session is closed before returning on every path
        session = await self._launcher.launch()
        try:
            return await session.open_page(url, self._user_agent)
        finally:
            await session.close()
