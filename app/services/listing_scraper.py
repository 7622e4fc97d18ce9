import logging

from bs4 import BeautifulSoup

from app.exceptions.custom import ListingSiteError
from app.mappers.page_extractor import extract_listing_cards
from app.schemas.property import MAX_LISTINGS, RawListing
from app.services.browser import BrowserLauncher

logger = logging.getLogger(__name__)

LISTING_SOURCE = "Zillow"


class ListingSiteScraperService:
    """Rental cards from the aggregator's map search around campus."""

    def __init__(
        self,
        launcher: BrowserLauncher,
        search_url: str,
        user_agent: str | None = None,
        limit: int = MAX_LISTINGS,
    ):
        self._launcher = launcher
        self._search_url = search_url
        self._user_agent = user_agent
        self._limit = limit

    async def scrape_listings(self) -> list[RawListing]:
        """Best-effort: a failed search yields an empty list."""
        logger.info("Scraping listing site...")
        try:
            listings = await self._do_scrape()
        except ListingSiteError as exc:
            logger.error("Error scraping listing site: %s", exc.message)
            return []

        logger.info("Listing site returned %d listings", len(listings))
        return listings

    async def _do_scrape(self) -> list[RawListing]:
        try:
            session = await self._launcher.launch()
            try:
                page = await session.open_page(self._search_url, self._user_agent)
            finally:
                await session.close()

            soup = BeautifulSoup(page.html, "html.parser")
            return extract_listing_cards(soup, page.url, limit=self._limit)
        except Exception as exc:
            raise ListingSiteError(str(exc) or type(exc).__name__, source=LISTING_SOURCE) from exc
