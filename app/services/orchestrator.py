import asyncio
import logging
import random
from datetime import datetime, timezone

from app.exceptions.custom import OrchestrationError
from app.mappers.coordinates import resolve_coordinates
from app.mappers.field_extractors import extract_amenities, extract_bedrooms
from app.mappers.walking_time import estimate_walking_time
from app.schemas.property import PropertyRecord, RawListing, ScrapeTarget, Snapshot
from app.services.listing_scraper import LISTING_SOURCE, ListingSiteScraperService
from app.services.page_scraper import PageScraperService
from app.snapshot import SnapshotStore

logger = logging.getLogger(__name__)

LISTING_PHONE = "Contact via Zillow"


def listing_display_name(address: str) -> str:
    return f"Property - {address.split(',')[0]}"


class ScrapeOrchestrator:
    def __init__(
        self,
        page_scraper: PageScraperService,
        listing_scraper: ListingSiteScraperService,
        store: SnapshotStore,
        targets: tuple[ScrapeTarget, ...],
        rng: random.Random | None = None,
    ):
        self._page_scraper = page_scraper
        self._listing_scraper = listing_scraper
        self._store = store
        self._targets = targets
        self._rng = rng or random.Random()
        # One run at a time; later triggers queue behind the running one
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._lock.locked()

    async def perform_full_scrape(self) -> Snapshot:
        """Scrape every target then the listing site, and publish the result.

        Per-source failures are absorbed by the scrapers. Anything else raises
        OrchestrationError and leaves the previous snapshot published.
        """
        async with self._lock:
            logger.info("Starting full scrape of %d targets", len(self._targets))

            try:
                records: list[PropertyRecord] = []
                for target in self._targets:
                    record = await self._page_scraper.scrape(target)
                    records.append(self._enrich(record, target.name))

                listings = await self._listing_scraper.scrape_listings()
                records.extend(self._from_listing(listing) for listing in listings)
                snapshot = Snapshot(
                    records=tuple(records),
                    last_scrape_at=datetime.now(timezone.utc),
                )
            except Exception as exc:
                logger.exception("Full scrape failed")
                raise OrchestrationError(str(exc)) from exc

            self._store.publish(snapshot)
            logger.info("Scraping complete, found %d properties", len(snapshot.records))
            return snapshot

    def _enrich(self, record: PropertyRecord, bedroom_text: str) -> PropertyRecord:
        lat, lng = resolve_coordinates(record.address, self._rng)
        return record.model_copy(
            update={
                "coordinates": (lat, lng),
                "walking_time": estimate_walking_time(lat, lng),
                "bedrooms": extract_bedrooms(bedroom_text),
            }
        )

    def _from_listing(self, listing: RawListing) -> PropertyRecord:
        record = PropertyRecord(
            name=listing_display_name(listing.address),
            address=listing.address,
            phone=LISTING_PHONE,
            images=[listing.image] if listing.image else [],
            prices=[listing.price],
            amenities=extract_amenities(listing.details),
            source=LISTING_SOURCE,
            scraped_at=datetime.now(timezone.utc),
        )
        return self._enrich(record, listing.details)
