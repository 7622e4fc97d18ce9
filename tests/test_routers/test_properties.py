from datetime import datetime, timezone
from unittest.mock import AsyncMock

from app.exceptions.custom import OrchestrationError
from app.main import app
from app.schemas.property import PropertyRecord, Snapshot
from app.services.listing_scraper import ListingSiteScraperService
from app.services.orchestrator import ScrapeOrchestrator
from app.services.page_scraper import PageScraperService
from app.targets import SCRAPE_TARGETS
from fakes import FakeLauncher, html_page

NOW = datetime(2024, 9, 1, 10, 0, tzinfo=timezone.utc)


def _record(source: str, name: str = "Verve New Brunswick") -> PropertyRecord:
    return PropertyRecord(
        name=name,
        address="88 Easton Avenue, New Brunswick, NJ 08901",
        phone="(862) 244-1479",
        prices=["$1,099"],
        coordinates=(40.4862, -74.4518),
        walking_time="2 min walk",
        bedrooms="1-4 BR",
        source=source,
        scraped_at=NOW,
    )


async def test_properties_empty_before_first_scrape(client):
    resp = await client.get("/properties")
    assert resp.status_code == 200
    assert resp.json() == {"properties": [], "last_scrape_time": None, "total_count": 0}


async def test_properties_returns_snapshot(client):
    app.state.snapshot_store.publish(
        Snapshot(records=(_record("verve"), _record("standard")), last_scrape_at=NOW)
    )
    resp = await client.get("/properties")
    data = resp.json()
    assert data["total_count"] == 2
    assert [p["source"] for p in data["properties"]] == ["verve", "standard"]
    assert data["properties"][0]["coordinates"] == [40.4862, -74.4518]
    assert data["last_scrape_time"].startswith("2024-09-01T10:00:00")


async def test_property_found(client):
    app.state.snapshot_store.publish(
        Snapshot(records=(_record("verve"), _record("standard", name="The Standard")), last_scrape_at=NOW)
    )
    resp = await client.get("/property/standard")
    assert resp.status_code == 200
    assert resp.json()["name"] == "The Standard"
    assert resp.json()["source"] == "standard"


async def test_property_not_found(client):
    app.state.snapshot_store.publish(Snapshot(records=(_record("verve"),), last_scrape_at=NOW))
    resp = await client.get("/property/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Property not found"}


async def test_health(client):
    app.state.snapshot_store.publish(Snapshot(records=(_record("verve"),), last_scrape_at=NOW))
    resp = await client.get("/health")
    data = resp.json()
    assert resp.status_code == 200
    assert data["status"] == "healthy"
    assert data["properties_count"] == 1
    assert data["last_scrape"].startswith("2024-09-01")
    assert data["uptime_seconds"] >= 0


async def test_scrape_runs_pipeline(client):
    launcher = FakeLauncher({t.url: html_page("<p>From $1,200 with a pool</p>") for t in SCRAPE_TARGETS})
    search_url = "https://www.zillow.com/search"
    app.state.orchestrator = ScrapeOrchestrator(
        PageScraperService(launcher, "UA"),
        ListingSiteScraperService(launcher, search_url),
        app.state.snapshot_store,
        SCRAPE_TARGETS,
    )

    resp = await client.get("/scrape")

    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["message"] == "Successfully scraped 4 properties"
    assert [p["prices"] for p in data["data"]] == [["$1,200"]] * 4
    assert data["scraped_at"] is not None

    listed = await client.get("/properties")
    assert listed.json()["total_count"] == 4


async def test_scrape_failure_returns_500_and_keeps_snapshot(client):
    app.state.snapshot_store.publish(Snapshot(records=(_record("verve"),), last_scrape_at=NOW))
    orchestrator = AsyncMock(spec=ScrapeOrchestrator)
    orchestrator.perform_full_scrape.side_effect = OrchestrationError("browser crashed")
    app.state.orchestrator = orchestrator

    resp = await client.get("/scrape")

    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "browser crashed"}
    listed = await client.get("/properties")
    assert listed.json()["total_count"] == 1
