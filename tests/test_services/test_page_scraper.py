"""Tests for PageScraperService."""

import pytest

from app.exceptions.custom import TargetScrapeError
from app.services.page_scraper import PageScraperService, degraded_record
from fakes import FakeLauncher, html_page

UA = "Mozilla/5.0 (test)"


@pytest.fixture
def scraper(launcher):
    return PageScraperService(launcher, UA)


async def test_scrape_success(scraper, launcher, target):
    launcher.pages[target.url] = html_page(
        '<img src="/img/exterior.jpg"><p>Rates from $1,099</p><p>Pool &amp; gym</p>'
    )

    record = await scraper.scrape(target)

    assert record.name == "Verve New Brunswick"
    assert record.address == target.address
    assert record.phone == target.phone
    assert record.source == "verve"
    assert record.images == ("https://vervenb.com/img/exterior.jpg",)
    assert record.prices == ("$1,099",)
    assert record.amenities == ("Gym", "Pool")
    assert record.error is None
    assert record.coordinates is None  # enrichment happens in the orchestrator


async def test_user_agent_is_set(scraper, launcher, target):
    launcher.pages[target.url] = html_page("<p>hi</p>")
    await scraper.scrape(target)
    assert launcher.sessions[0].visited == [(target.url, UA)]


async def test_session_closed_on_success(scraper, launcher, target):
    launcher.pages[target.url] = html_page("<p>hi</p>")
    await scraper.scrape(target)
    assert len(launcher.sessions) == 1
    assert launcher.sessions[0].closed


async def test_navigation_failure_yields_degraded_record(scraper, launcher, target):
    launcher.pages[target.url] = ConnectionError("net::ERR_NAME_NOT_RESOLVED")

    record = await scraper.scrape(target)

    assert record.name == target.name
    assert record.address == target.address
    assert record.phone == target.phone
    assert record.images == ()
    assert record.prices == ("Contact for pricing",)
    assert record.amenities == ()
    assert record.error == "net::ERR_NAME_NOT_RESOLVED"
    assert record.source == "verve"


async def test_session_closed_on_failure(scraper, launcher, target):
    await scraper.scrape(target)  # unknown URL -> timeout
    assert launcher.sessions[0].closed


async def test_launch_failure_is_degraded(target):
    class BrokenLauncher:
        async def launch(self):
            raise RuntimeError("Executable doesn't exist")

    record = await PageScraperService(BrokenLauncher(), UA).scrape(target)
    assert record.error == "Executable doesn't exist"


async def test_empty_exception_message_uses_type_name(scraper, launcher, target):
    launcher.pages[target.url] = TimeoutError()
    record = await scraper.scrape(target)
    assert record.error == "TimeoutError"


async def test_failure_is_logged_with_target_name(scraper, target, caplog):
    with caplog.at_level("ERROR"):
        await scraper.scrape(target)
    assert "Error scraping Verve New Brunswick" in caplog.text


async def test_do_scrape_raises_typed_error(scraper, target):
    with pytest.raises(TargetScrapeError) as exc_info:
        await scraper._do_scrape(target)
    assert exc_info.value.source == "verve"


async def test_caps_respected_on_busy_page(target):
    body = "".join(f'<img src="/apartment-{i}.jpg"><p>${1000 + i}</p>' for i in range(20))
    launcher = FakeLauncher({target.url: html_page(body)})
    record = await PageScraperService(launcher, UA).scrape(target)
    assert len(record.images) == 5
    assert len(record.prices) == 3


def test_degraded_record_shape(target):
    record = degraded_record(target, "boom")
    assert record.images == ()
    assert record.prices == ("Contact for pricing",)
    assert record.error == "boom"
