import random
import time

import httpx
import pytest
from httpx import ASGITransport

from app.schemas.property import ScrapeTarget
from fakes import FakeLauncher


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def target():
    return ScrapeTarget(
        key="verve",
        name="Verve New Brunswick",
        url="https://vervenb.com",
        address="88 Easton Avenue, New Brunswick, NJ 08901",
        phone="(862) 244-1479",
    )


@pytest.fixture
async def client():
    from app.main import app
    from app.snapshot import SnapshotStore

    # Lifespan is not run (no browser, no scheduler): tests wire app.state
    app.state.snapshot_store = SnapshotStore()
    app.state.orchestrator = None
    app.state.started_at = time.monotonic()
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
