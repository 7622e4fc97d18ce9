import time

from fastapi import APIRouter, HTTPException

from app.dependencies import OrchestratorDep, SnapshotStoreDep, StartedAtDep
from app.schemas.property import PropertyRecord
from app.schemas.responses import HealthResponse, PropertiesResponse, ScrapeResponse

router = APIRouter()


@router.get("/properties", response_model=PropertiesResponse)
async def list_properties(store: SnapshotStoreDep) -> PropertiesResponse:
    snapshot = store.current
    return PropertiesResponse(
        properties=list(snapshot.records),
        last_scrape_time=snapshot.last_scrape_at,
        total_count=len(snapshot.records),
    )


# OrchestrationError is turned into a 500 by the app's exception handler
@router.get("/scrape", response_model=ScrapeResponse)
async def trigger_scrape(orchestrator: OrchestratorDep) -> ScrapeResponse:
    snapshot = await orchestrator.perform_full_scrape()
    return ScrapeResponse(
        success=True,
        message=f"Successfully scraped {len(snapshot.records)} properties",
        data=list(snapshot.records),
        scraped_at=snapshot.last_scrape_at,
    )


@router.get("/property/{source_id}", response_model=PropertyRecord)
async def get_property(source_id: str, store: SnapshotStoreDep) -> PropertyRecord:
    record = store.find_by_source(source_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Property not found")
    return record


@router.get("/health", response_model=HealthResponse)
async def health(store: SnapshotStoreDep, started_at: StartedAtDep) -> HealthResponse:
    snapshot = store.current
    return HealthResponse(
        status="healthy",
        last_scrape=snapshot.last_scrape_at,
        properties_count=len(snapshot.records),
        uptime_seconds=round(time.monotonic() - started_at, 3),
    )
