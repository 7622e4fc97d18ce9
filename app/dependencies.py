from typing import Annotated

from fastapi import Depends, Request

from app.services.orchestrator import ScrapeOrchestrator
from app.snapshot import SnapshotStore


def get_snapshot_store(request: Request) -> SnapshotStore:
    return request.app.state.snapshot_store


def get_orchestrator(request: Request) -> ScrapeOrchestrator:
    return request.app.state.orchestrator


def get_started_at(request: Request) -> float:
    return request.app.state.started_at


SnapshotStoreDep = Annotated[SnapshotStore, Depends(get_snapshot_store)]
OrchestratorDep = Annotated[ScrapeOrchestrator, Depends(get_orchestrator)]
StartedAtDep = Annotated[float, Depends(get_started_at)]
