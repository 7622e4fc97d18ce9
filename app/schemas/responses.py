from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from app.schemas.property import PropertyRecord


class PropertiesResponse(BaseModel):
    properties: list[PropertyRecord]
    last_scrape_time: datetime | None = None
    total_count: int


class ScrapeResponse(BaseModel):
    success: bool
    message: str
    data: list[PropertyRecord]
    scraped_at: datetime | None = None


class HealthResponse(BaseModel):
    status: str
    last_scrape: datetime | None = None
    properties_count: int
    uptime_seconds: float
