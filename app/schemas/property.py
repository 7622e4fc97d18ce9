from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_IMAGES = 5
MAX_PRICES = 3
MAX_AMENITIES = 8
MAX_LISTINGS = 10

PRICE_PLACEHOLDER = "Contact for pricing"


class ScrapeTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    url: str
    address: str
    phone: str


class PageExtract(BaseModel):
    images: list[str] = []
    prices: list[str] = []
    amenities: list[str] = []


class RawListing(BaseModel):
    address: str
    price: str
    image: str | None = None
    details: str = ""


class PropertyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    phone: str
    images: tuple[str, ...] = Field(default=(), max_length=MAX_IMAGES)
    prices: tuple[str, ...] = Field(default=(), max_length=MAX_PRICES)
    amenities: tuple[str, ...] = Field(default=(), max_length=MAX_AMENITIES)
    coordinates: tuple[float, float] | None = None
    walking_time: str | None = None
    bedrooms: str | None = None
    source: str
    scraped_at: datetime
    error: str | None = None  # set only on degraded records

    @model_validator(mode="after")
    def _degraded_shape(self) -> "PropertyRecord":
        if self.error is not None and (self.images or self.prices != (PRICE_PLACEHOLDER,)):
            raise ValueError("degraded record must have no images and a placeholder price")
        return self


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    records: tuple[PropertyRecord, ...] = ()
    last_scrape_at: datetime | None = None
