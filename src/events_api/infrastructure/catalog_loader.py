from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from events_api.domain.errors import CatalogLoadError
from events_api.domain.models import TIMESTAMP_FORMAT, Event, Rating, Spot, SpotStatus

TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


class EventRecord(BaseModel):
    id: StrictInt
    name: str
    organization: str
    location: str
    image_url: str = ""
    price: Decimal = Field(ge=0)
    rating: Rating
    date: datetime
    created_at: datetime

    @field_validator("date", "created_at", mode="before")
    @classmethod
    def parse_timestamp(cls, value: Any) -> datetime:
        # strptime alone accepts single-digit fields
        if not isinstance(value, str) or not TIMESTAMP_PATTERN.fullmatch(value):
            raise ValueError(f"expected text in {TIMESTAMP_FORMAT} format")
        return datetime.strptime(value, TIMESTAMP_FORMAT)

    def to_domain(self) -> Event:
        return Event(
            id=self.id,
            name=self.name,
            organization=self.organization,
            location=self.location,
            image_url=self.image_url,
            price=self.price,
            rating=self.rating,
            date=self.date,
            created_at=self.created_at,
        )


class SpotRecord(BaseModel):
    id: StrictInt
    name: str
    status: SpotStatus = SpotStatus.AVAILABLE
    event_id: StrictInt

    def to_domain(self) -> Spot:
        return Spot(id=self.id, name=self.name, status=self.status, event_id=self.event_id)


class CatalogPayload(BaseModel):
    events: list[EventRecord] = []
    spots: list[SpotRecord] = []


def parse_catalog(payload: Union[Mapping[str, Any], str, bytes]) -> tuple[list[Event], list[Spot]]:
    """Validate a raw catalog payload and convert it to domain models.

    Accepts either an already-decoded mapping or raw JSON text.
    """
    try:
        if isinstance(payload, (str, bytes)):
            catalog = CatalogPayload.model_validate_json(payload)
        else:
            catalog = CatalogPayload.model_validate(payload)
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid catalog payload: {e}") from e

    events = [record.to_domain() for record in catalog.events]
    spots = [record.to_domain() for record in catalog.spots]
    _check_integrity(events, spots)
    return events, spots


def _check_integrity(events: list[Event], spots: list[Spot]) -> None:
    event_ids: set[int] = set()
    for event in events:
        if event.id in event_ids:
            raise CatalogLoadError(f"Duplicate event id {event.id}")
        event_ids.add(event.id)

    spot_ids: set[int] = set()
    spot_keys: set[tuple[int, str]] = set()
    for spot in spots:
        if spot.id in spot_ids:
            raise CatalogLoadError(f"Duplicate spot id {spot.id}")
        if spot.event_id not in event_ids:
            raise CatalogLoadError(f"Spot {spot.id} references unknown event {spot.event_id}")
        key = (spot.event_id, spot.name)
        if key in spot_keys:
            raise CatalogLoadError(f"Duplicate spot name {spot.name} for event {spot.event_id}")
        spot_ids.add(spot.id)
        spot_keys.add(key)


def read_catalog_file(path: Union[str, Path]) -> bytes:
    """Read the raw catalog JSON from disk."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {e}") from e
