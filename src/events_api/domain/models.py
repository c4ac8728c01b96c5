from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


class Rating(str, Enum):
    """Age restriction for an event."""

    UNRESTRICTED = "L"
    AGE_10 = "L10"
    AGE_12 = "L12"
    AGE_14 = "L14"
    AGE_16 = "L16"
    AGE_18 = "L18"


class SpotStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"


@dataclass(frozen=True)
class Event:
    id: int
    name: str
    organization: str
    location: str
    image_url: str
    price: Decimal
    rating: Rating
    date: datetime
    created_at: datetime

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Event price cannot be negative")


@dataclass(frozen=True)
class Spot:
    id: int
    name: str
    status: SpotStatus
    event_id: int

    @property
    def is_reserved(self) -> bool:
        return self.status is SpotStatus.RESERVED

    def reserve(self) -> Spot:
        """Return a reserved copy of this spot."""
        return replace(self, status=SpotStatus.RESERVED)
