"""Read-only event catalog operations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from events_api.domain.models import DISPLAY_FORMAT, Event, Spot
from events_api.domain.repository import EventRepository


@dataclass(frozen=True)
class EventDetail:
    id: int
    name: str
    location: str
    organization: str
    rating: str
    date: str
    price: Decimal


@dataclass(frozen=True)
class SpotView:
    id: int
    name: str
    event_id: int
    reserved: bool
    status: str

    @classmethod
    def from_spot(cls, spot: Spot) -> SpotView:
        return cls(
            id=spot.id,
            name=spot.name,
            event_id=spot.event_id,
            reserved=spot.is_reserved,
            status=spot.status.value,
        )


class EventService:
    def __init__(self, repository: EventRepository) -> None:
        self._repository = repository

    def list_events(self) -> list[Event]:
        return self._repository.list_events()

    def get_event(self, event_id: int) -> EventDetail:
        """Return an event reshaped for display.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._repository.find_event_by_id(event_id)
        return EventDetail(
            id=event.id,
            name=event.name,
            location=event.location,
            organization=event.organization,
            rating=event.rating.value,
            date=event.date.strftime(DISPLAY_FORMAT),
            price=event.price,
        )

    def list_spots(self, event_id: int) -> list[SpotView]:
        return [SpotView.from_spot(spot) for spot in self._repository.find_spots_by_event_id(event_id)]
