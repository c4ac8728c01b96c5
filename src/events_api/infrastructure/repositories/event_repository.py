from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Union

from events_api.domain.errors import EventNotFoundError, SpotAlreadyReservedError, SpotNotFoundError
from events_api.domain.models import Event, Spot
from events_api.domain.repository import EventRepository
from events_api.infrastructure.catalog_loader import parse_catalog, read_catalog_file

logger = logging.getLogger(__name__)


class InMemoryEventRepository(EventRepository):
    """Event catalog held in process memory.

    Spots are immutable snapshots; a reservation swaps the stored snapshot
    for a reserved copy while holding the lock, so every check-and-set on a
    spot status is atomic.
    """

    def __init__(self, events: Iterable[Event], spots: Iterable[Spot]) -> None:
        self._lock = threading.Lock()
        self._events: dict[int, Event] = {event.id: event for event in events}
        self._spots: dict[tuple[int, str], Spot] = {(spot.event_id, spot.name): spot for spot in spots}

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> InMemoryEventRepository:
        events, spots = parse_catalog(payload)
        return cls(events, spots)

    def list_events(self) -> list[Event]:
        with self._lock:
            return list(self._events.values())

    def find_event_by_id(self, event_id: int) -> Event:
        with self._lock:
            event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def find_spots_by_event_id(self, event_id: int) -> list[Spot]:
        with self._lock:
            return [spot for spot in self._spots.values() if spot.event_id == event_id]

    def reserve_spot(self, event_id: int, spot_name: str) -> Spot:
        with self._lock:
            spot = self._available_spot(event_id, spot_name)
            reserved = spot.reserve()
            self._spots[(event_id, spot_name)] = reserved
        return reserved

    def reserve_spots(self, event_id: int, spot_names: Sequence[str]) -> list[Spot]:
        with self._lock:
            seen: set[str] = set()
            for name in spot_names:
                self._available_spot(event_id, name)
                if name in seen:
                    raise SpotAlreadyReservedError(event_id, name)
                seen.add(name)

            reserved = []
            for name in spot_names:
                spot = self._spots[(event_id, name)].reserve()
                self._spots[(event_id, name)] = spot
                reserved.append(spot)
        return reserved

    def _available_spot(self, event_id: int, spot_name: str) -> Spot:
        # caller holds self._lock
        spot = self._spots.get((event_id, spot_name))
        if spot is None:
            raise SpotNotFoundError(event_id, spot_name)
        if spot.is_reserved:
            raise SpotAlreadyReservedError(event_id, spot_name)
        return spot


def load_repository(path: Union[str, Path]) -> InMemoryEventRepository:
    """Build the store from a catalog JSON file."""
    events, spots = parse_catalog(read_catalog_file(path))
    logger.info("Loaded catalog from %s: %d events, %d spots", path, len(events), len(spots))
    return InMemoryEventRepository(events, spots)
