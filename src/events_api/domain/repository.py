"""Repository interface for the events catalog.

Services depend on this interface only, so any store returning domain
models can be swapped in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from events_api.domain.models import Event, Spot


class EventRepository(ABC):
    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def find_event_by_id(self, event_id: int) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If no event has that ID.
        """
        ...

    @abstractmethod
    def find_spots_by_event_id(self, event_id: int) -> list[Spot]:
        """Return the spots of an event in insertion order, possibly empty."""
        ...

    @abstractmethod
    def reserve_spot(self, event_id: int, spot_name: str) -> Spot:
        """Mark one spot as reserved and return the updated spot.

        Raises:
            SpotNotFoundError: If the event has no spot with that name.
            SpotAlreadyReservedError: If the spot is already reserved.
        """
        ...

    def reserve_spots(self, event_id: int, spot_names: Sequence[str]) -> list[Spot]:
        """Reserve every named spot or none of them.

        Raises the first error found, in input order, without touching any spot.
        Only stores that can commit a batch atomically override this.
        """
        raise NotImplementedError(f"{type(self).__name__} does not support batch reservation")
