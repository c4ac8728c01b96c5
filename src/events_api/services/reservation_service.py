from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from events_api.domain.errors import DomainError
from events_api.domain.models import Spot
from events_api.domain.repository import EventRepository

logger = logging.getLogger(__name__)


class ReservationMode(str, Enum):
    # stop at the first failure, earlier spots in the request stay reserved
    SEQUENTIAL = "sequential"
    # validate the whole request first, reserve nothing on failure
    ATOMIC = "atomic"


@dataclass(frozen=True)
class ReservationResult:
    event_id: int
    spots: list[Spot] = field(default_factory=list)


class ReservationService:
    """Reserve a batch of named spots for one event."""

    def __init__(self, repository: EventRepository, mode: ReservationMode = ReservationMode.SEQUENTIAL) -> None:
        self._repository = repository
        self._mode = mode

    def reserve_spots(self, event_id: int, spot_names: Sequence[str]) -> ReservationResult:
        """Reserve every spot in ``spot_names`` for the event, in order.

        Raises:
            EventNotFoundError: If the event does not exist. No spot is touched.
            SpotNotFoundError: If a name does not match a spot of the event.
            SpotAlreadyReservedError: If a spot is reserved already, including
                a name repeated within the same request.
        """
        try:
            self._repository.find_event_by_id(event_id)
            if self._mode is ReservationMode.ATOMIC:
                spots = self._repository.reserve_spots(event_id, spot_names)
            else:
                spots = self._reserve_sequentially(event_id, spot_names)
        except DomainError as e:
            logger.warning("Reservation for event %s rejected: %s", event_id, e)
            raise

        logger.info("Reserved %d spot(s) for event %s: %s", len(spots), event_id, [s.name for s in spots])
        return ReservationResult(event_id=event_id, spots=spots)

    def _reserve_sequentially(self, event_id: int, spot_names: Sequence[str]) -> list[Spot]:
        spots: list[Spot] = []
        for name in spot_names:
            try:
                spots.append(self._repository.reserve_spot(event_id, name))
            except DomainError:
                if spots:
                    logger.warning(
                        "Partial reservation for event %s: spots %s stay reserved",
                        event_id,
                        [s.name for s in spots],
                    )
                raise
        return spots
