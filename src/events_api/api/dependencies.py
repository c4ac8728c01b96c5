from fastapi import Depends, Request

from events_api.config import settings
from events_api.domain.repository import EventRepository
from events_api.services.event_service import EventService
from events_api.services.reservation_service import ReservationService


def get_repository(request: Request) -> EventRepository:
    """Return the store built by the application lifespan."""
    return request.app.state.repository


def get_event_service(repository: EventRepository = Depends(get_repository)) -> EventService:
    return EventService(repository)


def get_reservation_service(repository: EventRepository = Depends(get_repository)) -> ReservationService:
    return ReservationService(repository, mode=settings.reservation_mode)
