from __future__ import annotations

from fastapi import APIRouter, Depends

from events_api.api.dependencies import get_event_service, get_reservation_service
from events_api.api.schemas import (
    ErrorResponse,
    EventDetailResponse,
    EventResponse,
    ReserveSpotsRequest,
    ReserveSpotsResponse,
    SpotResponse,
)
from events_api.domain.models import TIMESTAMP_FORMAT, Event
from events_api.services.event_service import EventService, SpotView
from events_api.services.reservation_service import ReservationService

router = APIRouter(tags=["events"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def _event_to_response(event: Event) -> EventResponse:
    return EventResponse(
        id=event.id,
        name=event.name,
        organization=event.organization,
        price=event.price,
        rating=event.rating.value,
        image_url=event.image_url,
        location=event.location,
        date=event.date.strftime(TIMESTAMP_FORMAT),
        created_at=event.created_at.strftime(TIMESTAMP_FORMAT),
    )


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/events", response_model=list[EventResponse])
def list_events(service: EventService = Depends(get_event_service)) -> list[EventResponse]:
    return [_event_to_response(e) for e in service.list_events()]


@router.get("/events/{event_id}", response_model=EventDetailResponse, responses=NOT_FOUND)
def get_event(event_id: int, service: EventService = Depends(get_event_service)) -> EventDetailResponse:
    return EventDetailResponse.model_validate(service.get_event(event_id))


@router.get("/events/{event_id}/spots", response_model=list[SpotResponse])
def list_spots(event_id: int, service: EventService = Depends(get_event_service)) -> list[SpotResponse]:
    return [SpotResponse.model_validate(s) for s in service.list_spots(event_id)]


@router.post(
    "/events/{event_id}/reserve",
    response_model=ReserveSpotsResponse,
    responses={**NOT_FOUND, 409: {"model": ErrorResponse}},
)
def reserve_spots(
    event_id: int,
    body: ReserveSpotsRequest,
    service: ReservationService = Depends(get_reservation_service),
) -> ReserveSpotsResponse:
    result = service.reserve_spots(event_id, body.spots)
    return ReserveSpotsResponse(
        event_id=result.event_id,
        spots=[SpotResponse.model_validate(SpotView.from_spot(s)) for s in result.spots],
    )
