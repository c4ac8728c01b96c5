from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EventResponse(BaseModel):
    id: int
    name: str
    organization: str
    price: float
    rating: str
    image_url: str
    location: str
    date: str
    created_at: str


class EventDetailResponse(BaseModel):
    id: int
    name: str
    location: str
    organization: str
    rating: str
    date: str
    price: float

    model_config = ConfigDict(from_attributes=True)


class SpotResponse(BaseModel):
    id: int
    name: str
    event_id: int
    reserved: bool
    status: str

    model_config = ConfigDict(from_attributes=True)


class ReserveSpotsRequest(BaseModel):
    spots: list[str]


class ReserveSpotsResponse(BaseModel):
    event_id: int
    spots: list[SpotResponse]


class ErrorResponse(BaseModel):
    detail: str
    code: str
