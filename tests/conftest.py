"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from events_api.api.dependencies import get_repository
from events_api.infrastructure.repositories.event_repository import InMemoryEventRepository
from events_api.main import app


def make_event(event_id: int, **overrides) -> dict:
    record = {
        "id": event_id,
        "name": f"Event {event_id}",
        "organization": "Full Cycle",
        "date": "2024-12-20T14:00:00",
        "price": 150.0,
        "rating": "L12",
        "image_url": "https://example.com/event.png",
        "created_at": "2024-11-01T10:00:00",
        "location": "São Paulo",
    }
    record.update(overrides)
    return record


def make_spot(spot_id: int, name: str, event_id: int, status: str = "available") -> dict:
    return {"id": spot_id, "name": name, "status": status, "event_id": event_id}


@pytest.fixture
def payload() -> dict:
    """Event 1 with spots A1, A2 and a reserved A3; event 2 without spots."""
    return {
        "events": [make_event(1), make_event(2, rating="L", price=0)],
        "spots": [
            make_spot(1, "A1", 1),
            make_spot(2, "A2", 1),
            make_spot(3, "A3", 1, status="reserved"),
        ],
    }


@pytest.fixture
def repository(payload: dict) -> InMemoryEventRepository:
    return InMemoryEventRepository.from_payload(payload)


@pytest.fixture
def api_client(repository: InMemoryEventRepository) -> Iterator[TestClient]:
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()
