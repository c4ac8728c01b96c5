"""HTTP tests for the events API."""

import json

import pytest
from fastapi.testclient import TestClient

from events_api.config import settings
from events_api.domain.errors import CatalogLoadError
from events_api.main import app
from events_api.services.reservation_service import ReservationMode


class TestHealth:
    def test_health(self, api_client: TestClient):
        response = api_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestEventList:
    """Tests for GET /events"""

    def test_list_events(self, api_client: TestClient):
        response = api_client.get("/events")

        assert response.status_code == 200
        body = response.json()
        assert [e["id"] for e in body] == [1, 2]
        assert body[0] == {
            "id": 1,
            "name": "Event 1",
            "organization": "Full Cycle",
            "price": 150.0,
            "rating": "L12",
            "image_url": "https://example.com/event.png",
            "location": "São Paulo",
            "date": "2024-12-20T14:00:00",
            "created_at": "2024-11-01T10:00:00",
        }


class TestEventDetail:
    """Tests for GET /events/{id}"""

    def test_get_event(self, api_client: TestClient):
        response = api_client.get("/events/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "Event 1",
            "location": "São Paulo",
            "organization": "Full Cycle",
            "rating": "L12",
            "date": "2024-12-20 14:00:00",
            "price": 150.0,
        }

    def test_get_event_not_found(self, api_client: TestClient):
        response = api_client.get("/events/999")

        assert response.status_code == 404
        assert response.json() == {"detail": "Event not found", "code": "EVENT_NOT_FOUND"}

    def test_get_event_invalid_id(self, api_client: TestClient):
        assert api_client.get("/events/abc").status_code == 400


class TestSpotList:
    """Tests for GET /events/{id}/spots"""

    def test_list_spots(self, api_client: TestClient):
        response = api_client.get("/events/1/spots")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "name": "A1", "event_id": 1, "reserved": False, "status": "available"},
            {"id": 2, "name": "A2", "event_id": 1, "reserved": False, "status": "available"},
            {"id": 3, "name": "A3", "event_id": 1, "reserved": True, "status": "reserved"},
        ]

    def test_list_spots_empty(self, api_client: TestClient):
        response = api_client.get("/events/2/spots")
        assert response.status_code == 200
        assert response.json() == []


class TestReserveSpots:
    """Tests for POST /events/{id}/reserve"""

    def test_reserve(self, api_client: TestClient):
        response = api_client.post("/events/1/reserve", json={"spots": ["A1", "A2"]})

        assert response.status_code == 200
        body = response.json()
        assert body["event_id"] == 1
        assert [(s["name"], s["reserved"], s["status"]) for s in body["spots"]] == [
            ("A1", True, "reserved"),
            ("A2", True, "reserved"),
        ]
        spots = api_client.get("/events/1/spots").json()
        assert [s["reserved"] for s in spots] == [True, True, True]

    def test_reserve_twice_conflicts(self, api_client: TestClient):
        api_client.post("/events/1/reserve", json={"spots": ["A1"]})

        response = api_client.post("/events/1/reserve", json={"spots": ["A1"]})

        assert response.status_code == 409
        assert response.json()["code"] == "SPOT_ALREADY_RESERVED"

    def test_reserve_unknown_spot(self, api_client: TestClient):
        response = api_client.post("/events/1/reserve", json={"spots": ["A1", "Z9"]})

        assert response.status_code == 404
        assert response.json()["code"] == "SPOT_NOT_FOUND"
        spots = {s["name"]: s["reserved"] for s in api_client.get("/events/1/spots").json()}
        assert spots["A1"] is True

    def test_reserve_unknown_event(self, api_client: TestClient):
        response = api_client.post("/events/999/reserve", json={"spots": ["A1"]})

        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_reserve_atomic_mode(self, api_client: TestClient, monkeypatch):
        monkeypatch.setattr(settings, "reservation_mode", ReservationMode.ATOMIC)

        response = api_client.post("/events/1/reserve", json={"spots": ["A1", "Z9"]})

        assert response.status_code == 404
        spots = {s["name"]: s["reserved"] for s in api_client.get("/events/1/spots").json()}
        assert spots["A1"] is False

    @pytest.mark.parametrize("body", [{}, {"spots": "A1"}, {"spots": [1, 2]}])
    def test_reserve_invalid_body(self, api_client: TestClient, body):
        assert api_client.post("/events/1/reserve", json=body).status_code == 400


class TestLifespan:
    def test_startup_loads_catalog_file(self, tmp_path, payload, monkeypatch):
        path = tmp_path / "data.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        monkeypatch.setattr(settings, "data_file", str(path))

        with TestClient(app) as client:
            response = client.get("/events")

        assert [e["id"] for e in response.json()] == [1, 2]

    def test_startup_fails_on_bad_catalog(self, tmp_path, monkeypatch):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"events": [{"id": 1}]}), encoding="utf-8")
        monkeypatch.setattr(settings, "data_file", str(path))

        with pytest.raises(CatalogLoadError):
            with TestClient(app):
                pass
