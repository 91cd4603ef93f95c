"""
Tests for the HTTP endpoints.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from venue_status.api import create_app
from venue_status.schemas import AppConfig, VenueConfig
from venue_status.service import VenueStatusService
from venue_status.util.clock import FrozenClock


@pytest.fixture
def client():
    config = AppConfig(venues=[
        VenueConfig(name="restaurant", hours="12:00 - 00:15"),
        VenueConfig(name="cafe", hours="09:00 - 18:00"),
    ])
    svc = VenueStatusService(config=config, clock=FrozenClock(datetime(2025, 9, 1, 17, 45)))
    return TestClient(create_app(svc))


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["venues_configured"] == 2


def test_list_venues(client):
    resp = client.get("/venues")

    assert resp.status_code == 200
    assert resp.json() == [
        {"name": "restaurant", "hours": "12:00 - 00:15"},
        {"name": "cafe", "hours": "09:00 - 18:00"},
    ]


def test_venue_status(client):
    resp = client.get("/venues/cafe/status")

    assert resp.status_code == 200
    body = resp.json()
    assert body["venue"] == "cafe"
    assert body["is_open"] is True
    assert body["status"] == "closing_soon"
    assert body["time_until_close"] == "15 min"
    assert body["color"] == "yellow"
    assert body["next_open_time"] is None


def test_overnight_venue_status(client):
    body = client.get("/venues/restaurant/status").json()

    assert body["status"] == "open"
    assert body["time_until_close"] == "6h30"
    assert body["message"] == "Ouvert jusqu'à 00:15"


def test_unknown_venue_is_404(client):
    assert client.get("/venues/nowhere/status").status_code == 404


def test_adhoc_status(client):
    resp = client.get("/status", params={"hours": "18:00 - 23:00"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["venue"] is None
    assert body["status"] == "closed"
    assert body["message"] == "Fermé - Ouvre à 18:00"
    assert body["color"] == "red"
    assert body["icon"] == "🔴"


@pytest.mark.parametrize("hours", ["all day", "25:00 - 18:00"])
def test_adhoc_status_rejects_bad_hours(client, hours):
    assert client.get("/status", params={"hours": hours}).status_code == 422
