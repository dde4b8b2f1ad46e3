"""Shared fixtures: an app on in-memory SQLite, a test client and a logged-in user."""

import pytest

from app import create_app
from config import TestConfig
from models import db

WEATHER_URL = TestConfig.OPENWEATHER_URL


def make_openweather_payload(temp=20.0, feels_like=20.0, humidity=50, wind_speed=2.0, name="Lisbon"):
    """Build a body shaped like OpenWeatherMap's /data/2.5/weather response."""
    return {
        "name": name,
        "main": {
            "temp": temp,
            "feels_like": feels_like,
            "humidity": humidity,
            "pressure": 1013,
        },
        "wind": {"speed": wind_speed, "deg": 270},
        "weather": [{"main": "Clear", "icon": "01d"}],
    }


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username="alice", password="s3cret"):
    client.post("/register", json={"username": username, "password": password})
    response = client.post("/login", json={"username": username, "password": password})
    return {"Authorization": f"Bearer {response.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    return login(client)


@pytest.fixture
def preference(client, auth_headers):
    response = client.post(
        "/weather/preferences",
        json={"location_name": "Lisbon, PT", "latitude": 38.72, "longitude": -9.14},
        headers=auth_headers,
    )
    return response.get_json()["data"]
