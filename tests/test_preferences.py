"""Tests for the /weather/preferences resource."""

from conftest import WEATHER_URL, login, make_openweather_payload
from models import WeatherData, WeatherAlert


class TestCreatePreferences:

    def test_defaults_applied(self, client, auth_headers):
        response = client.post("/weather/preferences", json={"location_name": "Oslo, NO"}, headers=auth_headers)

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["user_id"] == "alice"
        assert data["temp_threshold_high"] == 35
        assert data["temp_threshold_low"] == 0
        assert data["wind_speed_threshold"] == 15
        assert data["humidity_threshold"] == 85
        assert data["alerts_enabled"] is True

    def test_location_name_required(self, client, auth_headers):
        response = client.post("/weather/preferences", json={"latitude": 10}, headers=auth_headers)

        assert response.status_code == 400
        assert "location_name" in response.get_json()["errors"]

    def test_latitude_out_of_range(self, client, auth_headers):
        response = client.post("/weather/preferences", json={"location_name": "X", "latitude": 91},
                               headers=auth_headers)

        assert response.status_code == 400
        assert "latitude" in response.get_json()["errors"]

    def test_inverted_thresholds_are_stored(self, client, auth_headers):
        response = client.post(
            "/weather/preferences",
            json={"location_name": "X", "temp_threshold_high": 5, "temp_threshold_low": 25},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.get_json()["data"]["temp_threshold_low"] == 25

    def test_second_preference_rejected(self, client, auth_headers, preference):
        response = client.post("/weather/preferences", json={"location_name": "Porto"}, headers=auth_headers)

        assert response.status_code == 400


class TestReadUpdateDelete:

    def test_get_own_preference(self, client, auth_headers, preference):
        response = client.get("/weather/preferences", headers=auth_headers)

        assert response.status_code == 200
        assert response.get_json()["data"]["location_name"] == "Lisbon, PT"

    def test_get_without_preference(self, client, auth_headers):
        assert client.get("/weather/preferences", headers=auth_headers).status_code == 404

    def test_other_user_cannot_see_preference(self, client, preference):
        bob = login(client, username="bob", password="pw")

        assert client.get("/weather/preferences", headers=bob).status_code == 404

    def test_partial_update_keeps_other_fields(self, client, auth_headers, preference):
        response = client.put("/weather/preferences", json={"humidity_threshold": 70}, headers=auth_headers)

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["humidity_threshold"] == 70
        assert data["location_name"] == "Lisbon, PT"
        assert data["temp_threshold_high"] == 35

    def test_update_validates(self, client, auth_headers, preference):
        response = client.put("/weather/preferences", json={"longitude": 200}, headers=auth_headers)

        assert response.status_code == 400

    def test_update_without_preference(self, client, auth_headers):
        response = client.put("/weather/preferences", json={"humidity_threshold": 70}, headers=auth_headers)

        assert response.status_code == 404

    def test_delete_cascades(self, app, client, auth_headers, preference, requests_mock):
        requests_mock.get(WEATHER_URL, json=make_openweather_payload(temp=45))
        client.post("/weather/fetch", json={"lat": 38.72, "lon": -9.14}, headers=auth_headers)

        response = client.delete("/weather/preferences", headers=auth_headers)

        assert response.status_code == 200
        with app.app_context():
            assert WeatherData.query.count() == 0
            assert WeatherAlert.query.count() == 0
        assert client.get("/weather/preferences", headers=auth_headers).status_code == 404
