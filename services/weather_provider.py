import logging
from collections import namedtuple

import requests

logger = logging.getLogger(__name__)

CurrentWeather = namedtuple("CurrentWeather", [
    "temperature", "feels_like", "humidity", "wind_speed", "wind_direction",
    "pressure", "weather_condition", "weather_icon", "location",
])


class WeatherProviderError(Exception):
    """Raised when the upstream weather API cannot produce a usable reading."""


class OpenWeatherClient:
    """Client for the OpenWeatherMap current weather endpoint."""

    def __init__(self, api_key, base_url="https://api.openweathermap.org/data/2.5/weather", timeout=10,
                 session=None):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config["OPENWEATHER_API_KEY"],
            base_url=config["OPENWEATHER_URL"],
            timeout=config["WEATHER_API_TIMEOUT"],
        )

    def get_current(self, lat, lon):
        params = {"lat": lat, "lon": lon, "appid": self.api_key, "units": "metric"}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.HTTPError as http_err:
            logger.warning("Weather API returned %s for lat=%s lon=%s", http_err.response.status_code, lat, lon)
            raise WeatherProviderError(f"Weather API error: {http_err.response.reason}") from http_err
        except requests.exceptions.RequestException as e:
            logger.warning("Weather API request failed for lat=%s lon=%s: %s", lat, lon, e)
            raise WeatherProviderError(f"Weather API error: {e}") from e
        except ValueError as e:
            raise WeatherProviderError("Weather API returned a non-JSON body.") from e

        return self._parse(data)

    @staticmethod
    def _parse(data):
        try:
            main = data["main"]
            wind = data["wind"]
            condition = data["weather"][0]
            return CurrentWeather(
                temperature=float(main["temp"]),
                feels_like=float(main["feels_like"]),
                humidity=float(main["humidity"]),
                wind_speed=float(wind["speed"]),
                wind_direction=float(wind["deg"]) if wind.get("deg") is not None else None,
                pressure=float(main["pressure"]),
                weather_condition=condition.get("main"),
                weather_icon=condition.get("icon"),
                location=data.get("name"),
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise WeatherProviderError(f"Unexpected weather API payload: {e!r}") from e
