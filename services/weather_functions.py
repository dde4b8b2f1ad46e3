import logging
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db, WeatherData, WeatherAlert
from services.alert_evaluator import evaluate_alerts
from services.preference_functions import get_user_preference
from services.weather_provider import OpenWeatherClient

logger = logging.getLogger(__name__)


def get_weather_client():
    # One client per request; requests.Session is not shared across threads.
    return OpenWeatherClient.from_config(current_app.config)


def save_alerts(preference, observation, descriptors):
    """
    Persists the evaluator output for one observation. A failed insert is
    rolled back and reported as no alerts; the observation is already
    committed at this point and stays.
    """
    rows = [
        WeatherAlert(
            user_preference_id=preference.id,
            weather_data_id=observation.id,
            alert_type=alert.type,
            severity=alert.severity,
            title=alert.title,
            message=alert.message,
        )
        for alert in descriptors
    ]
    if not rows:
        return []
    db.session.add_all(rows)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("Could not save %d alerts for observation %s", len(rows), observation.id)
        return []
    return rows


def fetch_weather(user_id, lat, lon, preference_id=None, client=None):
    """
    Fetches current weather for (lat, lon), stores it against the caller's
    preference and records any threshold alerts it triggers.

    Raises PreferenceNotFound when the preference is missing or not owned by
    ``user_id`` and WeatherProviderError when the upstream call fails; in
    both cases nothing is written.
    """
    preference = get_user_preference(user_id, preference_id)
    client = client or get_weather_client()

    current = client.get_current(lat, lon)

    observation = WeatherData(
        user_preference_id=preference.id,
        temperature=current.temperature,
        feels_like=current.feels_like,
        humidity=current.humidity,
        wind_speed=current.wind_speed,
        wind_direction=current.wind_direction,
        pressure=current.pressure,
        weather_condition=current.weather_condition,
        weather_icon=current.weather_icon,
    )
    db.session.add(observation)
    db.session.commit()

    alerts = []
    if preference.alerts_enabled:
        descriptors = evaluate_alerts(observation, preference)
        alerts = save_alerts(preference, observation, descriptors)
        if alerts:
            logger.info("Generated %d alerts for preference %s", len(alerts), preference.id)

    return {
        "weather": observation.to_dict(),
        "alerts": [alert.to_dict() for alert in alerts],
        "location": current.location,
    }
