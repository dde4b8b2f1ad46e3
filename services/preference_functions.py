import logging
from models import db, UserPreference, WeatherData, utcnow

logger = logging.getLogger(__name__)


class PreferenceNotFound(Exception):
    pass


class PreferenceExists(Exception):
    pass


def find_user_preference(user_id, preference_id=None):
    """Returns the caller's preference, or None when it does not exist or belongs to someone else."""
    query = UserPreference.query.filter_by(user_id=user_id)
    if preference_id is not None:
        query = query.filter_by(id=preference_id)
    return query.first()


def get_user_preference(user_id, preference_id=None):
    preference = find_user_preference(user_id, preference_id)
    if preference is None:
        raise PreferenceNotFound("No preferences found. Please set up your location first.")
    return preference


def create_user_preference(user_id, data):
    if find_user_preference(user_id) is not None:
        raise PreferenceExists(f"Preferences for user {user_id} already exist.")
    preference = UserPreference(user_id=user_id, **data)
    db.session.add(preference)
    db.session.commit()
    logger.info("Created preferences for user %s at %s", user_id, preference.location_name)
    return preference


def update_user_preference(user_id, data):
    preference = get_user_preference(user_id)
    for key, value in data.items():
        setattr(preference, key, value)
    preference.updated_at = utcnow()
    db.session.commit()
    return preference


def delete_user_preference(user_id):
    preference = get_user_preference(user_id)
    db.session.delete(preference)
    db.session.commit()
    logger.info("Deleted preferences for user %s", user_id)
    return f"Preferences for user {user_id} deleted."


def get_latest_weather(user_id):
    preference = get_user_preference(user_id)
    return WeatherData.query.filter_by(user_preference_id=preference.id) \
        .order_by(WeatherData.fetched_at.desc(), WeatherData.id.desc()) \
        .first()
