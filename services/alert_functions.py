from models import db, UserPreference, WeatherAlert


class AlertNotFound(Exception):
    pass


def _owned_alerts(user_id):
    return WeatherAlert.query.join(UserPreference, WeatherAlert.user_preference_id == UserPreference.id) \
        .filter(UserPreference.user_id == user_id)


def list_alerts(user_id, limit=10, unread_only=False):
    query = _owned_alerts(user_id)
    if unread_only:
        query = query.filter(WeatherAlert.is_read.is_(False))
    return query.order_by(WeatherAlert.created_at.desc(), WeatherAlert.id.desc()).limit(limit).all()


def count_unread_alerts(user_id):
    return _owned_alerts(user_id).filter(WeatherAlert.is_read.is_(False)).count()


def mark_alert_read(user_id, alert_id):
    alert = _owned_alerts(user_id).filter(WeatherAlert.id == alert_id).first()
    if alert is None:
        raise AlertNotFound(f"Alert {alert_id} not found.")
    alert.is_read = True
    db.session.commit()
    return alert


def mark_all_alerts_read(user_id):
    alerts = _owned_alerts(user_id).filter(WeatherAlert.is_read.is_(False)).all()
    for alert in alerts:
        alert.is_read = True
    db.session.commit()
    return len(alerts)
