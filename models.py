# models.py
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime, timezone
from werkzeug.security import generate_password_hash, check_password_hash

db = SQLAlchemy()

DEFAULT_TEMP_THRESHOLD_HIGH = 35.0
DEFAULT_TEMP_THRESHOLD_LOW = 0.0
DEFAULT_WIND_SPEED_THRESHOLD = 15.0
DEFAULT_HUMIDITY_THRESHOLD = 85.0


def utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)


class UserPreference(db.Model):
    __tablename__ = "user_preferences"
    id = db.Column(db.Integer, primary_key=True)
    # One monitored location per user; user_id holds the JWT identity (username).
    user_id = db.Column(db.String(100), unique=True, nullable=False, index=True)
    location_name = db.Column(db.String(255), nullable=False)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    temp_threshold_high = db.Column(db.Float, default=DEFAULT_TEMP_THRESHOLD_HIGH, nullable=False)
    temp_threshold_low = db.Column(db.Float, default=DEFAULT_TEMP_THRESHOLD_LOW, nullable=False)
    wind_speed_threshold = db.Column(db.Float, default=DEFAULT_WIND_SPEED_THRESHOLD, nullable=False)
    humidity_threshold = db.Column(db.Float, default=DEFAULT_HUMIDITY_THRESHOLD, nullable=False)
    alerts_enabled = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    observations = db.relationship("WeatherData", backref="preference", cascade="all, delete-orphan")
    alerts = db.relationship("WeatherAlert", backref="preference", cascade="all, delete-orphan")

    def thresholds(self):
        """Returns the four threshold values the alert evaluator consumes."""
        return {
            "temp_threshold_high": self.temp_threshold_high,
            "temp_threshold_low": self.temp_threshold_low,
            "wind_speed_threshold": self.wind_speed_threshold,
            "humidity_threshold": self.humidity_threshold,
        }

    def to_dict(self):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "location_name": self.location_name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "alerts_enabled": self.alerts_enabled,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }
        data.update(self.thresholds())
        return data

    def __repr__(self):
        return f"<UserPreference {self.user_id} location:{self.location_name}>"


class WeatherData(db.Model):
    __tablename__ = "weather_data"
    id = db.Column(db.Integer, primary_key=True)
    user_preference_id = db.Column(db.Integer, db.ForeignKey("user_preferences.id", ondelete="CASCADE"),
                                   nullable=False, index=True)
    temperature = db.Column(db.Float)
    feels_like = db.Column(db.Float)
    humidity = db.Column(db.Float)
    wind_speed = db.Column(db.Float)
    wind_direction = db.Column(db.Float)
    pressure = db.Column(db.Float)
    weather_condition = db.Column(db.String(100))
    weather_icon = db.Column(db.String(20))
    fetched_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    alerts = db.relationship("WeatherAlert", backref="observation")

    def to_dict(self):
        return {
            "id": self.id,
            "user_preference_id": self.user_preference_id,
            "temperature": self.temperature,
            "feels_like": self.feels_like,
            "humidity": self.humidity,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "pressure": self.pressure,
            "weather_condition": self.weather_condition,
            "weather_icon": self.weather_icon,
            "fetched_at": _isoformat(self.fetched_at),
            "created_at": _isoformat(self.created_at),
        }


class WeatherAlert(db.Model):
    __tablename__ = "weather_alerts"
    id = db.Column(db.Integer, primary_key=True)
    user_preference_id = db.Column(db.Integer, db.ForeignKey("user_preferences.id", ondelete="CASCADE"),
                                   nullable=False, index=True)
    alert_type = db.Column(db.String(50), nullable=False)
    severity = db.Column(db.String(10), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    # An alert outlives the observation that triggered it.
    weather_data_id = db.Column(db.Integer, db.ForeignKey("weather_data.id", ondelete="SET NULL"), nullable=True)
    is_read = db.Column(db.Boolean, default=False, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    __table_args__ = (db.CheckConstraint(
        "severity IN ('low', 'medium', 'high', 'extreme')", name="ck_weather_alerts_severity"),)

    def to_dict(self):
        return {
            "id": self.id,
            "user_preference_id": self.user_preference_id,
            "alert_type": self.alert_type,
            "severity": self.severity,
            "title": self.title,
            "message": self.message,
            "weather_data_id": self.weather_data_id,
            "is_read": self.is_read,
            "created_at": _isoformat(self.created_at),
        }
