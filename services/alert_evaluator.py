"""Threshold evaluation for a single weather reading.

``evaluate_alerts`` compares one observation against one preference's four
thresholds and returns the alerts that reading triggers. It performs no I/O
and keeps no state; persisting its output is the caller's job.

Every rule is checked independently and the output keeps the order of
``ALERT_RULES``. Readings are taken literally: a NaN fails every comparison
and produces no alert, and inverted high/low thresholds may fire both
temperature rules.
"""
import math
from collections import namedtuple
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP

SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"
SEVERITY_EXTREME = "extreme"
SEVERITIES = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH, SEVERITY_EXTREME)

ALERT_HIGH_TEMP = "HIGH_TEMP"
ALERT_LOW_TEMP = "LOW_TEMP"
ALERT_STRONG_WIND = "STRONG_WIND"
ALERT_HIGH_HUMIDITY = "HIGH_HUMIDITY"
ALERT_FEELS_LIKE_DIFF = "FEELS_LIKE_DIFF"

EXTREME_HEAT_MARGIN = 5
EXTREME_COLD_MARGIN = 5
EXTREME_WIND_MARGIN = 10
SEVERE_HUMIDITY_MARGIN = 10
FEELS_LIKE_MAX_DIFF = 5


class AlertDescriptor(namedtuple("AlertDescriptor", ["type", "severity", "title", "message"])):
    __slots__ = ()

    def to_dict(self):
        return dict(self._asdict())


# matches(w, t) -> bool, severity(w, t) -> str, message(w, t) -> str
AlertRule = namedtuple("AlertRule", ["type", "title", "matches", "severity", "message"])


def _plain_number(value):
    """Renders 35.0 as '35' and 35.5 as '35.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _fixed(value, places):
    """Rounds halves away from zero on the exact binary value: 40.25 -> '40.3', 94.5 -> '95'."""
    if not math.isfinite(value) or abs(value) >= 1e21:
        return f"{value:.{places}f}"
    return str(Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))


ALERT_RULES = (
    AlertRule(
        type=ALERT_HIGH_TEMP,
        title="High Temperature Alert",
        matches=lambda w, t: w["temperature"] >= t["temp_threshold_high"],
        severity=lambda w, t: (SEVERITY_EXTREME
                               if w["temperature"] >= t["temp_threshold_high"] + EXTREME_HEAT_MARGIN
                               else SEVERITY_HIGH),
        message=lambda w, t: (
            f"Temperature has reached {_fixed(w['temperature'], 1)}°C, which exceeds your threshold of "
            f"{_plain_number(t['temp_threshold_high'])}°C. Stay hydrated and avoid prolonged sun exposure."),
    ),
    AlertRule(
        type=ALERT_LOW_TEMP,
        title="Low Temperature Alert",
        matches=lambda w, t: w["temperature"] <= t["temp_threshold_low"],
        severity=lambda w, t: (SEVERITY_EXTREME
                               if w["temperature"] <= t["temp_threshold_low"] - EXTREME_COLD_MARGIN
                               else SEVERITY_HIGH),
        message=lambda w, t: (
            f"Temperature has dropped to {_fixed(w['temperature'], 1)}°C, which is below your threshold of "
            f"{_plain_number(t['temp_threshold_low'])}°C. Dress warmly and protect against cold exposure."),
    ),
    AlertRule(
        type=ALERT_STRONG_WIND,
        title="Strong Wind Alert",
        matches=lambda w, t: w["wind_speed"] >= t["wind_speed_threshold"],
        severity=lambda w, t: (SEVERITY_EXTREME
                               if w["wind_speed"] >= t["wind_speed_threshold"] + EXTREME_WIND_MARGIN
                               else SEVERITY_HIGH),
        message=lambda w, t: (
            f"Wind speed has reached {_fixed(w['wind_speed'], 1)} m/s, exceeding your threshold of "
            f"{_plain_number(t['wind_speed_threshold'])} m/s. Secure loose objects and avoid outdoor activities."),
    ),
    AlertRule(
        type=ALERT_HIGH_HUMIDITY,
        title="High Humidity Alert",
        matches=lambda w, t: w["humidity"] >= t["humidity_threshold"],
        severity=lambda w, t: (SEVERITY_HIGH
                               if w["humidity"] >= t["humidity_threshold"] + SEVERE_HUMIDITY_MARGIN
                               else SEVERITY_MEDIUM),
        message=lambda w, t: (
            f"Humidity level has reached {_fixed(w['humidity'], 0)}%, exceeding your threshold of "
            f"{_plain_number(t['humidity_threshold'])}%. Expect discomfort and potential health impacts."),
    ),
    AlertRule(
        type=ALERT_FEELS_LIKE_DIFF,
        title="Temperature Perception Alert",
        matches=lambda w, t: abs(w["temperature"] - w["feels_like"]) > FEELS_LIKE_MAX_DIFF,
        severity=lambda w, t: SEVERITY_MEDIUM,
        message=lambda w, t: (
            f"Actual temperature is {_fixed(w['temperature'], 1)}°C but feels like {_fixed(w['feels_like'], 1)}°C. "
            f"Adjust your clothing accordingly."),
    ),
)

OBSERVATION_FIELDS = ("temperature", "feels_like", "humidity", "wind_speed")
THRESHOLD_FIELDS = ("temp_threshold_high", "temp_threshold_low", "wind_speed_threshold", "humidity_threshold")


def _pick(source, fields):
    if isinstance(source, Mapping):
        return {name: source[name] for name in fields}
    return {name: getattr(source, name) for name in fields}


def evaluate_alerts(observation, thresholds, rules=ALERT_RULES):
    """
    Returns the list of AlertDescriptor triggered by ``observation``.

    ``observation`` and ``thresholds`` may be mappings or objects exposing the
    fields named in OBSERVATION_FIELDS and THRESHOLD_FIELDS (a WeatherData
    row and a UserPreference row both qualify).
    """
    weather = _pick(observation, OBSERVATION_FIELDS)
    limits = _pick(thresholds, THRESHOLD_FIELDS)

    alerts = []
    for rule in rules:
        if rule.matches(weather, limits):
            alerts.append(AlertDescriptor(
                type=rule.type,
                severity=rule.severity(weather, limits),
                title=rule.title,
                message=rule.message(weather, limits),
            ))
    return alerts
