# schemas/preferences_schema.py
from marshmallow import Schema, fields, validate, EXCLUDE
from models import (DEFAULT_TEMP_THRESHOLD_HIGH, DEFAULT_TEMP_THRESHOLD_LOW, DEFAULT_WIND_SPEED_THRESHOLD,
                    DEFAULT_HUMIDITY_THRESHOLD)

class PreferencesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    location_name = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    latitude = fields.Float(allow_none=True, validate=validate.Range(min=-90, max=90))
    longitude = fields.Float(allow_none=True, validate=validate.Range(min=-180, max=180))
    # Thresholds are stored as given; a low above the high is accepted.
    temp_threshold_high = fields.Float(load_default=DEFAULT_TEMP_THRESHOLD_HIGH)
    temp_threshold_low = fields.Float(load_default=DEFAULT_TEMP_THRESHOLD_LOW)
    wind_speed_threshold = fields.Float(load_default=DEFAULT_WIND_SPEED_THRESHOLD)
    humidity_threshold = fields.Float(load_default=DEFAULT_HUMIDITY_THRESHOLD)
    alerts_enabled = fields.Bool(load_default=True)

preferences_schema = PreferencesSchema()
