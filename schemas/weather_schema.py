# schemas/weather_schema.py
from marshmallow import Schema, fields, pre_load, EXCLUDE

COORDINATE_ERRORS = {"required": "Missing latitude or longitude", "null": "Missing latitude or longitude"}

class FetchWeatherSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    preference_id = fields.Int(allow_none=True, load_default=None)
    lat = fields.Float(required=True, error_messages=COORDINATE_ERRORS)
    lon = fields.Float(required=True, error_messages=COORDINATE_ERRORS)

    @pre_load
    def accept_camel_case_id(self, data, **kwargs):
        if isinstance(data, dict) and "preferenceId" in data and "preference_id" not in data:
            data = dict(data)
            data["preference_id"] = data.pop("preferenceId")
        return data

fetch_weather_schema = FetchWeatherSchema()
