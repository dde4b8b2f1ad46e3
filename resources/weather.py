from flask import request
from flask_restful import Resource
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError
from schemas.weather_schema import fetch_weather_schema
from services.weather_functions import fetch_weather
from services.weather_provider import WeatherProviderError
from services.preference_functions import get_latest_weather, PreferenceNotFound

class FetchWeather(Resource):
    @jwt_required()
    def post(self):
        try:
            args = fetch_weather_schema.load(request.get_json(silent=True) or {})
        except ValidationError as err:
            return {"status": "error", "message": _first_error(err), "errors": err.messages}, 400

        user_id = get_jwt_identity()
        try:
            data = fetch_weather(user_id, args["lat"], args["lon"], preference_id=args["preference_id"])
        except PreferenceNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        except WeatherProviderError:
            return {"status": "error", "message": "Could not fetch weather data. Please try again later."}, 502
        return data, 200


class LatestWeather(Resource):
    @jwt_required()
    def get(self):
        user_id = get_jwt_identity()
        try:
            observation = get_latest_weather(user_id)
        except PreferenceNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        if observation is None:
            return {"status": "error", "message": "No weather data fetched yet."}, 404
        return {"status": "success", "data": observation.to_dict()}, 200


def _first_error(err):
    for messages in err.messages.values():
        if isinstance(messages, list) and messages:
            return messages[0]
    return "Invalid request."
