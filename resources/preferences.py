# resources/preferences.py
from flask import request
from flask_restful import Resource
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError
from schemas.preferences_schema import preferences_schema
from services.preference_functions import (
    get_user_preference,
    create_user_preference,
    update_user_preference,
    delete_user_preference,
    PreferenceNotFound,
    PreferenceExists
)

class UserPreferences(Resource):
    @jwt_required()
    def get(self):
        user_id = get_jwt_identity()
        try:
            preference = get_user_preference(user_id)
        except PreferenceNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        return {"status": "success", "data": preference.to_dict()}, 200

    @jwt_required()
    def post(self):
        user_id = get_jwt_identity()
        try:
            data = preferences_schema.load(request.get_json(silent=True) or {})
        except ValidationError as err:
            return {"status": "error", "message": "Invalid preferences.", "errors": err.messages}, 400
        try:
            preference = create_user_preference(user_id, data)
        except PreferenceExists as e:
            return {"status": "error", "message": str(e)}, 400
        return {"status": "success", "data": preference.to_dict()}, 201

    @jwt_required()
    def put(self):
        user_id = get_jwt_identity()
        try:
            data = preferences_schema.load(request.get_json(silent=True) or {}, partial=True)
        except ValidationError as err:
            return {"status": "error", "message": "Invalid preferences.", "errors": err.messages}, 400
        try:
            preference = update_user_preference(user_id, data)
        except PreferenceNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        return {"status": "success", "data": preference.to_dict()}, 200

    @jwt_required()
    def delete(self):
        user_id = get_jwt_identity()
        try:
            message = delete_user_preference(user_id)
        except PreferenceNotFound as e:
            return {"status": "error", "message": str(e)}, 404
        return {"status": "success", "message": message}, 200
