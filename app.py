# app.py
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException
from flask_restful import Api
from flask_jwt_extended import JWTManager
from config import Config
from models import db  # Import SQLAlchemy object

from resources.weather import FetchWeather, LatestWeather
from resources.preferences import UserPreferences
from resources.alerts import WeatherAlerts, UnreadAlertCount, MarkAlertRead, MarkAllAlertsRead
from auth import UserRegistration, UserLogin, ProtectedResource


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    logging.basicConfig(level=app.config['LOG_LEVEL'],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    db.init_app(app)
    api = Api(app)
    JWTManager(app)

    with app.app_context():
        db.create_all()

    api.add_resource(UserRegistration, '/register')
    api.add_resource(UserLogin, '/login')
    api.add_resource(ProtectedResource, '/me')
    api.add_resource(UserPreferences, '/weather/preferences')
    api.add_resource(FetchWeather, '/weather/fetch')
    api.add_resource(LatestWeather, '/weather/latest')
    api.add_resource(WeatherAlerts, '/weather/alerts')
    api.add_resource(UnreadAlertCount, '/weather/alerts/unread-count')
    api.add_resource(MarkAllAlertsRead, '/weather/alerts/read-all')
    api.add_resource(MarkAlertRead, '/weather/alerts/<int:alert_id>/read')

    @app.after_request
    def add_cors_headers(response):
        response.headers['Access-Control-Allow-Origin'] = app.config['CORS_ORIGINS']
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, PUT, DELETE, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type, Authorization'
        return response

    # Global Error Handlers
    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({"status": "error", "message": "Bad Request"}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"status": "error", "message": "Resource Not Found"}), 404

    # PROPAGATE_EXCEPTIONS skips code-based 500 handlers, so match by class instead.
    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return error
        db.session.rollback()
        app.logger.error("Unhandled error: %s", error, exc_info=error)
        return jsonify({"status": "error", "message": "Internal Server Error"}), 500

    return app


if __name__ == '__main__':
    create_app().run(debug=Config.DEBUG)
