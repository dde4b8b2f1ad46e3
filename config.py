import os

class Config:
    DEBUG = os.getenv('FLASK_DEBUG', '0') == '1'
    TESTING = False
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'change-me-weather-alerts')
    OPENWEATHER_API_KEY = os.getenv('OPENWEATHER_API_KEY', '')
    OPENWEATHER_URL = os.getenv('OPENWEATHER_URL', 'https://api.openweathermap.org/data/2.5/weather')
    WEATHER_API_TIMEOUT = float(os.getenv('WEATHER_API_TIMEOUT', '10'))
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///weather_alerts.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # flask-restful would otherwise turn JWT errors into 500s.
    PROPAGATE_EXCEPTIONS = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    ALERTS_PAGE_SIZE = 10
    ALERTS_MAX_PAGE_SIZE = 100


class TestConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = 'test-secret-key-with-enough-length-for-hs256'
    OPENWEATHER_API_KEY = 'test-key'
    OPENWEATHER_URL = 'https://weather.test/data/2.5/weather'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
