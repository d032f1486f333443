"""Configuration for the Flask app."""

import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class."""

    FLASK_ENV = os.environ.get("FLASK_ENV")

    # Secret key for signing cookies
    SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me"

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get("SQLALCHEMY_DATABASE_URI", "sqlite:///hrms.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Flask-JWT-Extended settings
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY") or "super-secret"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", 24)))
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"

    # Password hashing
    BCRYPT_LOG_ROUNDS = int(os.environ.get("BCRYPT_LOG_ROUNDS", 12))

    # Flask-RESTX settings, errors carry our own envelope
    RESTX_ERROR_404_HELP = False
    RESTX_MASK_SWAGGER = False

    # Application settings
    APP_NAME = "HRMS"
    LOGS_PAGE_SIZE = int(os.environ.get("LOGS_PAGE_SIZE", 50))
    LOGS_MAX_PAGE_SIZE = int(os.environ.get("LOGS_MAX_PAGE_SIZE", 100))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def init_app(cls, app):
        """Initialize the configuration for the Flask app."""
        pass


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-secret-with-at-least-32-bytes"
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):
    """Production configuration."""

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL") or Config.SQLALCHEMY_DATABASE_URI

    @classmethod
    def init_app(cls, app):
        """Initialize the configuration for the Flask app."""
        Config.init_app(app)

        if Config.SECRET_KEY == "change-me" or Config.JWT_SECRET_KEY == "super-secret":
            app.logger.warning("Running production with default secrets")


# Dictionary to easily access different configurations
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
