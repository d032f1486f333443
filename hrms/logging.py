"""Centralized logging configuration for the HRMS API.

Usage:
    from hrms.logging import configure_logging
    configure_logging(app)
"""

import logging
import os
import sys
from logging.config import dictConfig


def get_log_level() -> str:
    """Get the log level name from the environment.

    Returns
    -------
    str
        The logging level name to use (defaults to INFO if not set or invalid)
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(level_name), int):
        return "INFO"
    return level_name


def configure_logging(app=None, log_level=None) -> dict:
    """Configure logging for the application.

    Parameters
    ----------
    app : Flask
        The Flask application instance.
    log_level : str
        The log level to use.
    """
    if app:
        log_level = log_level or app.config.get("LOG_LEVEL") or get_log_level()
    else:
        log_level = log_level or get_log_level()
    log_level = log_level.upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": (
                    "%(levelname)-8s %(asctime)s %(name)s [%(filename)s:%(lineno)d] - %(message)s"
                ),
                "datefmt": "%H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "standard",
                "stream": sys.stdout,
            },
        },
        "loggers": {
            "": {  # Root logger
                "handlers": ["console"],
                "level": log_level,
                "propagate": True,
            },
            "werkzeug": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }

    dictConfig(logging_config)

    logging.info(f"Logging configured with level: {log_level}")

    return logging_config
