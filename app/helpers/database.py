"""Database related helper functions."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.database import db


def check_database() -> tuple[bool, str]:
    """Check if the database is up and running.

    Returns
    -------
    tuple
        A tuple with a boolean indicating success and a string with the message.
    """
    try:
        db.session.execute(text("SELECT 1"))
        return True, "Database is up and running."
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.exception("Database check failed")
        return False, str(e)


def perform_health_checks() -> list[str]:
    """Perform health checks on the application.

    Returns
    -------
    list
        A list of errors, if any.
    """
    checks = [check_database]
    errors = []
    for check in checks:
        logging.debug(f"Running check: {check.__name__}")
        success, message = check()
        if not success:
            logging.error(f"Health check failed ({check.__name__}): {message}")
            errors.append(message)
        else:
            logging.debug(f"Health check passed ({check.__name__}): {message}")
    return errors
