#!/usr/bin/env python3
"""Main application file for the Flask app."""

import os
import sys

from app.database import db
from app.factory import create_app
from app.helpers.database import perform_health_checks

app = create_app()


def run_health_checks():
    """Create missing tables and run the health checks."""
    with app.app_context():
        db.create_all()
        errors = perform_health_checks()
        if errors:
            sys.exit(f"Startup checks failed: {errors}")


if __name__ == "__main__":
    run_health_checks()
    app.run(host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", 5000)))
