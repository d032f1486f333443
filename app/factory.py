"""Flask application factory."""

import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_restx import Api, fields
from werkzeug.exceptions import HTTPException

from app.database import db
from app.helpers.audit import mark_request_start, record_request
from app.helpers.database import perform_health_checks
from app.helpers.responses import api_response, error_response
from app.routes.api.auth import auth_ns
from app.routes.api.employees import employees_ns
from app.routes.api.logs import logs_ns
from app.routes.api.teams import teams_ns
from config import config as config_by_name
from hrms.errors import HRMSError
from hrms.logging import configure_logging


def create_app(config=None):
    """Create Flask application.

    Parameters
    ----------
    config : Optional[dict]
        Settings applied on top of the configuration class picked by ``FLASK_ENV``.
    """
    app = Flask(__name__)

    # Load configuration
    config_class = config_by_name.get(os.environ.get("FLASK_ENV") or "default")
    app.config.from_object(config_class or config_by_name["default"])
    if config is not None:
        app.config.update(config)
    (config_class or config_by_name["default"]).init_app(app)

    configure_logging(app)

    # Initialize extensions
    CORS(app)
    db.init_app(app)
    JWTManager(app)

    # Register CLI commands
    from app.cli import init_db_command

    app.cli.add_command(init_db_command)

    # Request pipeline: the authorization gate runs per resource, the audit recorder
    # runs once the response is final
    app.before_request(mark_request_start)
    app.after_request(record_request)

    # Security headers
    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses."""
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    @app.route("/api/health")
    def health():
        """Serve the health check route."""
        data = {"timestamp": datetime.now(timezone.utc).isoformat()}
        errors = perform_health_checks()
        if errors:
            return jsonify(error_response("Database unavailable", 500)[0]), 500
        body, status = api_response(data, message="API working")
        return jsonify(body), status

    # Initialize API
    authorizations = {
        "Bearer Auth": {
            "type": "apiKey",
            "in": "header",
            "name": "Authorization",
            "description": "Add a token with ** Bearer &lt;token&gt; ** to authorize",
        },
    }

    api = Api(
        app,
        version="1.0",
        title="HRMS API",
        description="""
        Organisations, employees, teams and the audit log.

        ## Authentication
        Register or log in to get a token, then send it on every other call as
        `Authorization: Bearer <token>`. Tokens expire after 24 hours.

        ## Responses
        Every response is `{success, message?, data?}`:
        - 400: validation error or duplicate email
        - 401: missing, invalid or expired token
        - 404: not found, including rows of other organisations
        - 500: server error
        """,
        doc="/api/docs",
        authorizations=authorizations,
        prefix="/api",
        ordered=True,
        default_mediatype="application/json",
    )

    envelope = api.model(
        "Envelope",
        {
            "success": fields.Boolean(description="Whether the request succeeded"),
            "message": fields.String(description="Response message"),
            "data": fields.Raw(description="Response payload"),
        },
    )
    api.response(400, "Validation Error", envelope)
    api.response(401, "Unauthorized", envelope)
    api.response(404, "Not Found", envelope)
    api.response(500, "Server Error", envelope)

    # Add namespaces
    api.add_namespace(auth_ns, path="/auth")
    api.add_namespace(employees_ns, path="/employees")
    api.add_namespace(teams_ns, path="/teams")
    api.add_namespace(logs_ns, path="/logs")

    # API error handlers, registered most specific first
    @api.errorhandler(HRMSError)
    def handle_hrms_error(error):
        """Map an HRMS error onto its status code."""
        db.session.rollback()
        if error.status_code >= 500:
            logging.error("Request failed - %s", error)
        else:
            logging.info("Request rejected - %s", error)
        return error.to_dict(), int(error.status_code)

    @api.errorhandler(Exception)
    def handle_unexpected_error(error):
        """Hide unexpected errors behind a generic 500."""
        db.session.rollback()
        if isinstance(error, HTTPException):
            return error_response(error.description or error.name, error.code)
        logging.exception("Unhandled error - %s", error)
        return error_response("Internal server error", 500)

    # Error handlers outside the API
    @app.errorhandler(404)
    def not_found(error):
        """Handle not found error."""
        logging.info("Resource not found - %s", error)
        return jsonify(error_response("Resource not found", 404)[0]), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle method not allowed error."""
        return jsonify(error_response("Method not allowed", 405)[0]), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle internal server error."""
        logging.error("Internal server error - %s", error)
        return jsonify(error_response("Internal server error", 500)[0]), 500

    return app
