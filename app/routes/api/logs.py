"""Audit log routes for the HRMS API."""

from flask import current_app, request
from flask_restx import Namespace, Resource

from app.helpers.auth import CallerContext, org_required
from app.helpers.logs import list_log_entries
from app.helpers.responses import api_response
from app.helpers.validation import parse_positive_int, sanitize_param
from app.schemas.types import MAX_ROW_ID

logs_ns = Namespace("logs", description="Audit log")


@logs_ns.route("")
class LogList(Resource):
    """Audit log of the caller's organisation."""

    @logs_ns.doc(
        security="Bearer Auth",
        params={
            "page": "Page number, starting at 1",
            "limit": "Entries per page",
            "action": "Only return entries with this action tag",
        },
    )
    @logs_ns.response(200, "Success")
    @logs_ns.response(400, "Invalid page or limit")
    @logs_ns.response(401, "Missing or invalid token")
    @org_required
    def get(self, caller: CallerContext):
        """List audit log entries, newest first."""
        limit = parse_positive_int(
            request.args.get("limit"),
            "limit",
            default=current_app.config["LOGS_PAGE_SIZE"],
            maximum=current_app.config["LOGS_MAX_PAGE_SIZE"],
        )
        # Keeps the page offset within a SQL INTEGER
        page = parse_positive_int(
            request.args.get("page"), "page", default=1, maximum=MAX_ROW_ID // limit
        )
        action = sanitize_param(request.args.get("action")) or None
        return api_response(
            list_log_entries(caller.organisation_id, page=page, limit=limit, action=action)
        )
