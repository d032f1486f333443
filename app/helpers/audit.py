"""Audit log recording.

Mutating requests made by an authenticated caller are recorded once the response is
known, and written once the response has been sent. Recording is best effort: a failed
write is logged and dropped, the client's response is never changed or delayed by it.
"""

import json
import logging
import re
import time

from flask import after_this_request, current_app, g, has_request_context, request

from app.database import db
from app.models.log_entry import LogEntry

AUDITED_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# <int:team_id> -> team_id
ROUTE_VARIABLE = re.compile(r"<(?:[^:<>]+:)?([^<>]+)>")


def client_ip() -> str | None:
    """Return the client's IP, preferring the first ``X-Forwarded-For`` hop."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.remote_addr


def write_log_entry(
    action: str,
    details: dict,
    organisation_id: int,
    user_id: int,
    ip_address: str | None = None,
    user_agent: str | None = None,
) -> bool:
    """Persist a log entry in its own commit.

    Parameters
    ----------
    action : str
        Stable tag of the operation, e.g. ``"POST /api/employees"``
    details : dict
        Request data, stored as JSON text
    organisation_id : int
        Organisation the entry is scoped to
    user_id : int
        User who performed the action

    Returns
    -------
    bool
        True if the entry was written, False if the write failed and was dropped.
    """
    if ip_address is None and has_request_context():
        ip_address = client_ip()
    if user_agent is None and has_request_context():
        user_agent = request.headers.get("User-Agent")

    try:
        entry = LogEntry(
            action=action,
            details=json.dumps(details, default=str),
            organisation_id=organisation_id,
            user_id=user_id,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        db.session.add(entry)
        db.session.commit()
        return True
    except Exception:
        db.session.rollback()
        logging.exception(f"Failed to record audit entry {action}")
        return False


def action_tag() -> str:
    """Return ``"<METHOD> <route>"`` for the current request.

    Route variables are written as ``:name``, e.g. ``"POST /api/teams/:team_id/assign"``.
    """
    if request.url_rule is None:
        return f"{request.method} {request.path}"
    route = ROUTE_VARIABLE.sub(r":\1", request.url_rule.rule)
    return f"{request.method} {route}"


def mark_request_start():
    """Remember when the request started, for the audit duration."""
    g.request_started = time.monotonic()


def defer_log_entry(response, **entry):
    """Write a log entry after ``response`` has been sent.

    Request data (IP, user agent) is read now. The write itself runs from the
    response's close callback, inside a fresh app context, so it never holds up the
    client.
    """
    if has_request_context():
        entry.setdefault("ip_address", client_ip())
        entry.setdefault("user_agent", request.headers.get("User-Agent"))
    app = current_app._get_current_object()

    def write():
        try:
            with app.app_context():
                write_log_entry(**entry)
        except Exception:
            logging.exception(f"Failed to record audit entry {entry.get('action')}")

    response.call_on_close(write)
    return response


def log_after_response(**entry):
    """Record an explicit entry for the current request once its response is sent."""

    @after_this_request
    def schedule(response):
        return defer_log_entry(response, **entry)


def record_request(response):
    """Record the current request if it mutated data on behalf of a caller.

    Registered as an ``after_request`` hook, so the response status is final; the entry
    is built here and written once the response has been sent. Reads and requests the
    authorization gate rejected carry no caller and are skipped.
    """
    caller = g.get("caller")
    if request.method not in AUDITED_METHODS or caller is None:
        return response

    try:
        started = g.get("request_started")
        details = {
            "method": request.method,
            "url": request.full_path.rstrip("?"),
            "statusCode": response.status_code,
            "durationMs": round((time.monotonic() - started) * 1000, 2) if started else None,
            "body": request.get_json(silent=True),
            "params": dict(request.view_args or {}),
            "query": request.args.to_dict(),
        }
        defer_log_entry(
            response,
            action=action_tag(),
            details=details,
            organisation_id=caller.organisation_id,
            user_id=caller.user_id,
        )
    except Exception:
        # Reading the caller can hit the database; nothing here may fail the response
        db.session.rollback()
        logging.exception("Failed to build audit entry")

    return response
