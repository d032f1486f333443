"""Audit log queries."""

import math

from sqlalchemy import select

from app.database import db
from app.models.log_entry import LogEntry
from app.schemas import LogEntrySchema


def list_log_entries(
    organisation_id: int, page: int = 1, limit: int = 50, action: str | None = None
) -> dict:
    """Get one page of the organisation's audit log, newest first.

    Parameters
    ----------
    organisation_id : int
        The organisation whose entries are listed
    page : int
        1-based page number
    limit : int
        Entries per page
    action : Optional[str]
        Only return entries with exactly this action tag

    Returns
    -------
    dict
        ``logs``, ``total``, ``page`` and ``totalPages``
    """
    query = select(LogEntry).where(LogEntry.organisation_id == organisation_id)
    if action:
        query = query.where(LogEntry.action == action)
    query = query.order_by(LogEntry.created_at.desc(), LogEntry.id.desc())

    pagination = db.paginate(query, page=page, per_page=limit, max_per_page=limit, error_out=False)
    return {
        "logs": [
            LogEntrySchema.model_validate(entry).model_dump(mode="json")
            for entry in pagination.items
        ],
        "total": pagination.total,
        "page": page,
        "totalPages": math.ceil(pagination.total / limit) if pagination.total else 0,
    }
