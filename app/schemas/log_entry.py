"""Audit log schemas."""

from datetime import datetime

from pydantic import BaseModel


class LogUserSchema(BaseModel):
    """Schema for the user who performed a logged action."""

    id: int
    name: str
    email: str

    class Config:
        """Config for the log user schema."""

        from_attributes = True


class LogEntrySchema(BaseModel):
    """Schema for an audit log entry."""

    id: int
    action: str
    details: str | None
    ip_address: str | None
    user_agent: str | None
    organisation_id: int
    user_id: int
    created_at: datetime
    user: LogUserSchema | None = None

    class Config:
        """Config for the log entry schema."""

        from_attributes = True
