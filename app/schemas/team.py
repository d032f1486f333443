"""Team schemas."""

from datetime import datetime

from pydantic import BaseModel

from .types import NonEmptyStr, RowId


class TeamMemberSchema(BaseModel):
    """Schema for an employee as listed on a team."""

    id: int
    first_name: str
    last_name: str
    email: str
    position: str | None

    class Config:
        """Config for the team member schema."""

        from_attributes = True


class TeamSchema(BaseModel):
    """Schema for a team."""

    id: int
    name: str
    description: str | None
    organisation_id: int
    created_at: datetime
    updated_at: datetime
    employees: list[TeamMemberSchema] = []

    class Config:
        """Config for the team schema."""

        from_attributes = True


class TeamCreateRequest(BaseModel):
    """Payload to create a team."""

    name: NonEmptyStr
    description: str | None = None
    employee_ids: list[RowId] | None = None


class TeamUpdateRequest(BaseModel):
    """Payload to update a team, omitted fields are left untouched."""

    name: NonEmptyStr = None
    description: str | None = None
    employee_ids: list[RowId] | None = None


class MembershipRequest(BaseModel):
    """Payload to add an employee to, or remove one from, a team."""

    employee_id: RowId
