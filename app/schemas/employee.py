"""Employee schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr

from .types import NonEmptyStr, OptionalStr, RowId


class EmployeeTeamSchema(BaseModel):
    """Schema for a team as listed on an employee."""

    id: int
    name: str

    class Config:
        """Config for the employee team schema."""

        from_attributes = True


class EmployeeSchema(BaseModel):
    """Schema for an employee."""

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str | None
    position: str | None
    organisation_id: int
    created_at: datetime
    updated_at: datetime
    teams: list[EmployeeTeamSchema] = []

    class Config:
        """Config for the employee schema."""

        from_attributes = True


class EmployeeCreateRequest(BaseModel):
    """Payload to create an employee."""

    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: EmailStr
    phone: OptionalStr = None
    position: OptionalStr = None
    team_ids: list[RowId] | None = None


class EmployeeUpdateRequest(BaseModel):
    """Payload to update an employee.

    Omitted fields are left untouched; required fields may not be sent as null or empty.
    """

    first_name: NonEmptyStr = None
    last_name: NonEmptyStr = None
    email: EmailStr = None
    phone: OptionalStr = None
    position: OptionalStr = None
    team_ids: list[RowId] | None = None
