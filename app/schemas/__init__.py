"""Schemas package initialization."""

from .organisation import OrganisationSchema
from .user import UserSchema
from .auth import LoginRequest, RegisterRequest
from .employee import (
    EmployeeCreateRequest,
    EmployeeSchema,
    EmployeeTeamSchema,
    EmployeeUpdateRequest,
)
from .team import (
    MembershipRequest,
    TeamCreateRequest,
    TeamMemberSchema,
    TeamSchema,
    TeamUpdateRequest,
)
from .log_entry import LogEntrySchema, LogUserSchema

__all__ = [
    "OrganisationSchema",
    "UserSchema",
    "LoginRequest",
    "RegisterRequest",
    "EmployeeCreateRequest",
    "EmployeeSchema",
    "EmployeeTeamSchema",
    "EmployeeUpdateRequest",
    "MembershipRequest",
    "TeamCreateRequest",
    "TeamMemberSchema",
    "TeamSchema",
    "TeamUpdateRequest",
    "LogEntrySchema",
    "LogUserSchema",
]
