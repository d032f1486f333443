"""Models package initialization."""

from app.database import db

# Import all models here
from .organisation import Organisation
from .user import User
from .employee import Employee
from .team import Team, employee_teams
from .log_entry import LogEntry

# List all models for easy access
__all__ = [
    "db",
    "Organisation",
    "User",
    "Employee",
    "Team",
    "employee_teams",
    "LogEntry",
]
