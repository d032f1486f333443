"""Team model and the employee/team membership table."""

from datetime import datetime

from . import db

# Composite primary key keeps each (employee, team) pair unique
employee_teams = db.Table(
    "employee_teams",
    db.Column(
        "employee_id",
        db.Integer,
        db.ForeignKey("employees.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "team_id",
        db.Integer,
        db.ForeignKey("teams.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column("created_at", db.DateTime, default=datetime.utcnow),
)


class Team(db.Model):
    """Model for a team owned by an organisation."""

    __tablename__ = "teams"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    organisation_id = db.Column(
        db.Integer, db.ForeignKey("organisations.id"), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    employees = db.relationship(
        "Employee",
        secondary=employee_teams,
        back_populates="teams",
        order_by="Employee.id",
        viewonly=True,
    )

    def __repr__(self):
        """Return a string representation of the team."""
        return f"<Team {self.name}>"
