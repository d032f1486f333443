"""Employee model."""

from datetime import datetime

from . import db


class Employee(db.Model):
    """Model for an employee record owned by an organisation."""

    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(255), nullable=False)
    last_name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    phone = db.Column(db.String(64), nullable=True)
    position = db.Column(db.String(255), nullable=True)
    organisation_id = db.Column(
        db.Integer, db.ForeignKey("organisations.id"), nullable=False, index=True
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships, read-only: membership is written through the employee_teams table
    teams = db.relationship(
        "Team",
        secondary="employee_teams",
        back_populates="employees",
        order_by="Team.id",
        viewonly=True,
    )

    def __repr__(self):
        """Return a string representation of the employee."""
        return f"<Employee {self.email}>"
