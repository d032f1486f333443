"""User model."""

from datetime import datetime

from . import db


class User(db.Model):
    """Model for a user that can sign in to an organisation."""

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    organisation_id = db.Column(db.Integer, db.ForeignKey("organisations.id"), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    organisation = db.relationship("Organisation", back_populates="users", lazy="joined")

    def __repr__(self):
        """Return a string representation of the user."""
        return f"<User {self.email}>"
