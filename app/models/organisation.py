"""Organisation model."""

from datetime import datetime

from . import db


class Organisation(db.Model):
    """Model for an organisation, the tenant boundary for every other row."""

    __tablename__ = "organisations"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    users = db.relationship("User", back_populates="organisation", lazy=True)

    def __repr__(self):
        """Return a string representation of the organisation."""
        return f"<Organisation {self.name}>"
