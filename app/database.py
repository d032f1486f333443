"""Database handle shared by models and helpers."""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
