"""Define the CLI commands for the app."""

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from app.database import db


@click.command("init-db")
@click.option("--drop", is_flag=True, help="Drop all tables before creating them.")
@with_appcontext
def init_db_command(drop):
    """Create the database tables."""
    try:
        if drop:
            db.drop_all()
            click.echo("Dropped database tables.")
        db.create_all()
    except SQLAlchemyError as e:
        raise click.ClickException(f"Error creating tables: {e}") from e

    click.echo("Initialized the database.")
