import pytest
from flask.testing import FlaskClient
from sqlalchemy import func, select

from app.database import db
from app.factory import create_app
from app.models import LogEntry, employee_teams


class BufferedClient(FlaskClient):
    """Reads each response to the end and closes it, as a WSGI server does."""

    def open(self, *args, buffered=True, **kwargs):
        return super().open(*args, buffered=buffered, **kwargs)


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("FLASK_ENV", "testing")
    app = create_app()
    app.test_client_class = BufferedClient

    with app.app_context():
        db.create_all()

    # No app context is held while tests run, so each request gets a fresh one
    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    def _register(organisation, admin, email, password="secret1"):
        response = client.post(
            "/api/auth/register",
            json={
                "organisationName": organisation,
                "adminName": admin,
                "email": email,
                "password": password,
            },
        )
        assert response.status_code == 201, response.get_json()
        data = response.get_json()["data"]
        data["headers"] = bearer(data["token"])
        return data

    return _register


@pytest.fixture
def acme(register):
    return register("Acme", "Ann", "ann@acme.com")


@pytest.fixture
def globex(register):
    return register("Globex", "Hank", "hank@globex.com")


@pytest.fixture
def create_employee(client):
    def _create(headers, first_name="Jo", last_name="Doe", email="jo@acme.com", **extra):
        response = client.post(
            "/api/employees",
            json={"first_name": first_name, "last_name": last_name, "email": email, **extra},
            headers=headers,
        )
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]

    return _create


@pytest.fixture
def create_team(client):
    def _create(headers, name="Platform", **extra):
        response = client.post("/api/teams", json={"name": name, **extra}, headers=headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()["data"]

    return _create


@pytest.fixture
def count_logs(app):
    def _count(organisation_id, action=None):
        with app.app_context():
            query = select(func.count(LogEntry.id)).where(
                LogEntry.organisation_id == organisation_id
            )
            if action is not None:
                query = query.where(LogEntry.action == action)
            return db.session.execute(query).scalar_one()

    return _count


@pytest.fixture
def count_memberships(app):
    def _count(employee_id=None, team_id=None):
        with app.app_context():
            query = select(func.count()).select_from(employee_teams)
            if employee_id is not None:
                query = query.where(employee_teams.c.employee_id == employee_id)
            if team_id is not None:
                query = query.where(employee_teams.c.team_id == team_id)
            return db.session.execute(query).scalar_one()

    return _count
