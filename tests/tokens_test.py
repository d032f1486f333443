from datetime import timedelta

import pytest
from flask_jwt_extended import create_access_token

from app.helpers.tokens import TokenClaims, issue_token, verify_token
from hrms.errors import InvalidTokenError


def test_issue_then_verify_returns_identity(app):
    with app.app_context():
        token = issue_token(7, 3)
        assert verify_token(token) == TokenClaims(user_id=7, organisation_id=3)


def test_tampered_signature_is_rejected(app):
    with app.app_context():
        token = issue_token(7, 3)
        header, payload, signature = token.split(".")
        forged = ".".join([header, payload, signature[::-1]])

        with pytest.raises(InvalidTokenError):
            verify_token(forged)


def test_token_signed_with_other_secret_is_rejected(app):
    with app.app_context():
        app.config["JWT_SECRET_KEY"] = "another-secret-with-at-least-32-bytes"
        token = issue_token(7, 3)
        app.config["JWT_SECRET_KEY"] = "testing-secret-with-at-least-32-bytes"

        with pytest.raises(InvalidTokenError):
            verify_token(token)


def test_expired_token_is_rejected(app):
    app.config["JWT_ACCESS_TOKEN_EXPIRES"] = timedelta(seconds=-30)
    with app.app_context():
        token = issue_token(7, 3)

        with pytest.raises(InvalidTokenError):
            verify_token(token)


@pytest.mark.parametrize("token", ["not-a-token", "a.b.c", ""])
def test_malformed_token_is_rejected(app, token):
    with app.app_context():
        with pytest.raises(InvalidTokenError):
            verify_token(token)


def test_token_without_organisation_claim_is_rejected(app):
    with app.app_context():
        token = create_access_token(identity="7")

        with pytest.raises(InvalidTokenError):
            verify_token(token)


def test_expiry_window_defaults_to_a_day(app):
    assert app.config["JWT_ACCESS_TOKEN_EXPIRES"] == timedelta(hours=24)
