"""Identity token codec.

Tokens are JWTs signed with ``JWT_SECRET_KEY``. The subject is the user id and the
``org_id`` claim carries the organisation id. Expiry comes from
``JWT_ACCESS_TOKEN_EXPIRES``; there are no refresh tokens.
"""

import logging

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from pydantic import BaseModel

from hrms.errors import InvalidTokenError

ORGANISATION_CLAIM = "org_id"


class TokenClaims(BaseModel):
    """The identity carried by a verified token."""

    user_id: int
    organisation_id: int


def issue_token(user_id: int, organisation_id: int) -> str:
    """Issue a signed, time-limited token for a user of an organisation."""
    return create_access_token(
        identity=str(user_id), additional_claims={ORGANISATION_CLAIM: organisation_id}
    )


def verify_token(token: str) -> TokenClaims:
    """Verify a token and return the identity it carries.

    Raises
    ------
    InvalidTokenError
        If the signature does not match, the payload is malformed or the token expired.
    """
    try:
        payload = decode_token(token)
    except (PyJWTError, JWTExtendedException) as e:
        logging.warning(f"Token verification failed - {e}")
        raise InvalidTokenError() from e

    try:
        return TokenClaims(
            user_id=int(payload["sub"]), organisation_id=int(payload[ORGANISATION_CLAIM])
        )
    except (KeyError, TypeError, ValueError) as e:
        logging.warning("Token payload is missing identity claims")
        raise InvalidTokenError() from e
