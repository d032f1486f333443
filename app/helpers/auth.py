"""Authentication helper functions.

Registration, login, password hashing and the authorization gate that resolves a bearer
token to the calling user and organisation.
"""

import logging
from functools import wraps

import bcrypt
from flask import current_app, g, request
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import db
from app.helpers.audit import log_after_response
from app.helpers.tokens import issue_token, verify_token
from app.models.organisation import Organisation
from app.models.user import User
from app.schemas import LoginRequest, OrganisationSchema, RegisterRequest, UserSchema
from hrms.errors import (
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
)


class CallerContext(BaseModel):
    """The authenticated user and organisation behind a request."""

    user: User
    organisation: Organisation

    @property
    def user_id(self) -> int:
        """Return the calling user's ID."""
        return self.user.id

    @property
    def organisation_id(self) -> int:
        """Return the calling user's organisation ID."""
        return self.organisation.id

    class Config:
        """Config for the caller context, which wraps ORM instances."""

        arbitrary_types_allowed = True
        frozen = True


class SessionResponse(BaseModel):
    """Token plus identity, returned by registration and login."""

    token: str
    user: UserSchema
    organisation: OrganisationSchema


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    rounds = current_app.config.get("BCRYPT_LOG_ROUNDS", 12)
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        return False
    try:
        return bcrypt.checkpw(password_bytes, password_hash.encode("utf-8"))
    except ValueError:
        logging.error("Stored password hash is not a valid bcrypt hash")
        return False


def extract_bearer_token(header: str | None) -> str:
    """Get the token out of an ``Authorization: Bearer <token>`` header.

    Raises
    ------
    MissingTokenError
        If there is no header or it carries no token.
    InvalidTokenError
        If the header is not a bearer header.
    """
    parts = (header or "").split()
    if not parts or (len(parts) == 1 and parts[0].lower() == "bearer"):
        raise MissingTokenError()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise InvalidTokenError()
    return parts[1]


def authenticate_request() -> CallerContext:
    """Resolve the bearer token on the current request to a live user and organisation.

    Raises
    ------
    MissingTokenError
        If no token was sent.
    InvalidTokenError
        If the token does not verify, or its user no longer exists in its organisation.
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    claims = verify_token(token)

    user = db.session.get(User, claims.user_id)
    if user is None or user.organisation is None:
        logging.warning(f"Token for unknown user {claims.user_id}")
        raise InvalidTokenError()
    if user.organisation_id != claims.organisation_id:
        logging.warning(f"Token organisation mismatch for user {claims.user_id}")
        raise InvalidTokenError()

    return CallerContext(user=user, organisation=user.organisation)


def org_required(f):
    """Require a valid bearer token and pass the caller to the decorated function.

    The resolved ``CallerContext`` is given to the function as the ``caller`` keyword
    argument and kept on ``g.caller`` for the audit recorder.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        caller = authenticate_request()
        g.caller = caller
        return f(*args, caller=caller, **kwargs)

    return decorated_function


def session_response(user: User, organisation: Organisation) -> dict:
    """Issue a token for the user and serialise it with the user's identity."""
    return SessionResponse(
        token=issue_token(user.id, organisation.id),
        user=UserSchema.model_validate(user),
        organisation=OrganisationSchema.model_validate(organisation),
    ).model_dump()


def register_organisation(payload: RegisterRequest) -> dict:
    """Create an organisation and its admin user in one transaction.

    Parameters
    ----------
    payload : RegisterRequest
        The validated registration payload.

    Returns
    -------
    dict
        Token, user and organisation of the new account.

    Raises
    ------
    ConflictError
        If a user with the email already exists.
    InternalError
        If the database write fails.
    """
    if User.query.filter_by(email=payload.email).first():
        logging.warning(f"Registration attempt with existing email: {payload.email}")
        raise ConflictError("User already exists with this email")

    try:
        organisation = Organisation(name=payload.organisation_name)
        user = User(
            name=payload.admin_name,
            email=payload.email,
            password_hash=hash_password(payload.password),
            organisation=organisation,
        )
        db.session.add_all([organisation, user])
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logging.warning(f"Registration conflict for {payload.email}: {e}")
        raise ConflictError("User already exists with this email") from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logging.error(f"Error during registration: {e}")
        raise InternalError("Server error during registration") from e

    logging.info(f"Registered organisation {organisation.id} with admin {user.email}")
    log_after_response(
        action="organisation_registered",
        details={"organisationId": organisation.id, "adminEmail": user.email},
        organisation_id=organisation.id,
        user_id=user.id,
    )
    return session_response(user, organisation)


def authenticate_user(payload: LoginRequest) -> dict:
    """Check email and password and issue a token.

    Raises
    ------
    InvalidCredentialsError
        If the user does not exist or the password does not match.
    """
    user = User.query.filter_by(email=payload.email).first()
    if user is None or not check_password(payload.password, user.password_hash):
        logging.warning(f"Failed login attempt for {payload.email}")
        raise InvalidCredentialsError()

    logging.info(f"Successful login for user: {user.email}")
    log_after_response(
        action="user_login",
        details={"email": user.email},
        organisation_id=user.organisation_id,
        user_id=user.id,
    )
    return session_response(user, user.organisation)


def profile_response(caller: CallerContext) -> dict:
    """Serialise the caller's identity."""
    return {
        "user": UserSchema.model_validate(caller.user).model_dump(),
        "organisation": OrganisationSchema.model_validate(caller.organisation).model_dump(),
    }
