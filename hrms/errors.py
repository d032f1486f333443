"""Error taxonomy for the HRMS API."""

from enum import Enum
from http import HTTPStatus


class ErrorCode(Enum):
    """Error codes for HRMS operations."""

    # Request errors (1000-1999)
    VALIDATION_ERROR = 1000
    CONFLICT = 1001

    # Authentication errors (2000-2999)
    MISSING_TOKEN = 2000
    INVALID_TOKEN = 2001
    INVALID_CREDENTIALS = 2002

    # Lookup errors (3000-3999)
    NOT_FOUND = 3000

    # Server errors (5000-5999)
    INTERNAL_ERROR = 5000


class HRMSError(Exception):
    """Base class for errors that map onto an API response.

    Subclasses fix the HTTP status; the message is what the client sees, so it must
    never carry internal detail.
    """

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        """Initialize the error.

        Parameters
        ----------
        message : str
            A human-readable, client-safe error message
        code : Optional[ErrorCode]
            The error code, defaults to the subclass default
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __str__(self) -> str:
        """Return a string representation of the error."""
        return f"[{self.code.name}] {self.message}"

    def to_dict(self) -> dict:
        """Convert the error to the response envelope."""
        return {"success": False, "message": self.message}


class ValidationError(HRMSError):
    """Missing or malformed request fields."""

    status_code = HTTPStatus.BAD_REQUEST
    default_code = ErrorCode.VALIDATION_ERROR


class ConflictError(HRMSError):
    """A unique field is already taken."""

    status_code = HTTPStatus.BAD_REQUEST
    default_code = ErrorCode.CONFLICT


class AuthenticationError(HRMSError):
    """The caller could not be authenticated."""

    status_code = HTTPStatus.UNAUTHORIZED
    default_code = ErrorCode.INVALID_TOKEN


class MissingTokenError(AuthenticationError):
    """No bearer token on the request."""

    default_code = ErrorCode.MISSING_TOKEN

    def __init__(self, message: str = "No token provided, authorization denied"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Token is tampered, malformed, expired or points at a user that is gone."""

    default_code = ErrorCode.INVALID_TOKEN

    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Email and password do not match."""

    default_code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFoundError(HRMSError):
    """Row is missing or belongs to another organisation."""

    status_code = HTTPStatus.NOT_FOUND
    default_code = ErrorCode.NOT_FOUND


class InternalError(HRMSError):
    """Unexpected storage or runtime fault."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_code = ErrorCode.INTERNAL_ERROR
