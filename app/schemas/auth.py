"""Request schemas for registration and login."""

from pydantic import BaseModel, EmailStr, Field, field_validator

from .types import NonEmptyStr

MIN_PASSWORD_LENGTH = 6
# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class RegisterRequest(BaseModel):
    """Payload to register an organisation together with its admin user."""

    organisation_name: NonEmptyStr = Field(alias="organisationName")
    admin_name: NonEmptyStr = Field(alias="adminName")
    email: EmailStr
    password: str

    class Config:
        """Config for the registration request."""

        populate_by_name = True

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        """Store and compare emails case-insensitively."""
        return value.lower()

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        """Reject passwords that are too short."""
        if len(value) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
        return value


class LoginRequest(BaseModel):
    """Payload to log in with email and password."""

    email: NonEmptyStr
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def lower_email(cls, value: str) -> str:
        """Store and compare emails case-insensitively."""
        return value.lower()
