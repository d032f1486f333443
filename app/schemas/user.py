"""User schema."""

from pydantic import BaseModel


class UserSchema(BaseModel):
    """Schema for a user, never exposes the password hash."""

    id: int
    name: str
    email: str

    class Config:
        """Config for the user schema."""

        from_attributes = True
