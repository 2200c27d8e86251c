"""Authentication schemas."""

from pydantic import BaseModel


class UserRegister(BaseModel):
    """User registration request.

    Fields are optional here so that a missing email is reported by the
    registration service rather than by request parsing.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    """Single-value response body: a message, or the token after login."""

    response: str
