"""Pydantic schemas for authentication."""

from typing import Any

from pydantic import BaseModel, Field


class UserLogin(BaseModel):
    """Login request body.

    Fields are untyped at the schema level so that the endpoint answers
    missing or wrongly typed credentials with its own errors instead of a
    generic validation failure.
    """

    username: Any = None
    password: Any = None


class UserResponse(BaseModel):
    """Public view of a user (never carries the password hash)."""

    id: int
    username: str
    email: str


class UserRecord(UserResponse):
    """User as held by the credential store."""

    password_hash: str = Field(..., repr=False)

    def public(self) -> UserResponse:
        """Strip the password hash."""
        return UserResponse(id=self.id, username=self.username, email=self.email)


class TokenClaim(BaseModel):
    """Identity claim carried by a bearer token.

    ``iat`` and ``exp`` are Unix timestamps in seconds.
    """

    id: int
    username: str
    iat: int
    exp: int


class LoginResponse(BaseModel):
    """Successful login response."""

    token: str
    user: UserResponse
