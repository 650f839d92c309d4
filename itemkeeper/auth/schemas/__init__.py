"""Authentication Pydantic schemas for API validation."""

from .auth import (
    LoginResponse,
    TokenClaim,
    UserLogin,
    UserRecord,
    UserResponse,
)

__all__ = [
    "LoginResponse",
    "TokenClaim",
    "UserLogin",
    "UserRecord",
    "UserResponse",
]
