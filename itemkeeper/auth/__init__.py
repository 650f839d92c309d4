"""Authentication module for ItemKeeper.

This module provides authentication and authorization functionality:
- Schema validation for login
- JWT token issuing and verification (TokenCodec)
- Password hashing and the in-memory credential store
- Authentication gate for protected endpoints

Auth endpoints:
- POST /login - Authenticate and return a bearer token
"""

from . import schemas, token

__all__ = ["schemas", "token"]
