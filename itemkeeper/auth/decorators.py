"""Authentication gate for protected endpoints.

This module provides:
- _authenticate_request() - shared bearer-token check
- @auth_required - decorator form for individual views

The items blueprint runs _authenticate_request() as a before_request
handler, so every /items route is covered without decorating each view.
"""

import logging
from functools import wraps

from flask import g, request

from ..db import get_core
from ..exceptions import InvalidToken, MissingToken

logger = logging.getLogger(__name__)


# ============================================================================
# Shared Authentication Logic
# ============================================================================


def bearer_credential(header: str | None) -> str | None:
    """
    Extract the credential from an ``Authorization: Bearer <token>`` header.

    The scheme is matched case-insensitively. Returns None when the header
    is absent, uses another scheme, or carries no credential.
    """
    if not header:
        return None
    scheme, _, credential = header.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    credential = credential.strip()
    return credential or None


def _authenticate_request():
    """
    Resolve the caller's identity from the bearer token.

    Stores the verified TokenClaim in flask.g.user.

    Raises:
        MissingToken: If no bearer credential is present
        InvalidToken: If the token is malformed, forged or expired
    """
    credential = bearer_credential(request.headers.get("Authorization"))
    if credential is None:
        logger.debug(f"No bearer token on {request.method} {request.path}")
        raise MissingToken()

    result = get_core().tokens.check(credential)
    if not result.ok:
        logger.debug(f"Bearer token rejected ({result.reason}) on {request.method} {request.path}")
        raise InvalidToken()

    g.user = result.claim


# ============================================================================
# Auth Required Decorator
# ============================================================================


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        user_id = g.user.id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        _authenticate_request()
        return f(*args, **kwargs)

    return wrapper
