"""Authentication API endpoints for ItemKeeper.

- POST /login - Verify credentials and issue a bearer token

Unknown usernames and wrong passwords get the same 401 response so the
endpoint cannot be used to discover accounts.
"""

import logging

from flask import Blueprint, jsonify

from ..api.validation import validate_request
from ..db import get_core
from ..exceptions import InvalidCredentials, MissingCredentials
from .schemas import LoginResponse, UserLogin

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and return a bearer token.

    Accepts both JSON and form data.

    Returns:
        200: Token response with token and public user info
        400: Username or password missing
        401: Invalid credentials

    Example request:
    ```json
    {
        "username": "admin",
        "password": "password"
    }
    ```

    Example response:
    ```json
    {
        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "user": {
            "id": 1,
            "username": "admin",
            "email": "admin@test.com"
        }
    }
    ```
    """
    if not data.username or not data.password:
        raise MissingCredentials()

    core = get_core()
    user = None
    if isinstance(data.username, str) and isinstance(data.password, str):
        user = core.users.verify_credentials(data.username, data.password)
    if user is None:
        logger.warning(f"Failed login attempt for username: {data.username}")
        raise InvalidCredentials()

    token = core.tokens.issue(user)

    logger.info(f"Successful login: {user.username}")

    return jsonify(LoginResponse(token=token, user=user).model_dump()), 200
