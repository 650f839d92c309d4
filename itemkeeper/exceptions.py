"""Custom exceptions for ItemKeeper.

Every exception carries the HTTP status it is surfaced with. The Flask
error handlers registered in main.create_app() turn them into
``{"error": message}`` JSON bodies.
"""


class ItemKeeperError(Exception):
    """Base exception for all ItemKeeper errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(ItemKeeperError):
    """Request body failed schema validation."""

    status_code = 400


class MissingCredentials(ItemKeeperError):
    """Login attempted without a username or password."""

    status_code = 400

    def __init__(self, message: str = "Username and password required", details: dict | None = None):
        super().__init__(message, details)


class InvalidCredentials(ItemKeeperError):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials", details: dict | None = None):
        super().__init__(message, details)


class MissingToken(ItemKeeperError):
    """No bearer credential on a protected route."""

    status_code = 401

    def __init__(self, message: str = "Access token required", details: dict | None = None):
        super().__init__(message, details)


class InvalidToken(ItemKeeperError):
    """Bearer token is malformed, forged or expired."""

    status_code = 403

    def __init__(self, message: str = "Invalid token", details: dict | None = None):
        super().__init__(message, details)


class MissingTitle(ItemKeeperError):
    """Item created (or retitled) without a title."""

    status_code = 400

    def __init__(self, message: str = "Title is required", details: dict | None = None):
        super().__init__(message, details)


class ResourceNotFound(ItemKeeperError):
    """Item does not exist or is owned by someone else."""

    status_code = 404

    def __init__(self, message: str = "Item not found", details: dict | None = None):
        super().__init__(message, details)
