"""In-memory storage for ItemKeeper.

This module provides the Core object that bundles the per-application state:
- users: CredentialStore (read-only after seeding)
- items: ItemStore (lock-guarded)
- tokens: TokenCodec (holds the signing secret)

ARCHITECTURE:
- create_app() builds one Core and stores it in app.extensions
- Request code reaches it through get_core(); nothing lives at module scope,
  so separate apps (e.g. one per test) never share state
"""

from flask import current_app

from ..auth.service import CredentialStore
from ..auth.token import TokenCodec
from .items import ItemStore

EXTENSION_KEY = "itemkeeper"


class Core:
    """Per-application stores and token codec."""

    def __init__(self, users: CredentialStore, items: ItemStore, tokens: TokenCodec):
        self.users = users
        self.items = items
        self.tokens = tokens

    def init_app(self, app) -> None:
        """Attach this Core to a Flask app."""
        app.extensions[EXTENSION_KEY] = self


def get_core() -> Core:
    """
    Get the Core of the current application.

    Raises:
        RuntimeError: Outside an application context, or if create_app()
            did not set up the app
    """
    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError:
        raise RuntimeError("Application has no ItemKeeper Core; use create_app()") from None


__all__ = ["Core", "ItemStore", "get_core"]
