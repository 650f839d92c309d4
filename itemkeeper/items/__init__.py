"""Ownership-scoped item operations."""

from .schemas import Item, ItemCreate, ItemUpdate
from .service import ItemService

__all__ = ["Item", "ItemCreate", "ItemUpdate", "ItemService"]
