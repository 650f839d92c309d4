"""Ownership-scoped item operations.

Every operation takes the caller's identity (the TokenClaim resolved by the
authentication gate) and only ever sees items whose owner_id matches it.
An item owned by someone else is reported exactly like a missing one, so a
caller cannot probe which ids exist.
"""

import logging
from typing import TYPE_CHECKING

from ..auth.schemas import TokenClaim
from ..exceptions import MissingTitle, ResourceNotFound
from .schemas import Item, ItemCreate, ItemUpdate

if TYPE_CHECKING:
    from ..db.items import ItemStore

logger = logging.getLogger(__name__)


def _is_title(value) -> bool:
    return isinstance(value, str) and bool(value)


class ItemService:
    """CRUD over an ItemStore, filtered to the caller's items."""

    def __init__(self, store: "ItemStore"):
        self._store = store

    def list(self, identity: TokenClaim) -> list[Item]:
        """All items owned by ``identity``, in store order."""
        return [item for item in self._store.all() if item.owner_id == identity.id]

    def get(self, identity: TokenClaim, item_id: int) -> Item:
        """
        Get one of the caller's items.

        Raises:
            ResourceNotFound: If the item is missing or not owned by the caller
        """
        return self._find_owned(identity, item_id)

    def create(self, identity: TokenClaim, data: ItemCreate) -> Item:
        """
        Create an item owned by ``identity``.

        Raises:
            MissingTitle: If the title is absent, empty or not a string
        """
        if not _is_title(data.title):
            raise MissingTitle()

        item = self._store.insert(
            title=data.title,
            description=data.description or "",
            owner_id=identity.id,
        )
        logger.info(f"Item {item.id} created by user {identity.id}")
        return item

    def update(self, identity: TokenClaim, item_id: int, data: ItemUpdate) -> Item:
        """
        Apply the fields present in ``data`` to one of the caller's items.

        Presence decides, not truthiness: ``completed=False`` and
        ``description=""`` overwrite. JSON null counts as absent. An empty
        title is rejected because items always carry one.

        Raises:
            ResourceNotFound: If the item is missing or not owned by the caller
            MissingTitle: If the update sets an empty or non-string title
        """
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }

        with self._store.atomic():
            item = self._find_owned(identity, item_id)

            if "title" in changes and not _is_title(changes["title"]):
                raise MissingTitle()

            updated = item.model_copy(update=changes)
            self._store.replace(updated)

        logger.info(f"Item {item_id} updated by user {identity.id}: {sorted(changes)}")
        return updated

    def delete(self, identity: TokenClaim, item_id: int) -> Item:
        """
        Remove one of the caller's items and return it.

        Raises:
            ResourceNotFound: If the item is missing or not owned by the caller
        """
        with self._store.atomic():
            self._find_owned(identity, item_id)
            deleted = self._store.remove(item_id)

        logger.info(f"Item {item_id} deleted by user {identity.id}")
        return deleted

    def _find_owned(self, identity: TokenClaim, item_id: int) -> Item:
        item = self._store.get(item_id)
        if item is None or item.owner_id != identity.id:
            raise ResourceNotFound()
        return item
