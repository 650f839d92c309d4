"""In-memory item store.

IMPORT CONVENTION:
- Core accesses this through core.items
- The store knows nothing about ownership; ItemService scopes every call

ID GENERATION POLICY:
Ids come from a counter that only moves forward. Deleting an item never frees
its id, so a later insert cannot collide with an id a client still holds.
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from ..items.schemas import Item


class ItemStore:
    """Item records in insertion order.

    Every method takes the store lock. Callers that read and then write
    (find-then-mutate) wrap the sequence in ``atomic()`` so no other request
    interleaves; the lock is re-entrant for that reason.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items: list[Item] = []
        self._last_id = 0
        self._lock = threading.RLock()
        for item in items:
            self._items.append(item.model_copy())
            self._last_id = max(self._last_id, item.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    @contextmanager
    def atomic(self) -> Iterator["ItemStore"]:
        """Hold the store lock across several operations."""
        with self._lock:
            yield self

    def all(self) -> list[Item]:
        """Snapshot of every item, in store order."""
        with self._lock:
            return [item.model_copy() for item in self._items]

    def get(self, item_id: int) -> Item | None:
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            return self._items[index].model_copy()

    def insert(self, title: str, description: str, owner_id: int) -> Item:
        """Append a new, not yet completed item and return it."""
        with self._lock:
            self._last_id += 1
            item = Item(
                id=self._last_id,
                title=title,
                description=description,
                completed=False,
                owner_id=owner_id,
            )
            self._items.append(item)
            return item.model_copy()

    def replace(self, item: Item) -> Item:
        """
        Overwrite the stored item with the same id.

        Raises:
            KeyError: If no item has that id
        """
        with self._lock:
            index = self._index_of(item.id)
            if index is None:
                raise KeyError(item.id)
            self._items[index] = item.model_copy()
            return item

    def remove(self, item_id: int) -> Item | None:
        """Remove and return the item, or None if absent."""
        with self._lock:
            index = self._index_of(item_id)
            if index is None:
                return None
            return self._items.pop(index)

    def _index_of(self, item_id: int) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        return None
