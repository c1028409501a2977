"""In-memory menu store for the running session."""

from __future__ import annotations

from typing import Iterator

from diner.models import MenuItem


class MenuStore:
    """Ordered collection of menu items, newest first."""

    def __init__(self) -> None:
        self._items: list[MenuItem] = []

    def add(self, item: MenuItem) -> None:
        """Prepend a validated item."""
        if any(existing.item_id == item.item_id for existing in self._items):
            raise ValueError(f"Duplicate menu item id: {item.item_id}")
        self._items.insert(0, item)

    def remove(self, item_id: str) -> None:
        """Delete the item with ``item_id``; unknown ids are ignored."""
        self._items = [item for item in self._items if item.item_id != item_id]

    def list(self) -> tuple[MenuItem, ...]:
        """Return a read-only snapshot in store order."""
        return tuple(self._items)

    def get(self, item_id: str) -> MenuItem | None:
        for item in self._items:
            if item.item_id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.list())
