"""Item store: four ordered collections, each with a selection cursor.

Every method returns a new value; nothing is mutated in place.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Tuple

from .models import (
    SEED_ASSIGNMENTS,
    SEED_NOTES,
    SEED_READING,
    SEED_TIMERS,
    Tab,
)


@dataclass(frozen=True)
class Collection:
    """Ordered items plus a cursor (None while the collection is empty)."""

    items: Tuple[Any, ...] = ()
    cursor: Optional[int] = None

    @classmethod
    def of(cls, items) -> "Collection":
        items = tuple(items)
        return cls(items=items, cursor=0 if items else None)

    def __len__(self) -> int:
        return len(self.items)

    def get(self) -> Tuple[Any, ...]:
        return self.items

    @property
    def selected(self) -> Any:
        if self.cursor is None:
            return None
        return self.items[self.cursor]

    def append(self, item) -> "Collection":
        cursor = 0 if self.cursor is None else self.cursor
        return replace(self, items=self.items + (item,), cursor=cursor)

    def remove_at(self, index: int) -> "Collection":
        """Drop the item at index; out-of-range indexes are a no-op."""
        if index < 0 or index >= len(self.items):
            return self
        items = self.items[:index] + self.items[index + 1 :]
        if not items:
            return replace(self, items=items, cursor=None)
        cursor = self.cursor if self.cursor is not None else 0
        if index < cursor:
            cursor -= 1
        return replace(self, items=items, cursor=min(cursor, len(items) - 1))

    def replace_at(self, index: int, item) -> "Collection":
        if index < 0 or index >= len(self.items):
            return self
        items = self.items[:index] + (item,) + self.items[index + 1 :]
        return replace(self, items=items)

    def map_items(self, fn: Callable[[Any], Any]) -> "Collection":
        return replace(self, items=tuple(fn(item) for item in self.items))

    def select(self, index: int) -> "Collection":
        if not self.items:
            return self
        return replace(self, cursor=max(0, min(len(self.items) - 1, index)))

    def move_up(self) -> "Collection":
        if self.cursor is None:
            return self
        return self.select(self.cursor - 1)

    def move_down(self) -> "Collection":
        if self.cursor is None:
            return self
        return self.select(self.cursor + 1)


@dataclass(frozen=True)
class ItemStore:
    assignments: Collection = field(default_factory=Collection)
    reading_materials: Collection = field(default_factory=Collection)
    notes: Collection = field(default_factory=Collection)
    timers: Collection = field(default_factory=Collection)

    def collection(self, tab: Tab) -> Collection:
        return getattr(self, FIELD_FOR_TAB[tab])

    def with_collection(self, tab: Tab, collection: Collection) -> "ItemStore":
        return replace(self, **{FIELD_FOR_TAB[tab]: collection})


FIELD_FOR_TAB = {
    Tab.ASSIGNMENTS: "assignments",
    Tab.READING_MATERIALS: "reading_materials",
    Tab.NOTES: "notes",
    Tab.TIMERS: "timers",
}


def seeded_store() -> ItemStore:
    """Store pre-filled with the sample coursework shown on first launch."""
    return ItemStore(
        assignments=Collection.of(SEED_ASSIGNMENTS),
        reading_materials=Collection.of(SEED_READING),
        notes=Collection.of(SEED_NOTES),
        timers=Collection.of(SEED_TIMERS),
    )
