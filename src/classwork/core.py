"""classwork helpers (pure functions, no I/O)."""

from dataclasses import replace
from datetime import timedelta
from typing import Iterable, List, Optional, Sequence

from .models import FIRST_TAB, LAST_TAB, ReadingMaterial, Tab, Timer, item_text
from .store import Collection

ONE_SECOND = timedelta(seconds=1)


def filter_items(items: Iterable, query: str) -> List:
    """Items whose text contains query, case-insensitively; empty query keeps all."""
    items = list(items)
    if not query:
        return items
    q = query.lower()
    return [item for item in items if q in item_text(item).lower()]


def visible_indices(items: Sequence, query: str) -> List[int]:
    """Raw indexes of the rows filter_items would show, in order."""
    if not query:
        return list(range(len(items)))
    q = query.lower()
    return [i for i, item in enumerate(items) if q in item_text(item).lower()]


def step_visible(indices: Sequence[int], cursor: Optional[int], delta: int) -> Optional[int]:
    """Move among visible indexes, saturating at both ends.

    A cursor that is not visible counts as sitting on the first visible row.
    """
    if not indices:
        return cursor
    start = indices.index(cursor) if cursor in indices else 0
    pos = start + delta
    return indices[max(0, min(len(indices) - 1, pos))]


def move_left(tab: Tab) -> Tab:
    if tab > FIRST_TAB:
        return Tab(tab - 1)
    return tab


def move_right(tab: Tab) -> Tab:
    if tab < LAST_TAB:
        return Tab(tab + 1)
    return tab


def jump_to(tab: Tab, index: int) -> Tab:
    """Direct tab selection; out-of-bounds indexes leave the tab unchanged."""
    if FIRST_TAB <= index <= LAST_TAB:
        return Tab(index)
    return tab


def tick_timer(timer: Timer, unit: timedelta = ONE_SECOND) -> Timer:
    remaining = max(timedelta(0), timer.remaining - unit)
    if remaining == timer.remaining:
        return timer
    return replace(timer, remaining=remaining)


def tick_timers(timers: Collection, unit: timedelta = ONE_SECOND) -> Collection:
    """Count every timer down by one tick, floored at zero."""
    return timers.map_items(lambda t: tick_timer(t, unit))


def toggle_read(material: ReadingMaterial) -> ReadingMaterial:
    return replace(material, read=not material.read)
