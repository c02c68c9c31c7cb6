"""classwork - tabbed terminal organizer for English-class coursework."""

__version__ = "1.0.0"

from .models import Tab, ReadingMaterial, Timer
from .store import Collection, ItemStore, seeded_store
from .core import (
    filter_items,
    move_left,
    move_right,
    jump_to,
    tick_timers,
)
from .events import Key, Click, Tick
from .app import AppState, initial_state, update

__all__ = [
    "Tab",
    "ReadingMaterial",
    "Timer",
    "Collection",
    "ItemStore",
    "seeded_store",
    "filter_items",
    "move_left",
    "move_right",
    "jump_to",
    "tick_timers",
    "Key",
    "Click",
    "Tick",
    "AppState",
    "initial_state",
    "update",
]
