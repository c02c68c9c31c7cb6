"""Application controller: routes events to the tab, modal and timer logic.

update(state, event) is pure. The runner owns the only AppState and
replaces it with whatever update returns.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Optional

from . import core, modal
from .events import Click, Event, Key, Tick
from .models import FIRST_TAB, Tab, item_text
from .modal import ModalSession, SearchSession
from .store import Collection, ItemStore

LOGGER = logging.getLogger(__name__)

QUIT_KEYS = ("q",)
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
TAB_DIGITS = {"1": 0, "2": 1, "3": 2, "4": 3}


@dataclass(frozen=True)
class AppState:
    store: ItemStore = field(default_factory=ItemStore)
    tab: Tab = FIRST_TAB
    modal: Optional[ModalSession] = None
    search: Optional[SearchSession] = None
    status: str = ""
    running: bool = True
    tick_unit: timedelta = core.ONE_SECOND

    @property
    def collection(self) -> Collection:
        return self.store.collection(self.tab)

    @property
    def query(self) -> str:
        """Search query applied to the active tab ('' when none)."""
        if self.search is None or self.search.tab != self.tab:
            return ""
        return self.search.query


def initial_state(store: Optional[ItemStore] = None, tick_unit: timedelta = core.ONE_SECOND) -> AppState:
    return AppState(
        store=store if store is not None else ItemStore(),
        tick_unit=tick_unit,
        status="a add | d delete | / search | left/right switch tab | q quit",
    )


def visible_rows(state: AppState):
    """Raw indexes of the active collection currently shown."""
    return core.visible_indices(state.collection.items, state.query)


def current_index(state: AppState) -> Optional[int]:
    """The selected raw index, snapped onto the filtered view."""
    cursor = state.collection.cursor
    if cursor is None:
        return None
    if not state.query:
        return cursor
    rows = visible_rows(state)
    if not rows:
        return None
    return cursor if cursor in rows else rows[0]


def _with_collection(state: AppState, collection: Collection, **changes) -> AppState:
    return replace(state, store=state.store.with_collection(state.tab, collection), **changes)


def switch_tab(state: AppState, tab: Tab) -> AppState:
    if tab == state.tab:
        return state
    LOGGER.debug("Switched tab %s -> %s", state.tab.title, tab.title)
    search = state.search if state.search is not None and state.search.tab == tab else None
    return replace(state, tab=tab, search=search, status=tab.title)


def move_selection(state: AppState, delta: int) -> AppState:
    coll = state.collection
    if coll.cursor is None:
        return state
    if state.query:
        target = core.step_visible(visible_rows(state), coll.cursor, delta)
        return _with_collection(state, coll.select(target))
    moved = coll.move_down() if delta > 0 else coll.move_up()
    return _with_collection(state, moved)


def delete_selected(state: AppState) -> AppState:
    idx = current_index(state)
    if idx is None:
        return state
    coll = state.collection
    text = item_text(coll.items[idx])
    LOGGER.debug("Deleted %s[%d]: %s", state.tab.title, idx, text)
    return _with_collection(state, coll.remove_at(idx), status=f"Deleted: {text}")


def toggle_selected_read(state: AppState) -> AppState:
    idx = current_index(state)
    if idx is None:
        return state
    coll = state.collection
    material = core.toggle_read(coll.items[idx])
    LOGGER.debug("Toggled read on %r -> %s", material.title, material.read)
    status = f"Marked {'read' if material.read else 'unread'}: {material.title}"
    return _with_collection(state, coll.replace_at(idx, material), status=status)


def open_modal(state: AppState) -> AppState:
    session = modal.open_for(state.tab)
    return replace(state, modal=session, status="Enter submits, ESC cancels")


def handle_modal_key(state: AppState, key: Key) -> AppState:
    session, item = modal.handle_key(state.modal, key)
    if session is not None:
        return replace(state, modal=session)
    if item is None:
        return replace(state, modal=None, status="Add cancelled.")
    tab = state.modal.tab
    coll = state.store.collection(tab).append(item)
    LOGGER.debug("Added to %s: %s", tab.title, item_text(item))
    return replace(
        state,
        modal=None,
        store=state.store.with_collection(tab, coll),
        status=f"Added: {item_text(item)}",
    )


def handle_search_key(state: AppState, key: Key) -> AppState:
    session = modal.handle_search_key(state.search, key)
    if session is None:
        return replace(state, search=None, status="Search cleared.")
    if not session.editing:
        return replace(state, search=session, status=f"Filter: /{session.query}")
    return replace(state, search=session)


def handle_tab_key(state: AppState, key: Key) -> Optional[AppState]:
    """Tab-local keys; None when the key is not one of them."""
    k = key.text
    if k in UP_KEYS:
        return move_selection(state, -1)
    if k in DOWN_KEYS:
        return move_selection(state, +1)
    if k == "a":
        return open_modal(state)
    if k == "d":
        return delete_selected(state)
    if k == "/":
        return replace(state, search=modal.start_search(state.tab, state.query))
    if k == "r" and state.tab == Tab.READING_MATERIALS:
        return toggle_selected_read(state)
    return None


def handle_global_key(state: AppState, key: Key) -> AppState:
    k = key.text
    if k == "left":
        return switch_tab(state, core.move_left(state.tab))
    if k == "right":
        return switch_tab(state, core.move_right(state.tab))
    if k in TAB_DIGITS:
        return switch_tab(state, core.jump_to(state.tab, TAB_DIGITS[k]))
    if k in QUIT_KEYS:
        LOGGER.debug("Quit requested")
        return replace(state, running=False)
    return state


def handle_key(state: AppState, key: Key) -> AppState:
    if state.modal is not None:
        return handle_modal_key(state, key)
    if state.search is not None and state.search.editing:
        return handle_search_key(state, key)
    handled = handle_tab_key(state, key)
    if handled is not None:
        return handled
    return handle_global_key(state, key)


def handle_click(state: AppState, target: str) -> AppState:
    if state.modal is not None:
        return state
    tab = Tab.from_title(target)
    if tab is None:
        return state
    return switch_tab(state, tab)


def handle_tick(state: AppState) -> AppState:
    timers = state.store.timers
    ticked = core.tick_timers(timers, state.tick_unit)
    if ticked == timers:
        return state
    return replace(state, store=replace(state.store, timers=ticked))


def update(state: AppState, event: Event) -> AppState:
    """Return the state that follows event."""
    match event:
        case Tick():
            return handle_tick(state)
        case Click(target=target):
            return handle_click(state, target)
        case Key():
            return handle_key(state, event)
    raise TypeError(f"Unknown event: {event!r}")
