"""Builds the screen description the curses surface draws."""

from dataclasses import dataclass
from typing import Optional, Tuple

from .app import AppState, current_index, visible_rows
from .models import ReadingMaterial, Tab, Timer, item_text
from .parsing import format_duration

TAB_SEPARATOR = "|"

FOOTERS = {
    Tab.ASSIGNMENTS: "up/down select  a add  d delete  / search  left/right tabs  q quit",
    Tab.READING_MATERIALS: "up/down select  a add  d delete  r read/unread  / search  left/right tabs  q quit",
    Tab.NOTES: "up/down select  a add  d delete  / search  left/right tabs  q quit",
    Tab.TIMERS: "up/down select  a add  d delete  / search  left/right tabs  q quit",
}

EMPTY_MESSAGES = {
    Tab.ASSIGNMENTS: "No assignments. Press 'a' to add one.",
    Tab.READING_MATERIALS: "No reading materials. Press 'a' to add one.",
    Tab.NOTES: "No notes. Press 'a' to add one.",
    Tab.TIMERS: "No timers. Press 'a' to add one.",
}


@dataclass(frozen=True)
class TabLabel:
    title: str
    active: bool
    start: int
    end: int  # exclusive


@dataclass(frozen=True)
class Row:
    text: str
    selected: bool = False
    dim: bool = False


@dataclass(frozen=True)
class Overlay:
    prompt: str
    buffer: str
    error: Optional[str] = None


@dataclass(frozen=True)
class Screen:
    tabs: Tuple[TabLabel, ...]
    rows: Tuple[Row, ...]
    footer: str
    status: str = ""
    empty_message: str = ""
    search_line: Optional[str] = None
    overlay: Optional[Overlay] = None


def tab_bar(active: Tab) -> Tuple[TabLabel, ...]:
    labels = []
    x = 0
    for tab in Tab:
        text = f" {tab.title} "
        labels.append(TabLabel(title=tab.title, active=tab == active, start=x, end=x + len(text)))
        x += len(text) + len(TAB_SEPARATOR)
    return tuple(labels)


def hit_tab(tabs: Tuple[TabLabel, ...], x: int) -> Optional[str]:
    """Title of the tab label covering column x, if any."""
    for label in tabs:
        if label.start <= x < label.end:
            return label.title
    return None


def row_text(index: int, item) -> str:
    if isinstance(item, ReadingMaterial):
        marker = "[x]" if item.read else "[ ]"
        return f"{index + 1:>3}. {marker} {item.title} - {item.author}"
    if isinstance(item, Timer):
        suffix = "  (done)" if item.finished else ""
        return f"{index + 1:>3}. {format_duration(item.remaining):>8}  {item.description}{suffix}"
    return f"{index + 1:>3}. {item_text(item)}"


def row_dim(item) -> bool:
    if isinstance(item, ReadingMaterial):
        return item.read
    if isinstance(item, Timer):
        return item.finished
    return False


def render(state: AppState) -> Screen:
    """Describe what the display surface should show for state."""
    items = state.collection.items
    selected = current_index(state)
    rows = tuple(
        Row(text=row_text(i, items[i]), selected=i == selected, dim=row_dim(items[i]))
        for i in visible_rows(state)
    )

    empty_message = ""
    if not items:
        empty_message = EMPTY_MESSAGES[state.tab]
    elif not rows:
        empty_message = f"No matches for '{state.query}'."

    search_line = None
    if state.search is not None and state.search.tab == state.tab:
        if state.search.editing:
            search_line = f"Search: {state.search.query}_"
        else:
            search_line = f"Search results for '{state.search.query}' (/ edit, ESC in search clears)"

    overlay = None
    if state.modal is not None:
        overlay = Overlay(prompt=state.modal.prompt, buffer=state.modal.buffer, error=state.modal.error)

    return Screen(
        tabs=tab_bar(state.tab),
        rows=rows,
        footer=FOOTERS[state.tab],
        status=state.status,
        empty_message=empty_message,
        search_line=search_line,
        overlay=overlay,
    )
