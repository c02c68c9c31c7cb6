"""Modal text input: the 'add' dialog and the search query line.

Both sessions own the keyboard while open. The add dialog keeps its
validation error until the next commit attempt; typing never clears it.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from .events import Key, key_char
from .models import Tab
from .parsing import parse_for

LOGGER = logging.getLogger(__name__)

PROMPTS = {
    Tab.ASSIGNMENTS: "Add new assignment:",
    Tab.READING_MATERIALS: "Add new reading material (Format: Title - Author):",
    Tab.NOTES: "Add new note:",
    Tab.TIMERS: "Add new timer (Format: Description - Duration, e.g. 1h30m):",
}


@dataclass(frozen=True)
class ModalSession:
    tab: Tab
    prompt: str
    buffer: str = ""
    error: Optional[str] = None


def open_for(tab: Tab) -> ModalSession:
    return ModalSession(tab=tab, prompt=PROMPTS[tab])


def type_char(session: ModalSession, ch: str) -> ModalSession:
    return replace(session, buffer=session.buffer + ch)


def backspace(session: ModalSession) -> ModalSession:
    return replace(session, buffer=session.buffer[:-1])


def commit(session: ModalSession) -> Tuple[Optional[ModalSession], Any]:
    """Parse the buffer for the session's tab.

    Returns (None, item) on success, or (session with error, None) so the
    user can fix the same buffer.
    """
    result = parse_for(session.tab, session.buffer)
    if not result.ok:
        LOGGER.info("Rejected %s input %r: %s", session.tab.title, session.buffer, result.error)
        return replace(session, error=result.error), None
    return None, result.value


def handle_key(session: ModalSession, key: Key) -> Tuple[Optional[ModalSession], Any]:
    """Feed one key to the dialog.

    Returns (next_session, committed_item). A None session means the
    dialog closed: committed when the item is set, cancelled otherwise.
    """
    if key.text == "esc":
        return None, None
    if key.text == "enter":
        return commit(session)
    if key.text == "backspace":
        return backspace(session), None
    ch = key_char(key)
    if ch is None:
        return session, None
    return type_char(session, ch), None


@dataclass(frozen=True)
class SearchSession:
    """Search query for one tab; editing is False once the query is applied."""

    tab: Tab
    query: str = ""
    editing: bool = True


def start_search(tab: Tab, query: str = "") -> SearchSession:
    return SearchSession(tab=tab, query=query, editing=True)


def handle_search_key(session: SearchSession, key: Key) -> Optional[SearchSession]:
    """Edit the query; returns None when the search is cleared."""
    if key.text == "esc":
        return None
    if key.text == "enter":
        if not session.query:
            return None
        return replace(session, editing=False)
    if key.text == "backspace":
        return replace(session, query=session.query[:-1])
    ch = key_char(key)
    if ch is None:
        return session
    return replace(session, query=session.query + ch)
