"""Input events delivered to the application controller."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Key:
    """A keypress, named: 'a', 'up', 'enter', 'esc', 'backspace', 'ctrl+c', ..."""

    text: str


@dataclass(frozen=True)
class Click:
    """A pointer click on a named target (a tab title)."""

    target: str


@dataclass(frozen=True)
class Tick:
    """One periodic timer tick."""


Event = Union[Key, Click, Tick]

# Multi-character key names that modal input treats as text.
TEXT_KEYS = {"space": " "}


def key_char(key: Key):
    """Return the character a key types, or None for control/navigation keys."""
    if key.text in TEXT_KEYS:
        return TEXT_KEYS[key.text]
    if len(key.text) == 1 and key.text.isprintable():
        return key.text
    return None
