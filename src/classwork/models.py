"""Data models and constants for classwork."""

import os
from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

DEFAULT_DIR = os.path.expanduser("~/.classwork")
DEFAULT_CONFIG = os.path.join(DEFAULT_DIR, "config.toml")
LOG_DIR = os.path.join(DEFAULT_DIR, "logs")
LOG_FILE = os.path.join(LOG_DIR, "classwork.log")


class Tab(IntEnum):
    """The four browsable collections, in tab-bar order."""

    ASSIGNMENTS = 0
    READING_MATERIALS = 1
    NOTES = 2
    TIMERS = 3

    @property
    def title(self) -> str:
        return TAB_TITLES[self]

    @classmethod
    def from_title(cls, name: str):
        """Look up a tab by its title (case-insensitive); None if unknown."""
        key = name.strip().lower()
        for tab, title in TAB_TITLES.items():
            if title.lower() == key:
                return tab
        return None


TAB_TITLES = {
    Tab.ASSIGNMENTS: "Assignments",
    Tab.READING_MATERIALS: "Reading Materials",
    Tab.NOTES: "Notes",
    Tab.TIMERS: "Timers",
}

FIRST_TAB = Tab.ASSIGNMENTS
LAST_TAB = Tab.TIMERS


@dataclass(frozen=True)
class ReadingMaterial:
    """A book or text on the reading list."""

    title: str
    author: str
    read: bool = False

    @property
    def text(self) -> str:
        return f"{self.title} - {self.author}"


@dataclass(frozen=True)
class Timer:
    """A study countdown; remaining never drops below zero."""

    description: str
    remaining: timedelta

    @property
    def text(self) -> str:
        return self.description

    @property
    def finished(self) -> bool:
        return self.remaining <= timedelta(0)


def item_text(item) -> str:
    """Text representation of any stored item (plain strings are their own text)."""
    if isinstance(item, str):
        return item
    return item.text


SEED_ASSIGNMENTS = (
    "Essay on Shakespeare",
    "Book report on '1984'",
    "Research on Romantic Era",
)

SEED_READING = (
    ReadingMaterial(title="Macbeth", author="Shakespeare", read=True),
    ReadingMaterial(title="1984", author="George Orwell", read=False),
)

SEED_NOTES = (
    "Note about Macbeth's main theme.",
    "Personal thoughts on 1984.",
)

SEED_TIMERS = (
    Timer(description="Read Act 1 of Macbeth", remaining=timedelta(minutes=25)),
    Timer(description="Outline essay", remaining=timedelta(minutes=10)),
)
