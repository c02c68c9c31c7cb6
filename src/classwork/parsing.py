"""Parsers turning modal input text into items.

Each parser returns a ParseResult instead of raising, so the modal can
show the message inline and let the user keep editing.
"""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, Dict, Optional

from .models import ReadingMaterial, Tab, Timer

SEPARATOR = "-"

DURATION_RE = re.compile(r"^(?:\d+(?:\.\d+)?(?:ms|h|m|s)\s*)+$")
DURATION_PART_RE = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")

UNIT_SECONDS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 0.001,
}

EMPTY_MESSAGE = "Input cannot be empty."
READING_FORMAT_MESSAGE = "Invalid format. Use 'Title - Author'"
TIMER_FORMAT_MESSAGE = "Invalid format. Use 'Description - Duration'"


@dataclass(frozen=True)
class ParseResult:
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_duration(text: str) -> Optional[timedelta]:
    """Parse '1h30m', '45s', '1.5h', '2m30s' style text; None when invalid."""
    s = text.strip().replace(" ", "")
    if not s or not DURATION_RE.match(s):
        return None
    total = 0.0
    for amount, unit in DURATION_PART_RE.findall(s):
        total += float(amount) * UNIT_SECONDS[unit]
    try:
        return timedelta(seconds=total)
    except OverflowError:
        return None


def format_duration(value: timedelta) -> str:
    """Render as H:MM:SS, dropping fractional seconds."""
    seconds = max(0, int(value.total_seconds()))
    return str(timedelta(seconds=seconds))


def split_pair(text: str):
    """Split on the first separator; returns (left, right) trimmed or None."""
    if SEPARATOR not in text:
        return None
    left, right = text.split(SEPARATOR, 1)
    return left.strip(), right.strip()


def parse_label(text: str) -> ParseResult:
    s = text.strip()
    if not s:
        return ParseResult(error=EMPTY_MESSAGE)
    return ParseResult(value=s)


def parse_reading_material(text: str) -> ParseResult:
    if not text.strip():
        return ParseResult(error=EMPTY_MESSAGE)
    pair = split_pair(text)
    if pair is None or not pair[0] or not pair[1]:
        return ParseResult(error=READING_FORMAT_MESSAGE)
    title, author = pair
    return ParseResult(value=ReadingMaterial(title=title, author=author, read=False))


def parse_timer(text: str) -> ParseResult:
    if not text.strip():
        return ParseResult(error=EMPTY_MESSAGE)
    pair = split_pair(text)
    if pair is None or not pair[0] or not pair[1]:
        return ParseResult(error=TIMER_FORMAT_MESSAGE)
    description, raw = pair
    duration = parse_duration(raw)
    if duration is None:
        return ParseResult(error=f"Invalid duration '{raw}'. Use e.g. 1h30m, 25m, 45s")
    return ParseResult(value=Timer(description=description, remaining=duration))


PARSERS: Dict[Tab, Callable[[str], ParseResult]] = {
    Tab.ASSIGNMENTS: parse_label,
    Tab.READING_MATERIALS: parse_reading_material,
    Tab.NOTES: parse_label,
    Tab.TIMERS: parse_timer,
}


def parse_for(tab: Tab, text: str) -> ParseResult:
    """Dispatch to the parsing rule of the given tab."""
    return PARSERS[tab](text)
