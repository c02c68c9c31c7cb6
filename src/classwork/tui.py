"""classwork curses-based terminal user interface."""

import curses
import logging
import os
import time
from typing import Callable, List, Optional

from .app import AppState, update
from .events import Click, Event, Key, Tick
from .view import Screen, hit_tab, render

LOGGER = logging.getLogger(__name__)

MIN_HEIGHT = 8
MIN_WIDTH = 30

KEY_NAMES = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_ENTER: "enter",
    10: "enter",
    13: "enter",
    27: "esc",
    curses.KEY_BACKSPACE: "backspace",
    127: "backspace",
    8: "backspace",
    32: "space",
}


def key_name(ch: int) -> Optional[str]:
    """Map a curses key code to the controller's key name; None to ignore it."""
    if ch in KEY_NAMES:
        return KEY_NAMES[ch]
    if 32 < ch < 127:
        return chr(ch)
    return None


class TUI:
    """Curses surface: draws Screens and feeds key, click and tick events."""

    def __init__(
        self,
        stdscr,
        state: AppState,
        tick_seconds: float = 1.0,
        mouse: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stdscr = stdscr
        self.state = state
        self.tick_seconds = tick_seconds
        self.clock = clock
        self.next_tick = self.clock() + self.tick_seconds
        self.scroll = 0
        self.screen: Optional[Screen] = None
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        if mouse:
            curses.mousemask(curses.BUTTON1_CLICKED | curses.BUTTON1_PRESSED)
        self.height, self.width = self.stdscr.getmaxyx()

        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_CYAN, -1)
            curses.init_pair(2, curses.COLOR_RED, -1)
            curses.init_pair(3, curses.COLOR_YELLOW, -1)
            self.COL_TAB = curses.color_pair(1)
            self.COL_ERROR = curses.color_pair(2)
            self.COL_SEARCH = curses.color_pair(3)
        else:
            self.COL_TAB = curses.A_BOLD
            self.COL_ERROR = curses.A_BOLD | curses.A_UNDERLINE
            self.COL_SEARCH = curses.A_UNDERLINE

    def draw(self):
        """Render tab bar, list, footer and any modal overlay."""
        self.stdscr.erase()
        self.height, self.width = self.stdscr.getmaxyx()
        screen = self.screen = render(self.state)

        if self.height < MIN_HEIGHT or self.width < MIN_WIDTH:
            self.stdscr.addnstr(0, 0, "Terminal too small.", max(1, self.width - 1))
            self.stdscr.refresh()
            return

        for label in screen.tabs:
            if label.start >= self.width - 1:
                break
            attrs = curses.A_REVERSE | curses.A_BOLD if label.active else self.COL_TAB
            text = f" {label.title} "
            self.stdscr.addnstr(0, label.start, text, self.width - 1 - label.start, attrs)
            if label.end < self.width - 1:
                self.stdscr.addstr(0, label.end, "|", curses.A_DIM)
        self.stdscr.hline(1, 0, curses.ACS_HLINE, self.width)

        top = 2
        if screen.search_line is not None:
            self.stdscr.addnstr(top, 0, screen.search_line, self.width - 1, self.COL_SEARCH)
            top += 1
        body_h = self.height - top - 3

        if screen.empty_message:
            self.stdscr.addnstr(top, 0, screen.empty_message, self.width - 1, curses.A_DIM)
        else:
            cur_pos = next((i for i, row in enumerate(screen.rows) if row.selected), 0)
            if cur_pos < self.scroll:
                self.scroll = cur_pos
            elif cur_pos >= self.scroll + body_h:
                self.scroll = cur_pos - body_h + 1
            self.scroll = max(0, min(self.scroll, max(0, len(screen.rows) - body_h)))
            for i in range(self.scroll, min(self.scroll + body_h, len(screen.rows))):
                row = screen.rows[i]
                attrs = curses.A_NORMAL
                if row.dim:
                    attrs |= curses.A_DIM
                if row.selected:
                    attrs |= curses.A_REVERSE
                self.stdscr.addnstr(top + i - self.scroll, 0, row.text, self.width - 1, attrs)

        self.stdscr.hline(self.height - 3, 0, curses.ACS_HLINE, self.width)
        self.stdscr.addnstr(self.height - 2, 0, screen.footer, self.width - 1, curses.A_DIM)
        self.stdscr.addnstr(self.height - 1, 0, screen.status, self.width - 1)
        self.stdscr.refresh()

        if screen.overlay is not None:
            self.draw_overlay(screen)

    def draw_overlay(self, screen: Screen):
        """Bordered input box above the footer, like an inline prompt."""
        overlay = screen.overlay
        win_h = 5
        win = curses.newwin(win_h, self.width, max(0, self.height - win_h - 3), 0)
        win.erase()
        win.border()
        inner = self.width - 4
        win.addnstr(0, 2, " Input (Enter submits, ESC cancels) ", inner, curses.A_DIM)
        win.addnstr(1, 2, overlay.prompt, inner, curses.A_BOLD)
        text = "> " + overlay.buffer + "_"
        if len(text) > inner:
            text = text[-inner:]
        win.addnstr(2, 2, text, inner)
        if overlay.error:
            win.addnstr(3, 2, overlay.error, inner, self.COL_ERROR)
        win.refresh()

    def click_event(self) -> Optional[Event]:
        try:
            _, x, y, _, _ = curses.getmouse()
        except curses.error:
            return None
        if y != 0 or self.screen is None:
            return None
        title = hit_tab(self.screen.tabs, x)
        return Click(title) if title else None

    def poll(self) -> List[Event]:
        """Wait for one key (or the next tick deadline) and return the events."""
        wait = max(0.0, self.next_tick - self.clock())
        self.stdscr.timeout(int(wait * 1000))
        ch = self.stdscr.getch()

        events: List[Event] = []
        if ch == curses.KEY_MOUSE:
            ev = self.click_event()
            if ev is not None:
                events.append(ev)
        elif ch not in (-1, curses.KEY_RESIZE):
            name = key_name(ch)
            if name is not None:
                events.append(Key(name))

        now = self.clock()
        while now >= self.next_tick:
            events.append(Tick())
            self.next_tick += self.tick_seconds
        return events

    def dispatch(self, event: Event):
        self.state = update(self.state, event)

    def run(self) -> AppState:
        """Main event loop."""
        while self.state.running:
            self.draw()
            for event in self.poll():
                self.dispatch(event)
                if not self.state.running:
                    break
        return self.state


def start_curses(state: AppState, tick_seconds: float = 1.0, mouse: bool = True) -> AppState:
    """Initialize curses and run TUI; returns the final state."""
    os.environ.setdefault("ESCDELAY", "25")

    def _main(stdscr):
        tui = TUI(stdscr, state, tick_seconds=tick_seconds, mouse=mouse)
        LOGGER.info("Terminal UI started (%dx%d)", tui.width, tui.height)
        return tui.run()

    return curses.wrapper(_main)
