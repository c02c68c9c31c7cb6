from datetime import timedelta

from classwork.app import initial_state, update
from classwork.events import Key, Tick
from classwork.models import Tab, Timer
from classwork.store import Collection, ItemStore, seeded_store
from classwork.view import hit_tab, render, tab_bar


def test_tab_bar_marks_active_and_spans_do_not_overlap():
    tabs = tab_bar(Tab.NOTES)
    assert [t.title for t in tabs] == ["Assignments", "Reading Materials", "Notes", "Timers"]
    assert [t.active for t in tabs] == [False, False, True, False]
    for left, right in zip(tabs, tabs[1:]):
        assert left.end < right.start


def test_hit_tab_maps_columns_to_titles():
    tabs = tab_bar(Tab.ASSIGNMENTS)
    assert hit_tab(tabs, tabs[0].start) == "Assignments"
    assert hit_tab(tabs, tabs[3].end - 1) == "Timers"
    assert hit_tab(tabs, tabs[0].end) is None
    assert hit_tab(tabs, 10_000) is None


def test_rows_highlight_selection():
    screen = render(update(initial_state(seeded_store()), Key("down")))
    assert [r.selected for r in screen.rows] == [False, True, False]
    assert screen.rows[0].text == "  1. Essay on Shakespeare"


def test_reading_rows_show_read_marker_and_dim():
    state = update(initial_state(seeded_store()), Key("right"))
    rows = render(state).rows
    assert rows[0].text == "  1. [x] Macbeth - Shakespeare"
    assert rows[0].dim is True
    assert rows[1].text == "  2. [ ] 1984 - George Orwell"


def test_timer_rows_show_remaining():
    store = ItemStore(timers=Collection.of([Timer("Review", timedelta(seconds=2))]))
    state = update(initial_state(store), Key("4"))
    assert render(state).rows[0].text == "  1.  0:00:02  Review"
    state = update(update(state, Tick()), Tick())
    row = render(state).rows[0]
    assert row.text.endswith("(done)")
    assert row.dim


def test_empty_collection_message():
    screen = render(initial_state(ItemStore()))
    assert screen.rows == ()
    assert "Press 'a'" in screen.empty_message


def test_modal_overlay_and_error():
    state = update(initial_state(seeded_store()), Key("4"))
    state = update(state, Key("a"))
    state = update(state, Key("x"))
    overlay = render(state).overlay
    assert overlay.buffer == "x"
    assert overlay.error is None
    state = update(state, Key("enter"))
    assert render(state).overlay.error.startswith("Invalid format")


def test_search_line_and_filtered_rows():
    state = initial_state(seeded_store())
    for k in ("/", "e", "s", "s", "a", "y"):
        state = update(state, Key(k))
    screen = render(state)
    assert screen.search_line == "Search: essay_"
    assert [r.text for r in screen.rows] == ["  1. Essay on Shakespeare"]


def test_no_matches_message():
    state = initial_state(seeded_store())
    for k in ("/", "z", "z", "enter"):
        state = update(state, Key(k))
    screen = render(state)
    assert screen.rows == ()
    assert screen.empty_message == "No matches for 'zz'."
