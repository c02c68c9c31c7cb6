from classwork.models import Tab
from classwork.store import Collection, ItemStore, seeded_store


def test_empty_collection_has_no_cursor():
    coll = Collection()
    assert coll.cursor is None
    assert coll.move_down().cursor is None
    assert coll.move_up().cursor is None


def test_move_down_saturates_at_last_item():
    coll = Collection.of(["a", "b", "c"])
    for _ in range(10):
        coll = coll.move_down()
    assert coll.cursor == 2


def test_move_up_saturates_at_first_item():
    coll = Collection.of(["a", "b"]).select(1)
    for _ in range(5):
        coll = coll.move_up()
    assert coll.cursor == 0


def test_append_keeps_order_and_activates_cursor():
    coll = Collection().append("first")
    assert coll.cursor == 0
    coll = coll.select(0).append("second")
    assert coll.get() == ("first", "second")
    assert coll.cursor == 0


def test_append_does_not_mutate_original():
    coll = Collection.of(["a"])
    grown = coll.append("b")
    assert coll.get() == ("a",)
    assert grown.get() == ("a", "b")


def test_remove_last_clamps_cursor():
    coll = Collection.of(["a", "b", "c"]).select(2)
    coll = coll.remove_at(2)
    assert len(coll) == 2
    assert coll.cursor == 1


def test_remove_middle_keeps_cursor_in_range():
    coll = Collection.of(["a", "b", "c"]).select(1)
    coll = coll.remove_at(1)
    assert coll.get() == ("a", "c")
    assert coll.cursor == 1


def test_remove_only_item_deactivates_cursor():
    coll = Collection.of(["only"]).remove_at(0)
    assert len(coll) == 0
    assert coll.cursor is None


def test_remove_out_of_range_is_noop():
    coll = Collection.of(["a", "b"])
    assert coll.remove_at(5) is coll
    assert coll.remove_at(-1) is coll
    assert Collection().remove_at(0) == Collection()


def test_delete_postcondition_for_every_position():
    for size in range(1, 5):
        for idx in range(size):
            coll = Collection.of(range(size)).select(idx)
            after = coll.remove_at(coll.cursor)
            assert len(after) == size - 1
            if len(after):
                assert 0 <= after.cursor <= len(after) - 1
            else:
                assert after.cursor is None


def test_replace_at_swaps_single_item():
    coll = Collection.of(["a", "b"]).replace_at(1, "B")
    assert coll.get() == ("a", "B")


def test_store_collections_are_independent():
    store = ItemStore()
    store = store.with_collection(Tab.NOTES, store.collection(Tab.NOTES).append("note"))
    assert store.notes.get() == ("note",)
    assert store.assignments.get() == ()
    assert store.collection(Tab.TIMERS).get() == ()


def test_seeded_store_has_sample_data():
    store = seeded_store()
    assert "Essay on Shakespeare" in store.assignments.get()
    assert store.reading_materials.get()[0].title == "Macbeth"
    assert len(store.notes) == 2
    assert len(store.timers) == 2
    assert store.assignments.cursor == 0


def test_remove_before_cursor_keeps_same_item_selected():
    coll = Collection.of(["a", "b", "c"]).select(2)
    coll = coll.remove_at(0)
    assert coll.get() == ("b", "c")
    assert coll.selected == "c"
