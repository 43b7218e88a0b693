"""Tests for the selection store state machine.

Critical Invariants:
- State is derived from the selection size
- Range selection extends from the anchor without moving it
- A non-additive marquee replaces the selection, an additive one extends it
"""

import pytest

from zonetree.selection import Marquee, SelectionMode, SelectionState, SelectionStore

ROOT_IDS = ["a", "b", "c", "d"]


@pytest.fixture
def store():
    return SelectionStore()


def test_starts_empty(store):
    assert store.state is SelectionState.EMPTY
    assert store.selected_ids == frozenset()
    assert store.anchor is None
    assert store.mode is SelectionMode.IDLE
    assert not store.is_multi_select_active


def test_toggle_select_adds_and_removes(store):
    store.toggle_select("a")
    assert store.state is SelectionState.SINGLE
    assert store.anchor == "a"

    store.toggle_select("b")
    assert store.state is SelectionState.MULTI
    assert store.is_multi_select_active

    store.toggle_select("a")
    assert store.selected_ids == {"b"}
    assert store.anchor == "a", "Anchor moves even when deselecting"


def test_select_range_from_anchor(store):
    store.toggle_select("a")
    store.select_range("c", ROOT_IDS)
    assert store.selected_ids == {"a", "b", "c"}
    assert store.anchor == "a"


def test_select_range_backwards(store):
    store.toggle_select("d")
    store.select_range("b", ROOT_IDS)
    assert store.selected_ids == {"b", "c", "d"}


def test_select_range_keeps_existing_selection(store):
    store.toggle_select("x")
    store.toggle_select("c")
    store.select_range("d", ROOT_IDS)
    assert store.selected_ids == {"x", "c", "d"}


def test_select_range_without_anchor_selects_target(store):
    store.select_range("c", ROOT_IDS)
    assert store.selected_ids == {"c"}
    assert store.anchor == "c"


def test_select_range_with_anchor_outside_roots(store):
    store.toggle_select("nested")
    store.select_range("b", ROOT_IDS)
    assert store.selected_ids == {"b"}
    assert store.anchor == "b"


def test_select_one_replaces(store):
    store.select_all(ROOT_IDS)
    store.select_one("b")
    assert store.selected_ids == {"b"}
    assert store.anchor == "b"


def test_select_multiple_keeps_anchor(store):
    store.toggle_select("a")
    store.select_multiple(["new-1", "new-2"])
    assert store.selected_ids == {"new-1", "new-2"}
    assert store.anchor == "a"


def test_select_multiple_warns_on_duplicates(store):
    with pytest.warns(UserWarning, match="duplicate"):
        store.select_multiple(["a", "a", "b"])
    assert len(store) == 2


def test_clear_selection(store):
    store.toggle_select("a")
    store.start_marquee(0, 0, additive=True)
    store.clear_selection()
    assert store.state is SelectionState.EMPTY
    assert store.anchor is None
    assert store.marquee is None
    assert store.mode is SelectionMode.IDLE


def test_snapshot_is_immutable_copy(store):
    store.toggle_select("a")
    store.toggle_select("b")
    snapshot = store.snapshot()
    store.clear_selection()

    assert snapshot.ids == ("a", "b")
    assert snapshot.anchor == "b"
    assert snapshot.state is SelectionState.MULTI
    assert "a" in snapshot


class TestMarquee:
    def test_non_additive_replaces_selection(self, store):
        store.toggle_select("a")
        store.start_marquee(10, 20)
        assert store.selected_ids == frozenset()
        assert store.mode is SelectionMode.MARQUEE

        store.update_marquee(50, 60)
        assert store.marquee == Marquee(10, 20, 50, 60)

        store.end_marquee(["b", "c"])
        assert store.selected_ids == {"b", "c"}
        assert store.marquee is None
        assert store.mode is SelectionMode.IDLE

    def test_additive_extends_selection(self, store):
        store.toggle_select("a")
        store.start_marquee(0, 0, additive=True)
        store.end_marquee(["c"])
        assert store.selected_ids == {"a", "c"}

    def test_cancel_keeps_selection(self, store):
        store.toggle_select("a")
        store.start_marquee(0, 0, additive=True)
        store.cancel_marquee()
        assert store.selected_ids == {"a"}
        assert store.mode is SelectionMode.IDLE

    def test_update_and_end_without_marquee_are_noops(self, store):
        store.toggle_select("a")
        store.update_marquee(5, 5)
        store.end_marquee(["b"])
        assert store.marquee is None
        assert store.selected_ids == {"a"}
