"""Selection store: selected ids, range anchor, and marquee state.

States are derived from the selection size: EMPTY (0), SINGLE (1), MULTI (2+).
The store lives outside the host editor so it survives editor remounts.

Usage:
    store = SelectionStore()
    store.toggle_select("a")
    store.select_range("c", ["a", "b", "c", "d"])   # {"a", "b", "c"}
    store.is_multi_select_active                      # True
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence

from zonetree.selection.models import Marquee, Selection, SelectionMode, SelectionState


class SelectionStore:
    """Mutable selection state machine.

    Selected ids keep insertion order so snapshots and range selections are
    deterministic.
    """

    def __init__(self) -> None:
        self._selected: dict[str, None] = {}
        self._anchor: str | None = None
        self._marquee: Marquee | None = None
        self._mode = SelectionMode.IDLE

    @property
    def selected_ids(self) -> frozenset[str]:
        return frozenset(self._selected)

    @property
    def anchor(self) -> str | None:
        return self._anchor

    @property
    def state(self) -> SelectionState:
        return SelectionState.for_count(len(self._selected))

    @property
    def is_multi_select_active(self) -> bool:
        return len(self._selected) >= 2

    @property
    def mode(self) -> SelectionMode:
        return self._mode

    @property
    def marquee(self) -> Marquee | None:
        return self._marquee

    def __len__(self) -> int:
        return len(self._selected)

    def is_selected(self, node_id: str) -> bool:
        return node_id in self._selected

    def snapshot(self) -> Selection:
        """Immutable copy of the current selection."""
        return Selection(ids=tuple(self._selected), anchor=self._anchor)

    # Selection transitions

    def toggle_select(self, node_id: str) -> None:
        """Add or remove one id; it becomes the anchor either way."""
        if node_id in self._selected:
            del self._selected[node_id]
        else:
            self._selected[node_id] = None
        self._anchor = node_id
        self._mode = SelectionMode.IDLE

    def select_one(self, node_id: str) -> None:
        """Replace the selection with a single id and anchor on it."""
        self._selected = {node_id: None}
        self._anchor = node_id
        self._mode = SelectionMode.IDLE

    def select_range(self, target_id: str, root_ordered_ids: Sequence[str]) -> None:
        """Add the inclusive range between the anchor and target_id.

        Existing selected ids outside the range are kept and the anchor does
        not move. Without an anchor, or when either endpoint is missing from
        root_ordered_ids, the selection becomes just target_id.

        Args:
            target_id: Clicked id.
            root_ordered_ids: Root-level ids in content order.
        """
        anchor = self._anchor
        if anchor is None or anchor not in root_ordered_ids or target_id not in root_ordered_ids:
            self.select_one(target_id)
            return

        anchor_index = root_ordered_ids.index(anchor)
        target_index = root_ordered_ids.index(target_id)
        start, end = sorted((anchor_index, target_index))
        for node_id in root_ordered_ids[start : end + 1]:
            self._selected[node_id] = None
        self._mode = SelectionMode.IDLE

    def select_multiple(self, ids: Iterable[str]) -> None:
        """Replace the selection with ids (used after paste and duplicate).

        The anchor is left unchanged.
        """
        ids = list(ids)
        selected = dict.fromkeys(ids)
        if len(selected) != len(ids):
            warnings.warn(
                f"select_multiple() received {len(ids) - len(selected)} duplicate id(s). "
                f"Each id is selected once.",
                stacklevel=2,
            )
        self._selected = selected
        self._mode = SelectionMode.IDLE

    def select_all(self, ids: Iterable[str]) -> None:
        """Replace the selection with the full given set."""
        self._selected = dict.fromkeys(ids)
        self._mode = SelectionMode.IDLE

    def clear_selection(self) -> None:
        """Empty the selection and forget the anchor."""
        self._selected = {}
        self._anchor = None
        self._marquee = None
        self._mode = SelectionMode.IDLE

    # Marquee transitions

    def start_marquee(self, x: float, y: float, additive: bool = False) -> None:
        """Begin a drag rectangle; a non-additive marquee clears the selection."""
        if not additive:
            self._selected = {}
        self._marquee = Marquee(start_x=x, start_y=y, current_x=x, current_y=y, additive=additive)
        self._mode = SelectionMode.MARQUEE

    def update_marquee(self, x: float, y: float) -> None:
        """Move the free corner of the active marquee; no-op when none is active."""
        if self._marquee is None:
            return
        self._marquee = Marquee(
            start_x=self._marquee.start_x,
            start_y=self._marquee.start_y,
            current_x=x,
            current_y=y,
            additive=self._marquee.additive,
        )

    def end_marquee(self, intersected_ids: Iterable[str]) -> None:
        """Commit the marquee: replace (or, when additive, extend) the selection.

        Args:
            intersected_ids: Ids whose bounds intersect the final rectangle,
                computed by the host's overlay layer.
        """
        if self._marquee is None:
            return
        if self._marquee.additive:
            for node_id in intersected_ids:
                self._selected[node_id] = None
        else:
            self._selected = dict.fromkeys(intersected_ids)
        self._marquee = None
        self._mode = SelectionMode.IDLE

    def cancel_marquee(self) -> None:
        """Drop the marquee without touching the selection."""
        self._marquee = None
        self._mode = SelectionMode.IDLE
