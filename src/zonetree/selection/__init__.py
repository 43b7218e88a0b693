"""Selection state: store, snapshots, and the select-all policy.

Architecture Note:
    selection/ is a stateful service layer. The store is UI state and is never
    part of a Document.
"""

from zonetree.selection.models import (
    Marquee,
    SelectAllStage,
    Selection,
    SelectionMode,
    SelectionState,
)
from zonetree.selection.policy import resolve_select_all
from zonetree.selection.store import SelectionStore

__all__ = [
    "SelectionStore",
    "Selection",
    "SelectionState",
    "SelectionMode",
    "SelectAllStage",
    "Marquee",
    "resolve_select_all",
]
