"""Selection state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SelectionState(Enum):
    """Derived from the number of selected ids (0, 1, 2+)."""

    EMPTY = "empty"
    SINGLE = "single"
    MULTI = "multi"

    @classmethod
    def for_count(cls, count: int) -> SelectionState:
        if count == 0:
            return cls.EMPTY
        if count == 1:
            return cls.SINGLE
        return cls.MULTI


class SelectionMode(Enum):
    """Pointer interaction mode."""

    IDLE = "idle"
    MARQUEE = "marquee"


class SelectAllStage(Enum):
    """Two-stage select-all.

    - ROOT_SELECTED: root-level components only
    - ALL_SELECTED: every component, nested zone members included
    """

    ROOT_SELECTED = "root_selected"
    ALL_SELECTED = "all_selected"


@dataclass(frozen=True, slots=True)
class Marquee:
    """Drag rectangle in canvas coordinates."""

    start_x: float
    start_y: float
    current_x: float
    current_y: float
    additive: bool = False


@dataclass(frozen=True, slots=True)
class Selection:
    """Immutable snapshot of a SelectionStore.

    Attributes:
        ids: Selected ids in selection order.
        anchor: Last explicitly toggled id, endpoint for range selection.
    """

    ids: tuple[str, ...] = ()
    anchor: str | None = None

    @property
    def state(self) -> SelectionState:
        return SelectionState.for_count(len(self.ids))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.ids

    def __len__(self) -> int:
        return len(self.ids)
