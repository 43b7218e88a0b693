"""Host editor actions.

The host owns the authoritative document and its undo history. The engine
only ever hands it a complete new snapshot through one dispatch callable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from zonetree.core.document import Document


class ActionType(str, Enum):
    """Action kinds the host dispatch accepts."""

    SET_DATA = "setData"
    SET = "set"


@dataclass(frozen=True, slots=True)
class HostAction:
    """A document replacement sent to the host.

    Attributes:
        type: Action kind.
        data: New document snapshot.
        record_history: Whether the host should push an undo entry; None
            leaves the choice to the host.
    """

    type: ActionType
    data: Document
    record_history: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        action: dict[str, Any] = {"type": self.type.value, "data": self.data.to_dict()}
        if self.record_history is not None:
            action["recordHistory"] = self.record_history
        return action
