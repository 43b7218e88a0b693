"""Select-all escalation policy.

The first select-all picks root-level components. A second one, recognised by
the current selection already being exactly the root-level set, escalates to
every component in the document.
"""

from __future__ import annotations

from collections.abc import Iterable

from zonetree.core.document import Document
from zonetree.core.tree import collect_ids
from zonetree.selection.models import SelectAllStage


def resolve_select_all(document: Document, current_ids: Iterable[str]) -> tuple[SelectAllStage, list[str]]:
    """Decide what a select-all should select next.

    Args:
        document: Current document.
        current_ids: Currently selected ids.

    Returns:
        (stage, ids): ROOT_SELECTED with root ids, or ALL_SELECTED with every
        id in document order.
    """
    root_ids = collect_ids(document)
    if root_ids and set(current_ids) == set(root_ids):
        return SelectAllStage.ALL_SELECTED, collect_ids(document, deep=True)
    return SelectAllStage.ROOT_SELECTED, root_ids
