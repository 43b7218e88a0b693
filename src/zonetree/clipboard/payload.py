"""Flat same-session clipboard payload.

Unlike the envelope, a ClipboardPayload keeps the document's own zone table:
the copied items plus every zone they transitively own. It never leaves the
process, so it is pasted back into root content by index.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from zonetree.core.document import ClipboardPayload, ComponentNode, Document, freeze_zones
from zonetree.core.identity import IdGenerator
from zonetree.core.tree import MutationResult, clone_subtree, collect_ids, in_document_order, iter_nodes


def collect_payload(document: Document, ids: Iterable[str]) -> ClipboardPayload:
    """Collect selected nodes with every zone they own, in document order."""
    order = in_document_order(document, ids)
    if not order:
        return ClipboardPayload()

    nodes = {node.id: node for node, _ in iter_nodes(document)}
    zones: dict[str, dict[str, tuple[ComponentNode, ...]]] = {}
    stack = list(order)
    while stack:
        owner_id = stack.pop()
        if owner_id in zones or owner_id not in document.zones:
            continue
        zones[owner_id] = dict(document.zones[owner_id])
        for children in zones[owner_id].values():
            stack.extend(child.id for child in children)
    return ClipboardPayload(items=tuple(nodes[node_id] for node_id in order), zones=zones)


def clone_payload(payload: ClipboardPayload, id_generator: IdGenerator) -> ClipboardPayload:
    """Deep-clone a payload under fresh ids.

    Each zone's owner id is rewritten to its owner's new id and zone names
    are kept verbatim.
    """
    if payload.is_empty():
        return payload
    # The payload has the same shape as a document whose content is the items.
    source = Document(content=payload.items, zones=payload.zones)
    id_generator.reserve(collect_ids(source, deep=True))
    zones: dict[str, dict[str, list[ComponentNode]]] = {}
    items = tuple(clone_subtree(source, item, id_generator, zones) for item in payload.items)
    return ClipboardPayload(items=items, zones=freeze_zones(zones))


def paste_payload(
    document: Document,
    payload: ClipboardPayload,
    id_generator: IdGenerator,
    insert_after_index: int,
) -> MutationResult:
    """Paste a cloned copy of payload into root content.

    Args:
        document: Destination document.
        payload: Collected payload.
        id_generator: Source of fresh ids.
        insert_after_index: Content index to insert after; clamped to the end.

    Returns:
        MutationResult with the pasted root ids; unchanged document for an
        empty payload.
    """
    if payload.is_empty():
        return MutationResult(document)

    id_generator.reserve(collect_ids(document, deep=True))
    cloned = clone_payload(payload, id_generator)

    content = list(document.content)
    at = max(0, min(insert_after_index + 1, len(content)))
    content[at:at] = cloned.items
    zones = {**document.zones, **cloned.zones}
    return MutationResult(
        replace(document, content=tuple(content), zones=freeze_zones(zones)),
        tuple(item.id for item in cloned.items),
    )


def paste_insert_index(document: Document, selected_ids: Iterable[str]) -> int:
    """Content index to paste after: the last selected root item, else the last item."""
    selected = set(selected_ids)
    indices = [index for index, node in enumerate(document.content) if node.id in selected]
    if indices:
        return indices[-1]
    return len(document.content) - 1
