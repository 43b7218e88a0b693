"""Read-only queries over a Document.

Usage:
    location = locate(doc, "text-1")      # Location(zone=ZoneKey("card-1", "body"), index=0)
    zones_owned_by(doc, "card-1")         # [ZoneKey("card-1", "body")]
    collect_ids(doc)                      # root ids in content order
    collect_ids(doc, deep=True)           # every id, pre-order
    is_descendant_of(doc, "text-1", "card-1")  # True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from zonetree.core.document import ComponentNode, Document
from zonetree.core.identity import ZoneKey


@dataclass(frozen=True, slots=True)
class Location:
    """Where a node sits. ``zone=None`` means root content."""

    zone: ZoneKey | None
    index: int


def iter_nodes(document: Document) -> Iterator[tuple[ComponentNode, Location]]:
    """Walk the tree pre-order: a node, then each zone it owns, recursively.

    Yields:
        (node, location) pairs in document order.
    """

    def _walk(nodes: tuple[ComponentNode, ...], zone: ZoneKey | None) -> Iterator[tuple[ComponentNode, Location]]:
        for index, node in enumerate(nodes):
            yield node, Location(zone, index)
            for name, children in document.zones.get(node.id, {}).items():
                yield from _walk(children, ZoneKey(node.id, name))

    yield from _walk(document.content, None)


def locate(document: Document, node_id: str) -> Location | None:
    """Find the container and index of a node.

    Args:
        document: Document to search.
        node_id: Id to look for.

    Returns:
        Location of the node, or None if absent.
    """
    for index, node in enumerate(document.content):
        if node.id == node_id:
            return Location(None, index)
    for key in document.zone_keys():
        for index, node in enumerate(document.zone(key)):
            if node.id == node_id:
                return Location(key, index)
    return None


def find_node(document: Document, node_id: str) -> ComponentNode | None:
    location = locate(document, node_id)
    if location is None:
        return None
    return document.container(location.zone)[location.index]


def zones_owned_by(document: Document, node_id: str) -> list[ZoneKey]:
    """Zones directly owned by a node (one level; callers recurse)."""
    return [ZoneKey(node_id, name) for name in document.zones.get(node_id, {})]


def collect_ids(document: Document, deep: bool = False) -> list[str]:
    """Component ids in document order.

    Args:
        document: Document to read.
        deep: Include nodes nested in zones (pre-order) instead of only root
            content.

    Returns:
        List of ids.
    """
    if not deep:
        return [node.id for node in document.content]
    return [node.id for node, _ in iter_nodes(document)]


def owned_ids(document: Document, node_id: str) -> set[str]:
    """Ids of every node in the transitive zone closure of node_id."""
    found: set[str] = set()
    stack = [node_id]
    while stack:
        current = stack.pop()
        for nodes in document.zones.get(current, {}).values():
            for node in nodes:
                if node.id not in found:
                    found.add(node.id)
                    stack.append(node.id)
    return found


def is_descendant_of(document: Document, candidate_id: str, ancestor_id: str) -> bool:
    """Check whether candidate_id is (transitively) inside a zone of ancestor_id.

    Irreflexive: a node is not its own descendant. False when either id is
    absent from the document.
    """
    if candidate_id == ancestor_id:
        return False
    return candidate_id in owned_ids(document, ancestor_id)


def in_document_order(document: Document, ids: Iterable[str]) -> list[str]:
    """Filter ids to those present in the document, ordered pre-order."""
    wanted = set(ids)
    if not wanted:
        return []
    return [node_id for node_id in collect_ids(document, deep=True) if node_id in wanted]
