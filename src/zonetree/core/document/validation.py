"""Tree invariant checks.

Invariants:
    1. Every props.id is unique document-wide.
    2. Every zone owner id resolves to an existing node.
    3. Every zone is reachable from root content (the structure is a tree).
    4. No zone list is empty (only enforced when allow_empty_zones is False).
"""

from __future__ import annotations

from collections import Counter

from zonetree.core.document.models import Document, MalformedTreeError


def validate_document(document: Document, allow_empty_zones: bool = True) -> None:
    """Check every tree invariant.

    Args:
        document: Document to check.
        allow_empty_zones: Accept empty zone lists (hosts send them for empty
            drop targets). Mutation output never contains any.

    Raises:
        MalformedTreeError: Describing the first violated invariant.
    """
    all_ids = [node.id for node in document.content]
    for named in document.zones.values():
        for nodes in named.values():
            all_ids.extend(node.id for node in nodes)

    duplicates = sorted(node_id for node_id, count in Counter(all_ids).items() if count > 1)
    if duplicates:
        raise MalformedTreeError(f"Duplicate component ids: {duplicates}")

    known = set(all_ids)
    orphans = sorted(owner_id for owner_id in document.zones if owner_id not in known)
    if orphans:
        raise MalformedTreeError(f"Zones owned by missing components: {orphans}")

    reachable: set[str] = set()
    stack = [node.id for node in document.content]
    while stack:
        node_id = stack.pop()
        if node_id in reachable:
            continue
        reachable.add(node_id)
        for nodes in document.zones.get(node_id, {}).values():
            stack.extend(node.id for node in nodes)

    detached = sorted(node_id for node_id in known if node_id not in reachable)
    if detached:
        raise MalformedTreeError(f"Components not reachable from root content (cycle or detached zone): {detached}")

    if not allow_empty_zones:
        empty = sorted(str(key) for key in document.zone_keys() if not document.zone(key))
        if empty:
            raise MalformedTreeError(f"Empty zones: {empty}")
