"""Pure tree mutations: remove, duplicate, extract, paste.

Every function takes a Document and returns a new one; the input is never
modified and untouched nodes are shared between the two snapshots. Empty input
returns the very same Document object so callers can detect a no-op with
``is``.

Usage:
    doc = remove_components(doc, {"text-1"})
    result = duplicate_components(doc, {"card-1"}, id_generator)
    forest = extract_components(doc, {"card-1"})
    result = paste_components(doc, forest, id_generator, target_zone="card-1:body")
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import TypeAlias

from zonetree.core.document import ComponentNode, Document, SerializedComponent, freeze_zones
from zonetree.core.identity import ROOT_ZONE, IdGenerator, ZoneKey
from zonetree.core.tree.locator import (
    collect_ids,
    find_node,
    in_document_order,
    iter_nodes,
    owned_ids,
)
from zonetree.log import get_logger

logger = get_logger(__name__)

_WorkingZones: TypeAlias = dict[str, dict[str, list[ComponentNode]]]


@dataclass(frozen=True, slots=True)
class MutationResult:
    """New document plus the root ids of the nodes a mutation created."""

    document: Document
    new_ids: tuple[str, ...] = ()


def _working_zones(document: Document) -> _WorkingZones:
    return {owner_id: {name: list(nodes) for name, nodes in named.items()} for owner_id, named in document.zones.items()}


def remove_components(document: Document, ids: Iterable[str]) -> Document:
    """Remove components and everything they transitively own.

    A selected id nested under another selected id is not processed on its
    own: it disappears with its owner's zones. Zones left empty are pruned.

    Args:
        document: Source document.
        ids: Ids to remove; unknown ids are ignored.

    Returns:
        New document, or ``document`` itself when nothing matched.
    """
    selected = set(ids)
    if not selected:
        return document

    present = in_document_order(document, selected)
    if not present:
        logger.debug("remove_components: none of %d ids found", len(selected))
        return document

    # Pre-order puts every ancestor before its descendants.
    roots: set[str] = set()
    doomed: set[str] = set()
    for node_id in present:
        if node_id in doomed:
            continue
        roots.add(node_id)
        doomed.add(node_id)
        doomed |= owned_ids(document, node_id)

    content = tuple(node for node in document.content if node.id not in roots)
    zones: _WorkingZones = {}
    for owner_id, named in document.zones.items():
        if owner_id in doomed:
            continue
        zones[owner_id] = {name: [node for node in nodes if node.id not in roots] for name, nodes in named.items()}

    logger.debug("remove_components: removed %d roots, %d nodes total", len(roots), len(doomed))
    return replace(document, content=content, zones=freeze_zones(zones))


def clone_subtree(
    document: Document,
    node: ComponentNode,
    id_generator: IdGenerator,
    zones_out: _WorkingZones,
) -> ComponentNode:
    """Deep-clone a node and every zone it owns under fresh ids.

    Zone names are kept verbatim; only the owner id changes. Cloned zones are
    written into zones_out keyed by the new owner ids.

    Args:
        document: Document the node and its zones are read from.
        node: Node to clone.
        id_generator: Source of fresh ids.
        zones_out: Receives the cloned zones.

    Returns:
        The cloned root node.
    """
    clone = node.with_id(id_generator.next_id())
    for name, children in document.zones.get(node.id, {}).items():
        cloned = [clone_subtree(document, child, id_generator, zones_out) for child in children]
        if cloned:
            zones_out.setdefault(clone.id, {})[name] = cloned
    return clone


def duplicate_components(document: Document, ids: Iterable[str], id_generator: IdGenerator) -> MutationResult:
    """Duplicate components in place, each clone right after its original.

    Selected ids are processed in document order. Clones are built from the
    source snapshot, so a parent's clone never contains clones made earlier in
    the same batch.

    Args:
        document: Source document.
        ids: Ids to duplicate; unknown ids are ignored.
        id_generator: Source of fresh ids.

    Returns:
        MutationResult whose new_ids lists each clone's root id in processing
        order.
    """
    selected = set(ids)
    if not selected:
        return MutationResult(document)

    order = in_document_order(document, selected)
    if not order:
        logger.debug("duplicate_components: none of %d ids found", len(selected))
        return MutationResult(document)

    id_generator.reserve(collect_ids(document, deep=True))
    locations = {node.id: (node, location) for node, location in iter_nodes(document)}

    content = list(document.content)
    zones = _working_zones(document)
    new_ids: list[str] = []

    for node_id in order:
        original, location = locations[node_id]
        if location.zone is None:
            container = content
        else:
            container = zones[location.zone.owner_id][location.zone.zone_name]

        cloned_zones: _WorkingZones = {}
        clone = clone_subtree(document, original, id_generator, cloned_zones)
        # Earlier clones may have shifted the original.
        index = next(i for i, node in enumerate(container) if node.id == node_id)
        container.insert(index + 1, clone)
        zones.update(cloned_zones)
        new_ids.append(clone.id)

    logger.debug("duplicate_components: created %d clones", len(new_ids))
    return MutationResult(
        replace(document, content=tuple(content), zones=freeze_zones(zones)),
        tuple(new_ids),
    )


def _serialize(document: Document, node: ComponentNode) -> SerializedComponent:
    return SerializedComponent(
        type=node.type,
        props=cp.deepcopy(node.props),
        slots={
            name: [_serialize(document, child) for child in children]
            for name, children in document.zones.get(node.id, {}).items()
        },
        original_id=node.id,
    )


def extract_components(document: Document, ids: Iterable[str]) -> list[SerializedComponent]:
    """Serialize components with everything they own.

    Output follows document order, not the iteration order of ids.

    Args:
        document: Source document (not modified).
        ids: Ids to extract; unknown ids are ignored.

    Returns:
        One SerializedComponent per found id.
    """
    order = in_document_order(document, ids)
    if not order:
        return []
    nodes = {node.id: node for node, _ in iter_nodes(document)}
    return [_serialize(document, nodes[node_id]) for node_id in order]


def _materialize(component: SerializedComponent, id_generator: IdGenerator, zones_out: _WorkingZones) -> ComponentNode:
    props = cp.deepcopy(component.props)
    props["id"] = id_generator.next_id()
    node = ComponentNode(type=component.type, props=props)
    for name, children in component.slots.items():
        nodes = [_materialize(child, id_generator, zones_out) for child in children]
        if nodes:
            zones_out.setdefault(node.id, {})[name] = nodes
    return node


def resolve_target_zone(target_zone: ZoneKey | str | None) -> ZoneKey | None:
    """Normalize a paste target; None means root content.

    Raises:
        ValueError: If a string target is neither "root" nor a zone key.
    """
    if target_zone is None or target_zone == ROOT_ZONE:
        return None
    if isinstance(target_zone, ZoneKey):
        return target_zone
    return ZoneKey.parse(target_zone)


def insertion_index(container: Sequence[ComponentNode], after_id: str | None) -> int:
    """Index just after after_id, or the end when it is absent."""
    if after_id is not None:
        for index, node in enumerate(container):
            if node.id == after_id:
                return index + 1
    return len(container)


def paste_components(
    document: Document,
    components: Iterable[SerializedComponent],
    id_generator: IdGenerator,
    target_zone: ZoneKey | str | None = None,
    after_id: str | None = None,
) -> MutationResult:
    """Insert a serialized forest under fresh ids.

    Every node, nested ones included, gets a new id and each slot becomes a
    zone owned by the new id. Empty slots are not created.

    Args:
        document: Destination document.
        components: Forest to paste.
        id_generator: Source of fresh ids.
        target_zone: Zone to insert into; None or "root" means root content.
        after_id: Insert right after this node when it is in the target
            container, else append.

    Returns:
        MutationResult with the pasted root ids. Unchanged document when the
        forest is empty or the target zone's owner does not exist.
    """
    forest = list(components)
    if not forest:
        return MutationResult(document)

    zone = resolve_target_zone(target_zone)
    if zone is not None and find_node(document, zone.owner_id) is None:
        logger.debug("paste_components: target zone owner %r not found", zone.owner_id)
        return MutationResult(document)

    id_generator.reserve(collect_ids(document, deep=True))
    new_zones: _WorkingZones = {}
    roots = [_materialize(component, id_generator, new_zones) for component in forest]

    zones: dict[str, dict[str, list[ComponentNode] | tuple[ComponentNode, ...]]] = {
        owner_id: dict(named) for owner_id, named in document.zones.items()
    }
    target = list(document.container(zone))
    at = insertion_index(target, after_id)
    target[at:at] = roots

    content = document.content
    if zone is None:
        content = tuple(target)
    else:
        zones.setdefault(zone.owner_id, {})[zone.zone_name] = target
    zones.update(new_zones)

    logger.debug("paste_components: pasted %d roots into %s", len(roots), zone or ROOT_ZONE)
    return MutationResult(
        replace(document, content=content, zones=freeze_zones(zones)),
        tuple(node.id for node in roots),
    )
