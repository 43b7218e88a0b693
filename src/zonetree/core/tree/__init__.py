"""Tree queries and pure mutations."""

from zonetree.core.tree.locator import (
    Location,
    collect_ids,
    find_node,
    in_document_order,
    is_descendant_of,
    iter_nodes,
    locate,
    owned_ids,
    zones_owned_by,
)
from zonetree.core.tree.mutation import (
    MutationResult,
    clone_subtree,
    duplicate_components,
    extract_components,
    insertion_index,
    paste_components,
    remove_components,
    resolve_target_zone,
)

__all__ = [
    # Locator
    "Location",
    "locate",
    "find_node",
    "iter_nodes",
    "zones_owned_by",
    "collect_ids",
    "owned_ids",
    "is_descendant_of",
    "in_document_order",
    # Mutation
    "MutationResult",
    "remove_components",
    "duplicate_components",
    "extract_components",
    "paste_components",
    "clone_subtree",
    "insertion_index",
    "resolve_target_zone",
]
