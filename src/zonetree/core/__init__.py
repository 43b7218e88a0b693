"""Core functionalities: stateless primitives and pure tree operations.

Architecture Note:
    core/ holds immutable values and pure functions only. Nothing here keeps
    state between calls; id generation is injected through the IdGenerator
    protocol. For stateful services, see ids/, selection/, clipboard/ and
    editor/.
"""

from zonetree.core.document import (
    ClipboardPayload,
    ComponentNode,
    Document,
    MalformedTreeError,
    SerializedComponent,
    validate_document,
)
from zonetree.core.identity import ROOT_ZONE, IdGenerator, ZoneKey
from zonetree.core.tree import (
    Location,
    MutationResult,
    collect_ids,
    duplicate_components,
    extract_components,
    find_node,
    in_document_order,
    is_descendant_of,
    iter_nodes,
    locate,
    owned_ids,
    paste_components,
    remove_components,
    zones_owned_by,
)

__all__ = [
    # Identity
    "ZoneKey",
    "ROOT_ZONE",
    "IdGenerator",
    # Document
    "ComponentNode",
    "Document",
    "SerializedComponent",
    "ClipboardPayload",
    "MalformedTreeError",
    "validate_document",
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
]
