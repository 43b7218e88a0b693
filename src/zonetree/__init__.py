"""zonetree: component-tree mutations and clipboard for zone-based page builders.

Usage:
    from zonetree import Document, SequentialIdGenerator, duplicate_components

    doc = Document.from_dict({
        "content": [{"type": "Card", "props": {"id": "card-1"}}],
        "zones": {"card-1:body": [{"type": "Text", "props": {"id": "text-1"}}]},
    })
    result = duplicate_components(doc, {"card-1"}, SequentialIdGenerator())
    result.document.to_dict()   # card-1, its clone, and a cloned body zone
    result.new_ids              # ("node-1",)

    controller = ShortcutController(
        get_document=lambda: doc,
        dispatch=host.dispatch,
        selection=SelectionStore(),
        clipboard=ClipboardTransport(),
        source=ClipboardSource(template_id="tpl-1", page_id="page-1"),
    )
    controller.handle_key(KeyEvent("d", ctrl=True))
"""

__version__ = "0.1.0"

# Clipboard
from zonetree.clipboard import (
    ClipboardEnvelope,
    ClipboardSource,
    ClipboardTransport,
    ClipboardUnavailableError,
    FilterResult,
    InvalidClipboardEnvelope,
    PyperclipClipboard,
    SystemClipboard,
    clone_payload,
    collect_payload,
    filter_known_types,
    parse_envelope,
    paste_payload,
)

# Configuration
from zonetree.config import EditorSettings

# Core primitives
from zonetree.core import (
    ROOT_ZONE,
    ClipboardPayload,
    ComponentNode,
    Document,
    IdGenerator,
    Location,
    MalformedTreeError,
    MutationResult,
    SerializedComponent,
    ZoneKey,
    collect_ids,
    duplicate_components,
    extract_components,
    find_node,
    in_document_order,
    is_descendant_of,
    locate,
    paste_components,
    remove_components,
    validate_document,
    zones_owned_by,
)

# Editor
from zonetree.editor import ActionType, HostAction, KeyEvent, Shortcut, ShortcutController, resolve_shortcut

# Id generation
from zonetree.ids import SequentialIdGenerator, UuidIdGenerator, create_id_generator

# Logging
from zonetree.log import get_logger, setup_logging

# Selection
from zonetree.selection import (
    Marquee,
    SelectAllStage,
    Selection,
    SelectionMode,
    SelectionState,
    SelectionStore,
    resolve_select_all,
)

__all__ = [
    "__version__",
    # Core
    "ZoneKey",
    "ROOT_ZONE",
    "IdGenerator",
    "ComponentNode",
    "Document",
    "SerializedComponent",
    "ClipboardPayload",
    "MalformedTreeError",
    "validate_document",
    "Location",
    "locate",
    "find_node",
    "zones_owned_by",
    "collect_ids",
    "is_descendant_of",
    "in_document_order",
    "MutationResult",
    "remove_components",
    "duplicate_components",
    "extract_components",
    "paste_components",
    # Id generation
    "UuidIdGenerator",
    "SequentialIdGenerator",
    "create_id_generator",
    # Selection
    "SelectionStore",
    "Selection",
    "SelectionState",
    "SelectionMode",
    "SelectAllStage",
    "Marquee",
    "resolve_select_all",
    # Clipboard
    "ClipboardEnvelope",
    "ClipboardSource",
    "InvalidClipboardEnvelope",
    "parse_envelope",
    "SystemClipboard",
    "PyperclipClipboard",
    "ClipboardUnavailableError",
    "ClipboardTransport",
    "FilterResult",
    "filter_known_types",
    "collect_payload",
    "clone_payload",
    "paste_payload",
    # Editor
    "ActionType",
    "HostAction",
    "KeyEvent",
    "Shortcut",
    "ShortcutController",
    "resolve_shortcut",
    # Configuration
    "EditorSettings",
    # Logging
    "get_logger",
    "setup_logging",
]
