"""Document data model and invariant checks."""

from zonetree.core.document.models import (
    ClipboardPayload,
    ComponentNode,
    Document,
    MalformedTreeError,
    SerializedComponent,
    ZoneMap,
    freeze_zones,
)
from zonetree.core.document.validation import validate_document

__all__ = [
    "ComponentNode",
    "Document",
    "SerializedComponent",
    "ClipboardPayload",
    "ZoneMap",
    "MalformedTreeError",
    "freeze_zones",
    "validate_document",
]
