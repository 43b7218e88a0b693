"""Clipboard transport: envelope schema, OS bridge, and same-session payloads.

Architecture Note:
    clipboard/ is stateful: ClipboardTransport owns the in-memory clipboard.
    Tree changes go through the pure functions in core.tree.
"""

from zonetree.clipboard.models import (
    CLIPBOARD_VERSION,
    ClipboardEnvelope,
    ClipboardSource,
    InvalidClipboardEnvelope,
    SerializedComponentModel,
    parse_envelope,
)
from zonetree.clipboard.payload import clone_payload, collect_payload, paste_insert_index, paste_payload
from zonetree.clipboard.system import ClipboardUnavailableError, PyperclipClipboard, SystemClipboard
from zonetree.clipboard.transport import ClipboardTransport, FilterResult, filter_known_types

__all__ = [
    # Envelope
    "CLIPBOARD_VERSION",
    "ClipboardEnvelope",
    "ClipboardSource",
    "SerializedComponentModel",
    "InvalidClipboardEnvelope",
    "parse_envelope",
    # OS bridge
    "SystemClipboard",
    "PyperclipClipboard",
    "ClipboardUnavailableError",
    # Transport
    "ClipboardTransport",
    "FilterResult",
    "filter_known_types",
    # Payload
    "collect_payload",
    "clone_payload",
    "paste_payload",
    "paste_insert_index",
]
