"""Clipboard transport: in-memory clipboard with OS clipboard bridging.

The in-memory envelope is authoritative. Every copy is mirrored to the OS
clipboard on a best-effort basis so another tab or template can paste it;
failures there never affect the in-memory copy.

Usage:
    transport = ClipboardTransport(system=PyperclipClipboard())
    envelope = transport.copy(doc, {"card-1"}, source)
    envelope = await transport.paste_source()   # memory first, then OS clipboard
    result = filter_known_types(envelope.serialized_components(), {"Card", "Text"})
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Collection, Iterable
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from zonetree.clipboard.models import (
    ClipboardEnvelope,
    ClipboardSource,
    InvalidClipboardEnvelope,
    parse_envelope,
)
from zonetree.clipboard.system import ClipboardUnavailableError, PyperclipClipboard, SystemClipboard
from zonetree.config import EditorSettings
from zonetree.core.document import Document, SerializedComponent
from zonetree.core.tree import extract_components, remove_components
from zonetree.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FilterResult:
    """Outcome of cross-document type validation.

    Attributes:
        components: Forest with unknown-type nodes (and their subtrees) removed.
        unknown_types: Distinct component types that were filtered out.
        dropped: Number of nodes removed, nested ones included.
    """

    components: list[SerializedComponent]
    unknown_types: frozenset[str] = frozenset()
    dropped: int = 0

    def is_empty(self) -> bool:
        return not self.components


def filter_known_types(
    components: Iterable[SerializedComponent],
    known_types: Collection[str] | None,
) -> FilterResult:
    """Drop nodes whose type the destination does not know.

    Args:
        components: Forest to filter.
        known_types: Component kinds registered in the destination; None
            disables filtering.

    Returns:
        FilterResult with the remaining forest.
    """
    forest = list(components)
    if known_types is None:
        return FilterResult(forest)

    unknown: set[str] = set()
    dropped = 0

    def _keep(component: SerializedComponent) -> SerializedComponent | None:
        nonlocal dropped
        if component.type not in known_types:
            unknown.add(component.type)
            dropped += sum(1 for _ in component.walk())
            return None
        slots: dict[str, list[SerializedComponent]] = {}
        for name, children in component.slots.items():
            slots[name] = [kept for child in children if (kept := _keep(child)) is not None]
        return replace(component, slots=slots)

    kept = [result for component in forest if (result := _keep(component)) is not None]
    return FilterResult(kept, frozenset(unknown), dropped)


class ClipboardTransport:
    """Holds the in-memory clipboard and bridges it to the OS clipboard.

    Args:
        system: OS clipboard implementation. Defaults to PyperclipClipboard
            when settings.use_system_clipboard is set.
        settings: Editor settings; defaults are loaded from the environment.
        clock: Source of the copy timestamp (default: current UTC time).
    """

    def __init__(
        self,
        system: SystemClipboard | None = None,
        settings: EditorSettings | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self._settings = settings or EditorSettings()
        if not self._settings.use_system_clipboard:
            system = None
        elif system is None:
            system = PyperclipClipboard()
        self._system = system
        self._clock = clock or (lambda: datetime.now(UTC))
        self._envelope: ClipboardEnvelope | None = None

    @property
    def envelope(self) -> ClipboardEnvelope | None:
        return self._envelope

    @property
    def has_clipboard(self) -> bool:
        return self._envelope is not None

    def store(self, envelope: ClipboardEnvelope) -> None:
        """Replace the in-memory clipboard."""
        self._envelope = envelope

    def clear(self) -> None:
        self._envelope = None

    def copy(self, document: Document, ids: Iterable[str], source: ClipboardSource) -> ClipboardEnvelope | None:
        """Serialize the selection into the clipboard.

        Args:
            document: Current document.
            ids: Selected ids.
            source: Template and page being copied from.

        Returns:
            The stored envelope, or None when nothing in ids was found (the
            clipboard is left untouched).
        """
        components = extract_components(document, ids)
        if not components:
            return None
        envelope = ClipboardEnvelope.create(components, source, self._clock())
        self._envelope = envelope
        self._write_system(envelope.to_json())
        return envelope

    def cut(
        self, document: Document, ids: Iterable[str], source: ClipboardSource
    ) -> tuple[ClipboardEnvelope | None, Document]:
        """Copy the selection, then remove it.

        Returns:
            (envelope, new document). When nothing was copied the document is
            returned unchanged.
        """
        ids = set(ids)
        envelope = self.copy(document, ids, source)
        if envelope is None:
            return None, document
        return envelope, remove_components(document, ids)

    def _write_system(self, text: str) -> None:
        if self._system is None:
            return
        try:
            self._system.write_text(text)
        except (ClipboardUnavailableError, OSError) as e:
            logger.debug("OS clipboard write failed, keeping in-memory copy only: %s", e)

    async def read_system(self) -> ClipboardEnvelope | None:
        """Read and validate the OS clipboard.

        Returns:
            Envelope, or None when the OS clipboard is unavailable or holds
            anything other than a valid version-1 envelope.
        """
        if self._system is None:
            return None
        try:
            text = await asyncio.to_thread(self._system.read_text)
        except (ClipboardUnavailableError, OSError) as e:
            logger.debug("OS clipboard read failed: %s", e)
            return None
        try:
            return parse_envelope(text)
        except InvalidClipboardEnvelope as e:
            logger.debug("Ignoring OS clipboard content: %s", e)
            return None

    async def paste_source(self) -> ClipboardEnvelope | None:
        """Envelope to paste: in-memory first, OS clipboard second."""
        if self._envelope is not None:
            return self._envelope
        return await self.read_system()
