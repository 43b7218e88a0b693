"""Keyboard shortcut orchestration.

Binds key events to the selection store, the pure tree mutations and the
clipboard transport, and forwards every new document to the host through a
single dispatch callable.

Usage:
    controller = ShortcutController(
        get_document=lambda: editor.document,
        dispatch=editor.dispatch,
        selection=SelectionStore(),
        clipboard=ClipboardTransport(),
        source=ClipboardSource(template_id="tpl-1", page_id="page-1"),
        notify=toast,
    )
    controller.handle_key(KeyEvent("c", ctrl=True))   # "1 component copied"
    controller.handle_key(KeyEvent("v", meta=True))   # pasted after the selection
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Collection
from dataclasses import dataclass
from enum import Enum

from zonetree.clipboard import ClipboardEnvelope, ClipboardSource, ClipboardTransport, filter_known_types
from zonetree.config import EditorSettings
from zonetree.core.document import Document
from zonetree.core.identity import IdGenerator, ZoneKey
from zonetree.core.tree import duplicate_components, in_document_order, locate, paste_components, remove_components
from zonetree.editor.actions import ActionType, HostAction
from zonetree.ids import create_id_generator
from zonetree.log import get_logger
from zonetree.selection import SelectAllStage, SelectionStore, resolve_select_all

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Host-neutral key press.

    Attributes:
        key: Key value as reported by the host ("c", "Delete", "Escape", ...).
        ctrl: Control held.
        meta: Command (meta) held.
        shift: Shift held.
        in_editable: Focus is inside a text input or editable element.
    """

    key: str
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    in_editable: bool = False

    @property
    def mod(self) -> bool:
        return self.ctrl or self.meta


class Shortcut(Enum):
    COPY = "copy"
    CUT = "cut"
    PASTE = "paste"
    SELECT_ALL = "select_all"
    DUPLICATE = "duplicate"
    DELETE = "delete"
    CLEAR_SELECTION = "clear_selection"


_MOD_BINDINGS = {
    "a": Shortcut.SELECT_ALL,
    "c": Shortcut.COPY,
    "x": Shortcut.CUT,
    "v": Shortcut.PASTE,
    "d": Shortcut.DUPLICATE,
}

_PLAIN_BINDINGS = {
    "Delete": Shortcut.DELETE,
    "Backspace": Shortcut.DELETE,
    "Escape": Shortcut.CLEAR_SELECTION,
}


def resolve_shortcut(event: KeyEvent) -> Shortcut | None:
    """Map a key event to a shortcut.

    Ctrl and Cmd are interchangeable. Nothing fires while focus is in an
    editable element.

    Returns:
        The bound Shortcut, or None.
    """
    if event.in_editable:
        return None
    if event.mod:
        return _MOD_BINDINGS.get(event.key.lower())
    return _PLAIN_BINDINGS.get(event.key)


def _components(count: int) -> str:
    return f"{count} component{'' if count == 1 else 's'}"


class ShortcutController:
    """Runs editor shortcuts against the host's current document.

    The controller never caches the document: every operation reads it through
    get_document() and hands the result to dispatch() as a SET_DATA action
    that records history.

    Args:
        get_document: Returns the host's current document.
        dispatch: Host action sink.
        selection: Selection store shared with the canvas.
        clipboard: Clipboard transport.
        source: Template and page stamped on copied envelopes.
        notify: Toast sink for user-facing messages.
        confirm: Asked before deleting more than the confirmation threshold;
            None always proceeds.
        known_types: Component kinds the destination can render; None accepts
            every type.
        settings: Editor settings (default: loaded from the environment).
        id_generator: Source of fresh ids (default: from settings).
    """

    def __init__(
        self,
        get_document: Callable[[], Document],
        dispatch: Callable[[HostAction], None],
        selection: SelectionStore,
        clipboard: ClipboardTransport,
        source: ClipboardSource,
        notify: Callable[[str], None] | None = None,
        confirm: Callable[[str], bool] | None = None,
        known_types: Collection[str] | None = None,
        settings: EditorSettings | None = None,
        id_generator: IdGenerator | None = None,
    ):
        self._get_document = get_document
        self._dispatch = dispatch
        self.selection = selection
        self.clipboard = clipboard
        self.source = source
        self._notify = notify
        self._confirm = confirm
        self.known_types = known_types
        self._settings = settings or EditorSettings()
        self._id_generator = id_generator or create_id_generator(self._settings)
        self._pending: set[asyncio.Task[None]] = set()

    def handle_key(self, event: KeyEvent) -> bool:
        """Run the operation bound to event.

        Returns:
            True when the event was bound to a shortcut (the host should
            prevent its default action).
        """
        shortcut = resolve_shortcut(event)
        if shortcut is None:
            return False
        logger.debug("Shortcut %s", shortcut.value)
        match shortcut:
            case Shortcut.COPY:
                self.copy()
            case Shortcut.CUT:
                self.cut()
            case Shortcut.PASTE:
                self.paste()
            case Shortcut.SELECT_ALL:
                self.select_all()
            case Shortcut.DUPLICATE:
                self.duplicate()
            case Shortcut.DELETE:
                self.delete()
            case Shortcut.CLEAR_SELECTION:
                self.clear_selection()
        return True

    def _toast(self, message: str) -> None:
        if self._notify is not None:
            self._notify(message)

    def _commit(self, document: Document) -> None:
        logger.debug("Dispatching new document (%d root components)", len(document.content))
        self._dispatch(HostAction(ActionType.SET_DATA, document, record_history=True))

    def copy(self) -> ClipboardEnvelope | None:
        """Copy the selection to the clipboard."""
        if not len(self.selection):
            return None
        envelope = self.clipboard.copy(self._get_document(), self.selection.selected_ids, self.source)
        if envelope is not None:
            self._toast(f"{_components(len(envelope.components))} copied")
        return envelope

    def cut(self) -> ClipboardEnvelope | None:
        """Copy the selection, remove it, and clear the selection."""
        if not len(self.selection):
            return None
        document = self._get_document()
        envelope, updated = self.clipboard.cut(document, self.selection.selected_ids, self.source)
        if envelope is None:
            return None
        if updated is not document:
            self._commit(updated)
        self.selection.clear_selection()
        self._toast(f"{_components(len(envelope.components))} cut")
        return envelope

    def paste(self) -> None:
        """Paste the clipboard after the current selection.

        The in-memory clipboard is pasted immediately. Otherwise the OS
        clipboard is read in the background: on the running event loop when
        there is one, else to completion before returning.
        """
        envelope = self.clipboard.envelope
        if envelope is not None:
            self._apply_paste(envelope)
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(self.paste_async())
            return
        task = loop.create_task(self.paste_async())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def wait_for_pending(self) -> None:
        """Wait until every paste scheduled by paste() has completed."""
        if self._pending:
            await asyncio.gather(*self._pending)

    async def paste_async(self) -> tuple[str, ...]:
        """Paste from the in-memory clipboard, falling back to the OS clipboard.

        The document and selection are read after the clipboard read
        completes, so edits made in the meantime are kept.

        Returns:
            Root ids of the pasted components (empty when nothing was pasted).
        """
        envelope = await self.clipboard.paste_source()
        if envelope is None:
            return ()
        return self._apply_paste(envelope)

    def _paste_target(self, document: Document) -> tuple[ZoneKey | None, str | None]:
        order = in_document_order(document, self.selection.selected_ids)
        if not order:
            return None, None
        location = locate(document, order[-1])
        if location is None:
            return None, None
        return location.zone, order[-1]

    def _apply_paste(self, envelope: ClipboardEnvelope) -> tuple[str, ...]:
        result = filter_known_types(envelope.serialized_components(), self.known_types)
        if result.unknown_types:
            count = len(result.unknown_types)
            self._toast(f"Warning: {count} unknown component type{'' if count == 1 else 's'} filtered out")
        if result.is_empty():
            self._toast("No valid components to paste")
            return ()

        document = self._get_document()
        target_zone, after_id = self._paste_target(document)
        mutation = paste_components(
            document,
            result.components,
            self._id_generator,
            target_zone=target_zone,
            after_id=after_id,
        )
        if not mutation.new_ids:
            return ()
        self._commit(mutation.document)
        self.selection.select_multiple(mutation.new_ids)
        self._toast(f"{_components(len(mutation.new_ids))} pasted")
        return mutation.new_ids

    def select_all(self) -> SelectAllStage:
        """Select root components, or everything when the roots are already selected."""
        stage, ids = resolve_select_all(self._get_document(), self.selection.selected_ids)
        self.selection.select_all(ids)
        return stage

    def duplicate(self) -> tuple[str, ...]:
        """Duplicate the selection in place and select the clones."""
        if not len(self.selection):
            return ()
        result = duplicate_components(self._get_document(), self.selection.selected_ids, self._id_generator)
        if not result.new_ids:
            return ()
        self._commit(result.document)
        self.selection.select_multiple(result.new_ids)
        self._toast(f"{_components(len(result.new_ids))} duplicated")
        return result.new_ids

    def delete(self) -> bool:
        """Delete the selection, asking for confirmation on large selections.

        Returns:
            False when no selected component is in the document or the user
            declined.
        """
        document = self._get_document()
        count = len(in_document_order(document, self.selection.selected_ids))
        if not count:
            return False
        if (
            count > self._settings.delete_confirmation_threshold
            and self._confirm is not None
            and not self._confirm(f"Delete {count} components?")
        ):
            logger.debug("Delete of %d components declined", count)
            return False

        updated = remove_components(document, self.selection.selected_ids)
        self._commit(updated)
        self.selection.clear_selection()
        self._toast(f"{_components(count)} deleted")
        return True

    def clear_selection(self) -> None:
        self.selection.clear_selection()
