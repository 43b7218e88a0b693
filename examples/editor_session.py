"""Scripted editor session: a host page driven by keyboard shortcuts.

Run with ``python examples/editor_session.py``. The OS clipboard is disabled
so the script also runs headless.
"""

from zonetree import (
    ClipboardSource,
    ClipboardTransport,
    Document,
    EditorSettings,
    HostAction,
    KeyEvent,
    SelectionStore,
    ShortcutController,
    collect_ids,
    setup_logging,
)


class HostPage:
    """Minimal host editor: holds the document and an undo stack."""

    def __init__(self, document: Document):
        self.document = document
        self.undo: list[Document] = []

    def dispatch(self, action: HostAction) -> None:
        if action.record_history:
            self.undo.append(self.document)
        self.document = action.data


def main() -> None:
    settings = EditorSettings(use_system_clipboard=False, id_strategy="sequential", log_level="DEBUG")
    setup_logging(settings.log_level)

    page = HostPage(
        Document.from_dict(
            {
                "content": [
                    {"type": "Heading", "props": {"id": "title", "text": "Quarterly report"}},
                    {"type": "Card", "props": {"id": "summary"}},
                ],
                "zones": {"summary:body": [{"type": "Text", "props": {"id": "summary-text", "text": "Revenue up"}}]},
            }
        )
    )
    controller = ShortcutController(
        get_document=lambda: page.document,
        dispatch=page.dispatch,
        selection=SelectionStore(),
        clipboard=ClipboardTransport(settings=settings),
        source=ClipboardSource(template_id="quarterly", page_id="page-1", page_name="Summary"),
        notify=lambda message: print(f"[toast] {message}"),
        settings=settings,
    )

    controller.selection.select_one("summary")
    controller.handle_key(KeyEvent("d", ctrl=True))
    print(f"After duplicate: {collect_ids(page.document)}")

    controller.handle_key(KeyEvent("c", meta=True))
    controller.handle_key(KeyEvent("v", meta=True))
    print(f"After paste: {collect_ids(page.document)}")

    controller.handle_key(KeyEvent("a", ctrl=True))
    controller.handle_key(KeyEvent("a", ctrl=True))
    print(f"Selected after two select-alls: {len(controller.selection)}")

    controller.handle_key(KeyEvent("Delete"))
    print(f"After delete: {collect_ids(page.document)} ({len(page.undo)} undo steps)")


if __name__ == "__main__":
    main()
