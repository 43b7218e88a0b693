"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from zonetree import (
    ClipboardSource,
    ClipboardTransport,
    ClipboardUnavailableError,
    Document,
    EditorSettings,
    SequentialIdGenerator,
)


def text(node_id: str) -> dict:
    return {"type": "Text", "props": {"id": node_id, "text": node_id}}


class FakeClipboard:
    """In-memory SystemClipboard that can simulate a denied OS clipboard."""

    def __init__(self, text: str = "", available: bool = True):
        self.text = text
        self.available = available
        self.writes = 0

    def write_text(self, text: str) -> None:
        if not self.available:
            raise ClipboardUnavailableError("clipboard denied")
        self.writes += 1
        self.text = text

    def read_text(self) -> str:
        if not self.available:
            raise ClipboardUnavailableError("clipboard denied")
        return self.text


@pytest.fixture
def id_generator():
    """Deterministic generator yielding new-1, new-2, ..."""
    return SequentialIdGenerator(prefix="new")


@pytest.fixture
def flat_doc():
    """Four root Text components a, b, c, d and no zones."""
    return Document.from_dict({"content": [text(i) for i in "abcd"], "root": {"title": "Flat"}})


@pytest.fixture
def nested_doc():
    """Heading, Card and footer at the root; the card holds text and a two-column grid.

    content: heading-1, card-1, footer-1
    card-1:body   -> text-1, grid-1
    grid-1:col-0  -> text-2
    grid-1:col-1  -> image-1
    """
    return Document.from_dict(
        {
            "content": [
                {"type": "Heading", "props": {"id": "heading-1", "level": 1}},
                {"type": "Card", "props": {"id": "card-1", "style": {"padding": 8}}},
                text("footer-1"),
            ],
            "zones": {
                "card-1:body": [
                    text("text-1"),
                    {"type": "Grid", "props": {"id": "grid-1", "columns": 2}},
                ],
                "grid-1:col-0": [text("text-2")],
                "grid-1:col-1": [{"type": "Image", "props": {"id": "image-1", "src": "logo.png"}}],
            },
            "root": {"title": "Report"},
        }
    )


@pytest.fixture
def copied_at():
    return datetime(2026, 1, 1, tzinfo=UTC)


@pytest.fixture
def source():
    return ClipboardSource(template_id="tpl-1", page_id="page-1", page_name="Summary")


@pytest.fixture
def system_clipboard():
    return FakeClipboard()


@pytest.fixture
def transport(system_clipboard, copied_at):
    return ClipboardTransport(
        system=system_clipboard,
        settings=EditorSettings(use_system_clipboard=True),
        clock=lambda: copied_at,
    )
