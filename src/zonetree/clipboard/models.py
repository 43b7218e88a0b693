"""Clipboard envelope schema.

The envelope is the versioned, source-tagged JSON written to the OS clipboard
so components can travel between pages, templates and browser sessions. Text
read back from the OS clipboard is untrusted and validated against these
models before anything is pasted.

Wire shape:
    {
        "version": 1,
        "source": {"templateId": "...", "pageId": "...", "pageName": "..."},
        "components": [{"type": ..., "props": {...}, "slots": {...}, "originalId": ...}],
        "copiedAt": "2026-01-01T00:00:00+00:00"
    }
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from zonetree.core.document import SerializedComponent

CLIPBOARD_VERSION = 1


class InvalidClipboardEnvelope(ValueError):
    """Raised when clipboard text is not a valid version-1 envelope."""

    pass


class ClipboardSource(BaseModel):
    """Where the components were copied from."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    template_id: str = Field(alias="templateId")
    page_id: str = Field(alias="pageId")
    page_name: str = Field(default="", alias="pageName")


class SerializedComponentModel(BaseModel):
    """Wire form of a SerializedComponent."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    props: dict[str, Any] = Field(default_factory=dict)
    slots: dict[str, list[SerializedComponentModel]] = Field(default_factory=dict)
    original_id: str = Field(default="", alias="originalId")

    def to_component(self) -> SerializedComponent:
        return SerializedComponent(
            type=self.type,
            props=dict(self.props),
            slots={name: [child.to_component() for child in children] for name, children in self.slots.items()},
            original_id=self.original_id,
        )

    @classmethod
    def from_component(cls, component: SerializedComponent) -> SerializedComponentModel:
        return cls(
            type=component.type,
            props=component.props,
            slots={name: [cls.from_component(child) for child in children] for name, children in component.slots.items()},
            original_id=component.original_id,
        )


SerializedComponentModel.model_rebuild()


class ClipboardEnvelope(BaseModel):
    """Version-1 clipboard envelope."""

    model_config = ConfigDict(populate_by_name=True)

    version: Literal[1] = Field(default=CLIPBOARD_VERSION, strict=True)
    source: ClipboardSource
    components: list[SerializedComponentModel]
    copied_at: str = Field(default="", alias="copiedAt")

    @classmethod
    def create(
        cls,
        components: Iterable[SerializedComponent],
        source: ClipboardSource,
        copied_at: datetime,
    ) -> ClipboardEnvelope:
        """Wrap extracted components for the clipboard.

        Args:
            components: Output of extract_components().
            source: Template and page being copied from.
            copied_at: Copy time; stored as ISO-8601 text.
        """
        return cls(
            source=source,
            components=[SerializedComponentModel.from_component(component) for component in components],
            copied_at=copied_at.isoformat(),
        )

    def serialized_components(self) -> list[SerializedComponent]:
        """Components as engine values, ready for paste_components()."""
        return [component.to_component() for component in self.components]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


def parse_envelope(text: str) -> ClipboardEnvelope:
    """Validate clipboard text as an envelope.

    Args:
        text: Raw OS clipboard text.

    Returns:
        Parsed envelope.

    Raises:
        InvalidClipboardEnvelope: If the text is not JSON, has the wrong
            version, or does not match the schema.
    """
    try:
        return ClipboardEnvelope.model_validate_json(text)
    except ValidationError as e:
        raise InvalidClipboardEnvelope(f"Not a version-{CLIPBOARD_VERSION} clipboard envelope: {e.error_count()} error(s)") from e
