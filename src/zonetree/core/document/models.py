"""Document data models.

A Document is a root content list plus a side-table of zones. Zones are stored
as an adjacency mapping ``owner_id -> zone_name -> nodes`` rather than under
string keys, so ownership never depends on parsing or prefix matching.

Usage:
    doc = Document.from_dict({
        "content": [{"type": "Card", "props": {"id": "card-1"}}],
        "zones": {"card-1:body": [{"type": "Text", "props": {"id": "text-1"}}]},
    })
    doc.zone(ZoneKey("card-1", "body"))  # (ComponentNode(type="Text", ...),)
    doc.to_dict()                         # back to the host wire shape
"""

from __future__ import annotations

import copy as cp
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from zonetree.core.identity import ZoneKey

ZoneMap: TypeAlias = "dict[str, dict[str, tuple[ComponentNode, ...]]]"


class MalformedTreeError(ValueError):
    """Raised when a document violates the tree invariants.

    Only programmer errors surface this way: data from the OS clipboard or from
    another template is validated and discarded instead.
    """

    pass


@dataclass(frozen=True, slots=True)
class ComponentNode:
    """One placed component. ``props["id"]`` is its identity."""

    type: str
    props: dict[str, Any]

    @property
    def id(self) -> str:
        return self.props["id"]

    def with_id(self, new_id: str) -> ComponentNode:
        """Deep copy of this node carrying a different id.

        The id keeps its position among the props keys.
        """
        props = cp.deepcopy(self.props)
        props["id"] = new_id
        return ComponentNode(type=self.type, props=props)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "props": cp.deepcopy(self.props)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ComponentNode:
        """Build a node from ``{"type": ..., "props": {...}}``.

        Raises:
            MalformedTreeError: If type or props.id is missing or not a string.
        """
        node_type = data.get("type")
        props = data.get("props")
        if not isinstance(node_type, str) or not isinstance(props, Mapping):
            raise MalformedTreeError(f"Component must have a string type and props mapping: {data!r}")
        node_id = props.get("id")
        if not isinstance(node_id, str) or not node_id:
            raise MalformedTreeError(f"Component of type {node_type!r} has no string props.id")
        return cls(type=node_type, props=cp.deepcopy(dict(props)))


def freeze_zones(zones: Mapping[str, Mapping[str, Sequence[ComponentNode]]]) -> ZoneMap:
    """Copy a zone mapping into tuple form, dropping empty zones and owners."""
    frozen: ZoneMap = {}
    for owner_id, named in zones.items():
        kept = {name: tuple(nodes) for name, nodes in named.items() if nodes}
        if kept:
            frozen[owner_id] = kept
    return frozen


@dataclass(frozen=True, slots=True)
class Document:
    """Immutable snapshot of one page's component tree.

    Attributes:
        content: Root-level components in order.
        zones: owner id -> zone name -> components in that zone.
        root: Page-level props owned by the host; carried through untouched.
    """

    content: tuple[ComponentNode, ...] = ()
    zones: ZoneMap = field(default_factory=dict)
    root: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))
        object.__setattr__(
            self,
            "zones",
            {
                owner_id: {name: tuple(nodes) for name, nodes in named.items()}
                for owner_id, named in self.zones.items()
            },
        )

    @classmethod
    def empty(cls) -> Document:
        return cls()

    def zone(self, key: ZoneKey) -> tuple[ComponentNode, ...]:
        """Nodes in one zone; empty when the zone does not exist."""
        return self.zones.get(key.owner_id, {}).get(key.zone_name, ())

    def has_zone(self, key: ZoneKey) -> bool:
        return key.zone_name in self.zones.get(key.owner_id, {})

    def zone_keys(self) -> Iterator[ZoneKey]:
        for owner_id, named in self.zones.items():
            for name in named:
                yield ZoneKey(owner_id, name)

    def container(self, zone: ZoneKey | None) -> tuple[ComponentNode, ...]:
        """Root content when zone is None, else the zone's nodes."""
        return self.content if zone is None else self.zone(zone)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the host wire shape with ``"owner:zone"`` keys."""
        return {
            "content": [node.to_dict() for node in self.content],
            "zones": {str(key): [node.to_dict() for node in self.zone(key)] for key in self.zone_keys()},
            "root": cp.deepcopy(self.root),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], validate: bool = True) -> Document:
        """Build a document from the host wire shape.

        Empty zone lists are accepted on input (hosts keep them for empty drop
        targets); every mutation prunes them.

        Args:
            data: ``{"content": [...], "zones": {"owner:zone": [...]}, "root": {...}}``.
            validate: Check the tree invariants after parsing.

        Raises:
            MalformedTreeError: On unparseable zone keys, bad nodes, or (when
                validate is set) invariant violations.
        """
        content = tuple(ComponentNode.from_dict(item) for item in data.get("content") or ())
        zones: ZoneMap = {}
        for raw_key, items in (data.get("zones") or {}).items():
            try:
                key = ZoneKey.parse(raw_key)
            except ValueError as e:
                raise MalformedTreeError(str(e)) from e
            zones.setdefault(key.owner_id, {})[key.zone_name] = tuple(
                ComponentNode.from_dict(item) for item in items
            )
        document = cls(content=content, zones=zones, root=cp.deepcopy(dict(data.get("root") or {})))
        if validate:
            from zonetree.core.document.validation import validate_document

            validate_document(document)
        return document


@dataclass(slots=True)
class SerializedComponent:
    """Self-contained recursive copy of a node and everything it owns.

    Attributes:
        type: Component kind.
        props: Props copied verbatim (including the source id).
        slots: zone name -> serialized children of that zone.
        original_id: Source id, kept for diagnostics and never reused on paste.
    """

    type: str
    props: dict[str, Any]
    slots: dict[str, list[SerializedComponent]] = field(default_factory=dict)
    original_id: str = ""

    def walk(self) -> Iterator[SerializedComponent]:
        """Yield this component and every nested one, pre-order."""
        yield self
        for children in self.slots.values():
            for child in children:
                yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "props": cp.deepcopy(self.props),
            "slots": {name: [child.to_dict() for child in children] for name, children in self.slots.items()},
            "originalId": self.original_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SerializedComponent:
        return cls(
            type=data["type"],
            props=cp.deepcopy(dict(data.get("props") or {})),
            slots={
                name: [cls.from_dict(child) for child in children]
                for name, children in (data.get("slots") or {}).items()
            },
            original_id=data.get("originalId", ""),
        )


@dataclass(frozen=True, slots=True)
class ClipboardPayload:
    """Flat same-session clipboard: copied items plus every zone they own."""

    items: tuple[ComponentNode, ...] = ()
    zones: ZoneMap = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.items
