"""Tests for document models and validation.

Critical Invariants:
- Wire form round-trips through from_dict()/to_dict()
- Malformed trees are rejected with MalformedTreeError
- Documents are immutable snapshots
"""

import dataclasses

import pytest

from zonetree.core.document import (
    ComponentNode,
    Document,
    MalformedTreeError,
    SerializedComponent,
    freeze_zones,
    validate_document,
)
from zonetree.core.identity import ZoneKey


def node(node_id, type_="Text"):
    return {"type": type_, "props": {"id": node_id}}


def test_round_trip_wire_form(nested_doc):
    data = nested_doc.to_dict()
    assert Document.from_dict(data) == nested_doc
    assert set(data["zones"]) == {"card-1:body", "grid-1:col-0", "grid-1:col-1"}
    assert data["root"] == {"title": "Report"}


def test_zone_lookup(nested_doc):
    assert [n.id for n in nested_doc.zone(ZoneKey("card-1", "body"))] == ["text-1", "grid-1"]
    assert nested_doc.zone(ZoneKey("card-1", "missing")) == ()
    assert nested_doc.has_zone(ZoneKey("grid-1", "col-1"))
    assert not nested_doc.has_zone(ZoneKey("text-1", "body"))


def test_container_none_is_root_content(nested_doc):
    assert nested_doc.container(None) is nested_doc.content


def test_document_is_frozen(nested_doc):
    with pytest.raises(dataclasses.FrozenInstanceError):
        nested_doc.content = ()  # type: ignore[misc]


def test_empty_document():
    doc = Document.empty()
    assert doc.content == ()
    assert doc.zones == {}
    assert doc.to_dict() == {"content": [], "zones": {}, "root": {}}


def test_from_dict_accepts_empty_zones():
    """Hosts keep empty zones around as drop targets."""
    doc = Document.from_dict({"content": [node("card-1", "Card")], "zones": {"card-1:body": []}})
    assert doc.has_zone(ZoneKey("card-1", "body"))
    with pytest.raises(MalformedTreeError, match="Empty zones"):
        validate_document(doc, allow_empty_zones=False)


def test_from_dict_copies_props():
    props = {"id": "a", "style": {"color": "red"}}
    doc = Document.from_dict({"content": [{"type": "Text", "props": props}]})
    props["style"]["color"] = "blue"
    assert doc.content[0].props["style"] == {"color": "red"}


def test_rejects_duplicate_ids():
    with pytest.raises(MalformedTreeError, match="Duplicate"):
        Document.from_dict({"content": [node("a")], "zones": {"a:body": [node("a")]}})


def test_rejects_orphan_zone():
    with pytest.raises(MalformedTreeError, match="missing components"):
        Document.from_dict({"content": [node("a")], "zones": {"ghost:body": [node("b")]}})


def test_rejects_cycle():
    """Two nodes owning each other are not reachable from root content."""
    with pytest.raises(MalformedTreeError, match="not reachable"):
        Document.from_dict(
            {
                "content": [node("a")],
                "zones": {"b:body": [node("c")], "c:body": [node("b")]},
            }
        )


def test_rejects_bad_zone_key():
    with pytest.raises(MalformedTreeError):
        Document.from_dict({"content": [node("a")], "zones": {"nokey": []}})


@pytest.mark.parametrize(
    "data",
    [
        {"props": {"id": "a"}},
        {"type": "Text"},
        {"type": "Text", "props": {}},
        {"type": "Text", "props": {"id": 3}},
        {"type": "Text", "props": {"id": ""}},
    ],
)
def test_component_node_requires_type_and_id(data):
    with pytest.raises(MalformedTreeError):
        ComponentNode.from_dict(data)


def test_validation_can_be_skipped():
    doc = Document.from_dict({"content": [node("a"), node("a")]}, validate=False)
    assert len(doc.content) == 2


def test_with_id_deep_copies_props():
    original = ComponentNode("Card", {"id": "card-1", "style": {"padding": 8}})
    clone = original.with_id("card-2")
    assert clone.id == "card-2"
    assert list(clone.props) == ["id", "style"]
    clone.props["style"]["padding"] = 0
    assert original.props["style"]["padding"] == 8


def test_freeze_zones_drops_empty_zones_and_owners():
    a = ComponentNode("Text", {"id": "a"})
    frozen = freeze_zones({"x": {"body": [a], "side": []}, "y": {"body": []}})
    assert frozen == {"x": {"body": (a,)}}


def test_serialized_component_walk_and_wire_form():
    component = SerializedComponent(
        type="Card",
        props={"id": "card-1"},
        slots={"body": [SerializedComponent(type="Text", props={"id": "text-1"}, original_id="text-1")]},
        original_id="card-1",
    )
    assert [c.type for c in component.walk()] == ["Card", "Text"]
    data = component.to_dict()
    assert data["originalId"] == "card-1"
    assert SerializedComponent.from_dict(data) == component
