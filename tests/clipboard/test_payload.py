"""Tests for the same-session flat clipboard payload."""

from zonetree.clipboard import clone_payload, collect_payload, paste_insert_index, paste_payload
from zonetree.core.document import ClipboardPayload, Document, validate_document
from zonetree.core.identity import ZoneKey
from zonetree.core.tree import collect_ids, owned_ids


def test_collect_includes_transitive_zones(nested_doc):
    payload = collect_payload(nested_doc, {"footer-1", "card-1"})
    assert [item.id for item in payload.items] == ["card-1", "footer-1"]
    assert set(payload.zones) == {"card-1", "grid-1"}


def test_collect_nothing(nested_doc):
    assert collect_payload(nested_doc, {"missing"}).is_empty()


def test_clone_rekeys_zones(nested_doc, id_generator):
    payload = collect_payload(nested_doc, {"grid-1"})
    cloned = clone_payload(payload, id_generator)

    assert [item.id for item in cloned.items] == ["new-1"]
    assert cloned.zones == {
        "new-1": {
            "col-0": (payload.zones["grid-1"]["col-0"][0].with_id("new-2"),),
            "col-1": (payload.zones["grid-1"]["col-1"][0].with_id("new-3"),),
        }
    }


def test_paste_inserts_after_index(nested_doc, id_generator):
    payload = collect_payload(nested_doc, {"grid-1"})
    result = paste_payload(nested_doc, payload, id_generator, insert_after_index=0)

    assert collect_ids(result.document) == ["heading-1", "new-1", "card-1", "footer-1"]
    assert result.new_ids == ("new-1",)
    assert owned_ids(result.document, "new-1") == {"new-2", "new-3"}
    assert result.document.has_zone(ZoneKey("grid-1", "col-0")), "Source zones are kept"
    validate_document(result.document, allow_empty_zones=False)


def test_paste_index_is_clamped(flat_doc, id_generator):
    payload = collect_payload(flat_doc, {"a"})
    assert collect_ids(paste_payload(flat_doc, payload, id_generator, 99).document)[-1] == "new-1"
    assert collect_ids(paste_payload(flat_doc, payload, id_generator, -5).document)[0] == "new-2"


def test_paste_empty_payload_is_noop(flat_doc, id_generator):
    result = paste_payload(flat_doc, ClipboardPayload(), id_generator, 0)
    assert result.document is flat_doc


def test_paste_insert_index(nested_doc):
    assert paste_insert_index(nested_doc, {"heading-1", "card-1"}) == 1
    assert paste_insert_index(nested_doc, {"text-1"}) == 2
    assert paste_insert_index(nested_doc, set()) == 2
    assert paste_insert_index(Document(), set()) == -1
