"""Tests for zone keys.

Critical Invariants:
- The wire form round-trips through parse()
- Parsing splits on the first separator only
- Malformed keys raise ValueError
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zonetree.core.identity import ROOT_ZONE, ZONE_SEPARATOR, IdGenerator, ZoneKey
from zonetree.ids import SequentialIdGenerator, UuidIdGenerator


def test_str_uses_separator():
    assert str(ZoneKey("card-1", "body")) == "card-1:body"


def test_parse_splits_on_first_separator():
    """Zone names may contain the separator; owner ids may not."""
    key = ZoneKey.parse("grid-1:col:0")
    assert key.owner_id == "grid-1"
    assert key.zone_name == "col:0"


@pytest.mark.parametrize("text", ["no-separator", ":body", ""])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        ZoneKey.parse(text)


def test_with_owner_keeps_zone_name():
    key = ZoneKey("card-1", "body").with_owner("card-2")
    assert key == ZoneKey("card-2", "body")


def test_keys_are_hashable_values():
    assert {ZoneKey("a", "x"), ZoneKey("a", "x")} == {ZoneKey("a", "x")}


def test_root_zone_is_not_a_zone_key():
    with pytest.raises(ValueError):
        ZoneKey.parse(ROOT_ZONE)


@given(
    owner=st.text(min_size=1).filter(lambda s: ZONE_SEPARATOR not in s),
    zone=st.text(),
)
def test_parse_round_trips(owner, zone):
    key = ZoneKey(owner, zone)
    assert ZoneKey.parse(str(key)) == key


def test_generators_satisfy_protocol():
    assert isinstance(SequentialIdGenerator(), IdGenerator)
    assert isinstance(UuidIdGenerator(), IdGenerator)
