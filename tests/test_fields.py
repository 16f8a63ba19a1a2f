from __future__ import annotations

import dataclasses

import pytest

from recordwire import MISSING, NeverThrown, fields
from recordwire.fields import FragmentStrategy, ScalarKind
from recordwire.predicates import enum_has_value, is_empty, is_none, is_producer
from tests.record_fixtures import Address, Country


def test_declared_descriptors_have_no_key() -> None:
    descriptor = fields.string(wire_key="zip")
    assert descriptor.key is None
    assert descriptor.kind is ScalarKind.STRING
    assert descriptor.include_on_write is True
    assert descriptor.default is MISSING


def test_descriptors_are_immutable() -> None:
    descriptor = fields.number()
    with pytest.raises(dataclasses.FrozenInstanceError):
        descriptor.key = "value"  # type: ignore[misc]


def test_with_key_copies_and_wire_key_falls_back_to_key() -> None:
    descriptor = fields.string()
    keyed = descriptor.with_key("postcode")
    assert keyed is not descriptor
    assert descriptor.key is None
    assert keyed.effective_wire_key == "postcode"
    assert fields.string(wire_key="zip").with_key("postcode").effective_wire_key == "zip"


def test_unkeyed_descriptor_has_no_wire_key() -> None:
    with pytest.raises(NeverThrown):
        fields.string().effective_wire_key


def test_fragment_descriptors_start_unresolved() -> None:
    assert fields.fragment(Address).strategy is FragmentStrategy.UNRESOLVED
    assert fields.fragment_array(Address).kind_name == "fragment_array"


@pytest.mark.parametrize(
    "build",
    [
        lambda: fields.enum(str),
        lambda: fields.fragment("Address"),
        lambda: fields.fragment_array(None),
    ],
)
def test_helpers_reject_wrong_referenced_types(build) -> None:
    with pytest.raises(TypeError):
        build()


def test_resolve_default_invokes_producers() -> None:
    assert fields.array(default=list).resolve_default() == []
    assert fields.string().resolve_default() is MISSING
    blank = fields.fragment(Address, default=Address).resolve_default()
    assert isinstance(blank, Address)


def test_predicates() -> None:
    assert is_empty(None) and is_empty("") and is_empty(MISSING)
    assert not is_empty(0) and not is_empty(False) and not is_empty([])
    assert is_none(MISSING) and not is_none("")
    assert is_producer(lambda: 1) and is_producer(list)
    assert not is_producer(lambda value: value)
    assert not is_producer(Country)
    assert not is_producer("text")
    assert enum_has_value(Country, "Australia")
    assert enum_has_value(Country, Country.AUSTRALIA)
    assert not enum_has_value(Country, "Mars")
