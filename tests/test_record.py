from __future__ import annotations

import pytest

from recordwire import Record, ValidationError, fields
from tests.record_fixtures import Address, Customer, Profile


def test_create_fills_every_field_with_defaults() -> None:
    profile = Profile.create({})
    assert profile.nickname == "anon"
    assert profile.age is None
    assert profile.active is False
    assert profile.tags == []
    assert profile.country is None
    assert profile.session_token == ""


def test_create_merges_initial_mapping_and_keyword_overrides() -> None:
    address = Address.create({"country": "AU", "postcode": "2000"}, postcode=3000)
    assert address.country == "AU"
    assert address.postcode == "3000"


def test_constructor_and_create_agree() -> None:
    assert Address(country="AU").is_equal(Address.create(country="AU"))


def test_producer_initial_values_are_invoked() -> None:
    address = Address.create(country=lambda: "AU")
    assert address.country == "AU"
    customer = Customer.create(address=Address)
    assert isinstance(customer.address, Address)


def test_fragment_array_defaults_without_coercion() -> None:
    class Book(Record):
        shelf = fields.fragment_array(Address, default=lambda: [Address(country="x")])
        others = fields.fragment_array(Address)

    book = Book.create()
    assert book.shelf[0].country == "x"
    assert book.others == []
    supplied = ("not", "coerced")
    assert Book(others=supplied).others is supplied


def test_unknown_initial_keys_are_rejected() -> None:
    with pytest.raises(TypeError, match="unexpected field"):
        Address.create(planet="Mars")


def test_create_validates_enum_values() -> None:
    with pytest.raises(ValidationError):
        Profile.create(country="Mars")


def test_repr_lists_fields_in_schema_order() -> None:
    assert repr(Address(country="AU")) == (
        "Address(country='AU', postcode='', state='', street_address='', suburb='')"
    )
