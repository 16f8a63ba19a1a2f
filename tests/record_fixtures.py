from __future__ import annotations

from enum import Enum

from recordwire import Record, fields


class Country(str, Enum):
    AUSTRALIA = "Australia"
    UNITED_KINGDOM = "UnitedKingdom"


class Address(Record):
    country = fields.string()
    postcode = fields.string()
    state = fields.string()
    street_address = fields.string()
    suburb = fields.string()


class Customer(Record):
    name = fields.string()
    address = fields.fragment(Address)
    other_addresses = fields.fragment_array(Address, wire_key="other_addresses")


class Reading(Record):
    label = fields.string()
    value = fields.number()
    valid = fields.boolean()
    samples = fields.array()
    country = fields.enum(Country)


class Profile(Record):
    nickname = fields.string(default="anon")
    age = fields.number()
    active = fields.boolean()
    tags = fields.array()
    country = fields.enum(Country)
    session_token = fields.string(include_on_write=False)


class LegacyPoint:
    """Nested type that only offers class-level serialization."""

    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y

    @classmethod
    def deserialize(cls, data):
        if not data:
            return None
        return cls(data["x"], data["y"])

    @classmethod
    def serialize(cls, value, descriptor, options):
        return {"x": value.x, "y": value.y, "field": descriptor.key}


class Pin(Record):
    label = fields.string()
    point = fields.fragment(LegacyPoint)


class Planet(Enum):
    EARTH = "Earth"
    MARS = "Mars"


class Visit(Record):
    traveller = fields.string()
    planet = fields.enum(Planet)


class Money:
    """Nested type that serializes itself through an instance method."""

    def __init__(self, cents: int):
        self.cents = cents

    @classmethod
    def deserialize(cls, data):
        if not data:
            return None
        return cls(data["cents"])

    def serialize(self):
        return {"cents": self.cents}


class Invoice(Record):
    number = fields.string()
    total = fields.fragment(Money)
    items = fields.fragment_array(Money)
