"""Field descriptors: the declarative building blocks of a record schema.

A record type declares its fields as class attributes holding descriptors::

    class Address(Record):
        country = fields.string()
        postcode = fields.string()

    class Customer(Record):
        address = fields.fragment(Address)
        other_addresses = fields.fragment_array(Address, wire_key="addresses")

Descriptors are immutable. The declarer never names the field: ``key`` stays
``None`` until the schema registry copies the descriptor with the attribute
name filled in.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from enum import Enum
from typing import TypeAlias

from recordwire.invariants import never
from recordwire.predicates import MISSING, is_producer


class ScalarKind(str, Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    ARRAY = "array"
    ENUM = "enum"


class FragmentStrategy(str, Enum):
    """How a nested value is written back to the wire.

    Resolved once per descriptor when the owning schema is derived. ``RECORD``
    and ``INSTANCE`` call the value's own ``serialize``; ``TYPE_LEVEL`` calls
    ``nested_type.serialize(value, descriptor, options)``.
    """

    UNRESOLVED = "unresolved"
    RECORD = "record"
    INSTANCE = "instance"
    TYPE_LEVEL = "type_level"
    NONE = "none"


@dataclass(frozen=True, kw_only=True)
class FieldDescriptor:
    key: str | None = None
    wire_key: str | None = None
    include_on_write: bool = True
    default: object = MISSING

    @property
    def kind_name(self) -> str:
        never("kind_name on bare FieldDescriptor", descriptor=self)

    @property
    def effective_wire_key(self) -> str:
        name = self.wire_key or self.key
        if name is None:
            never("descriptor used before the registry assigned its key", descriptor=self)
        return name

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    def with_key(self, key: str) -> FieldDescriptor:
        return replace(self, key=key)

    def resolve_default(self) -> object:
        """Return the declared default, invoking it when it is a producer.

        Literal defaults are deep-copied so instances never share a mutable
        default. ``MISSING`` means no default was declared.
        """
        value = self.default
        if value is MISSING:
            return MISSING
        if is_producer(value):
            return value()
        return copy.deepcopy(value)


@dataclass(frozen=True, kw_only=True)
class ScalarField(FieldDescriptor):
    kind: ScalarKind
    enum_type: type[Enum] | None = None

    @property
    def kind_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, kw_only=True)
class NestedField(FieldDescriptor):
    nested_type: type
    strategy: FragmentStrategy = FragmentStrategy.UNRESOLVED


@dataclass(frozen=True, kw_only=True)
class FragmentField(NestedField):
    @property
    def kind_name(self) -> str:
        return "fragment"


@dataclass(frozen=True, kw_only=True)
class FragmentArrayField(NestedField):
    @property
    def kind_name(self) -> str:
        return "fragment_array"


AnyField: TypeAlias = ScalarField | FragmentField | FragmentArrayField


def number(
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> ScalarField:
    return ScalarField(
        kind=ScalarKind.NUMBER,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def boolean(
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> ScalarField:
    return ScalarField(
        kind=ScalarKind.BOOLEAN,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def string(
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> ScalarField:
    return ScalarField(
        kind=ScalarKind.STRING,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def array(
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> ScalarField:
    """Untyped pass-through sequence; use ``fragment_array`` for records."""
    return ScalarField(
        kind=ScalarKind.ARRAY,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def enum(
    enum_type: type[Enum],
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> ScalarField:
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeError(f"enum() expects an Enum subclass, got {enum_type!r}")
    return ScalarField(
        kind=ScalarKind.ENUM,
        enum_type=enum_type,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def fragment(
    nested_type: type,
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> FragmentField:
    if not isinstance(nested_type, type):
        raise TypeError(f"fragment() expects a type, got {nested_type!r}")
    return FragmentField(
        nested_type=nested_type,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )


def fragment_array(
    nested_type: type,
    *,
    default: object = MISSING,
    wire_key: str | None = None,
    include_on_write: bool = True,
) -> FragmentArrayField:
    if not isinstance(nested_type, type):
        raise TypeError(f"fragment_array() expects a type, got {nested_type!r}")
    return FragmentArrayField(
        nested_type=nested_type,
        default=default,
        wire_key=wire_key,
        include_on_write=include_on_write,
    )
