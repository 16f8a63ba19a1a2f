"""Per-type schema derivation and the process-wide schema cache."""

from __future__ import annotations

import inspect
import logging
import threading
from collections.abc import Iterator, Mapping
from dataclasses import replace
from types import MappingProxyType

from recordwire.base import RecordBase
from recordwire.exceptions import SchemaDerivationError
from recordwire.fields import (
    AnyField,
    FieldDescriptor,
    FragmentArrayField,
    FragmentField,
    FragmentStrategy,
    NestedField,
    ScalarField,
    ScalarKind,
)

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset(
    {"create", "deserialize", "serialize", "clone", "is_equal", "schema"}
)


class Schema(Mapping[str, AnyField]):
    """Read-only, ordered mapping of field name to keyed descriptor."""

    __slots__ = ("record_type", "descriptors", "_by_key")

    def __init__(self, record_type: type, descriptors: tuple[AnyField, ...]):
        self.record_type = record_type
        self.descriptors = descriptors
        self._by_key = MappingProxyType(
            {descriptor.key: descriptor for descriptor in descriptors}
        )

    def __getitem__(self, key: str) -> AnyField:
        return self._by_key[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)

    # Identity semantics: two schemas are only ever the same cached object.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __repr__(self) -> str:
        keys = ", ".join(self._by_key)
        return f"Schema({self.record_type.__qualname__}: {keys})"


def _declared_fields(record_type: type) -> dict[str, FieldDescriptor]:
    declared: dict[str, FieldDescriptor] = {}
    for klass in reversed(record_type.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, FieldDescriptor):
                declared[name] = value
            elif name in declared:
                del declared[name]
    return declared


def _fragment_strategy(nested_type: type) -> FragmentStrategy:
    if issubclass(nested_type, RecordBase):
        return FragmentStrategy.RECORD
    # Static lookup: a plain function here is an instance method, not a hook.
    hook = inspect.getattr_static(nested_type, "serialize", None)
    if isinstance(hook, (classmethod, staticmethod)):
        return FragmentStrategy.TYPE_LEVEL
    if callable(hook):
        return FragmentStrategy.INSTANCE
    return FragmentStrategy.NONE


def _checked(record_type: type, name: str, descriptor: FieldDescriptor) -> AnyField:
    if name in RESERVED_NAMES:
        raise SchemaDerivationError(record_type, f"field name {name!r} is reserved")
    keyed = descriptor.with_key(name)
    match keyed:
        case ScalarField(kind=ScalarKind.ENUM, enum_type=None):
            raise SchemaDerivationError(
                record_type, f"enum field {name!r} has no enum type"
            )
        case ScalarField(kind=kind) if not isinstance(kind, ScalarKind):
            raise SchemaDerivationError(
                record_type, f"field {name!r} has unsupported kind {kind!r}"
            )
        case ScalarField():
            return keyed
        case NestedField(nested_type=nested_type) if not callable(
            getattr(nested_type, "deserialize", None)
        ):
            raise SchemaDerivationError(
                record_type,
                f"nested type {nested_type!r} of field {name!r} cannot deserialize",
            )
        case FragmentField(nested_type=nested_type) | FragmentArrayField(
            nested_type=nested_type
        ):
            return replace(keyed, strategy=_fragment_strategy(nested_type))
        case _:
            raise SchemaDerivationError(
                record_type, f"field {name!r} uses unknown descriptor {type(keyed).__name__}"
            )


def derive_schema(record_type: type) -> Schema:
    """Build the schema of ``record_type`` from its declared descriptors.

    A representative is allocated without running ``__init__`` so no instance
    data is ever read; only the class structure is inspected.
    """
    if not isinstance(record_type, type):
        raise SchemaDerivationError(record_type, "not a class")
    try:
        representative = record_type.__new__(record_type)
    except Exception as exc:
        raise SchemaDerivationError(
            record_type, f"representative construction failed: {exc}"
        ) from exc
    declared = _declared_fields(type(representative))
    if not declared:
        raise SchemaDerivationError(record_type, "declares no fields")
    descriptors = tuple(
        _checked(record_type, name, descriptor) for name, descriptor in declared.items()
    )
    logger.debug(
        "derived schema for %s: %s",
        record_type.__qualname__,
        ", ".join(f"{d.key}:{d.kind_name}" for d in descriptors),
    )
    return Schema(record_type, descriptors)


class SchemaRegistry:
    """Cache of derived schemas keyed by exact record type.

    Derivation runs at most once per type even under concurrent first access;
    readers only ever see complete ``Schema`` objects.
    """

    def __init__(self) -> None:
        self._schemas: dict[type, Schema] = {}
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0

    def get_schema(self, record_type: type) -> Schema:
        schema = self._schemas.get(record_type)
        if schema is not None:
            self.hits += 1
            return schema
        with self._lock:
            schema = self._schemas.get(record_type)
            if schema is None:
                self.misses += 1
                schema = derive_schema(record_type)
                self._schemas[record_type] = schema
            else:
                self.hits += 1
            return schema

    def __contains__(self, record_type: object) -> bool:
        return record_type in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def clear(self) -> None:
        with self._lock:
            self._schemas.clear()
            self.hits = 0
            self.misses = 0


_DEFAULT_REGISTRY = SchemaRegistry()


def default_registry() -> SchemaRegistry:
    return _DEFAULT_REGISTRY


def get_schema(record_type: type) -> Schema:
    return _DEFAULT_REGISTRY.get_schema(record_type)
