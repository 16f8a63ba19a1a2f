"""Recursive deserialize/serialize over a record type's schema."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

from recordwire.base import RecordBase
from recordwire.coercion import coerce
from recordwire.diagnostics import SerializationAnomaly
from recordwire.exceptions import ParseError
from recordwire.fields import (
    AnyField,
    FragmentArrayField,
    FragmentField,
    FragmentStrategy,
)
from recordwire.json_io import parse_json_text
from recordwire.json_types import JSONObject, WireInput
from recordwire.options import MarshalOptions, resolve_options
from recordwire.predicates import MISSING, is_empty, is_none, is_producer
from recordwire.registry import get_schema

RecordT = TypeVar("RecordT", bound=RecordBase)


def populate(
    instance: RecordBase,
    initial: Mapping[str, object] | None = None,
    *,
    strict: bool | None = None,
) -> None:
    """Assign every schema field of ``instance`` from ``initial`` or defaults."""
    record_type = type(instance)
    schema = get_schema(record_type)
    values = dict(initial or {})
    unknown = [key for key in values if key not in schema]
    if unknown:
        raise TypeError(
            f"{record_type.__qualname__} got unexpected field(s): {', '.join(unknown)}"
        )
    for descriptor in schema.descriptors:
        supplied = values.get(descriptor.key, MISSING)
        if is_producer(supplied):
            supplied = supplied()
        match descriptor:
            case FragmentArrayField():
                if is_none(supplied):
                    default = descriptor.resolve_default()
                    supplied = [] if default is MISSING else default
            case _:
                supplied = coerce(descriptor, supplied, strict=strict)
        setattr(instance, descriptor.key, supplied)


def create_record(
    record_type: type[RecordT],
    initial: Mapping[str, object] | None = None,
    *,
    strict: bool | None = None,
) -> RecordT:
    instance = record_type.__new__(record_type)
    populate(instance, initial, strict=strict)
    return instance


def _wire_tree(record_type: type, data: WireInput) -> Mapping[str, object] | None:
    if isinstance(data, (str, bytes, bytearray)):
        parsed = parse_json_text(data, source=record_type.__qualname__)
    else:
        # Detach from the caller's tree; nothing below may write into it.
        parsed = copy.deepcopy(data)
    if parsed is None:
        return None
    if not isinstance(parsed, Mapping):
        raise ParseError(
            f"{record_type.__qualname__} expects a JSON object, "
            f"got {type(parsed).__name__}",
            record_type=record_type,
        )
    return parsed


def _read_wire_value(tree: Mapping[str, object], descriptor: AnyField) -> object:
    value = tree.get(descriptor.effective_wire_key, MISSING)
    if value is MISSING:
        value = tree.get(descriptor.key, MISSING)
    return value


def _deserialize_nested(nested_type: type, raw: object, options: MarshalOptions) -> object:
    if is_empty(raw):
        return None
    if issubclass(nested_type, RecordBase):
        return nested_type.deserialize(raw, options=options)
    return nested_type.deserialize(raw)


def deserialize_record(
    record_type: type[RecordT],
    data: WireInput,
    options: MarshalOptions | None = None,
) -> RecordT | None:
    options = resolve_options(options)
    schema = get_schema(record_type)
    tree = _wire_tree(record_type, data)
    if tree is None:
        return None
    tree = options.case.to_internal(tree)
    values: dict[str, object] = {}
    for descriptor in schema.descriptors:
        raw = _read_wire_value(tree, descriptor)
        match descriptor:
            case FragmentField(nested_type=nested_type):
                values[descriptor.key] = _deserialize_nested(nested_type, raw, options)
            case FragmentArrayField(nested_type=nested_type):
                if isinstance(raw, (list, tuple)):
                    values[descriptor.key] = [
                        _deserialize_nested(nested_type, item, options) for item in raw
                    ]
                else:
                    values[descriptor.key] = []
            case _:
                values[descriptor.key] = raw
    return create_record(record_type, values, strict=options.resolved_strict_enums())


def _report(
    options: MarshalOptions,
    record: RecordBase,
    descriptor: AnyField,
    value: object,
    reason: str,
) -> None:
    options.diagnostics.report(
        SerializationAnomaly(
            field=str(descriptor.key),
            owner=type(record).__qualname__,
            value=value,
            reason=reason,
        )
    )


def _serialize_nested(
    record: RecordBase,
    descriptor: FragmentField | FragmentArrayField,
    value: object,
    options: MarshalOptions,
    reason: str,
) -> object:
    if isinstance(value, RecordBase):
        return value.serialize(options)
    match descriptor.strategy:
        case FragmentStrategy.INSTANCE if isinstance(value, descriptor.nested_type):
            return value.serialize()
        case FragmentStrategy.TYPE_LEVEL:
            return descriptor.nested_type.serialize(value, descriptor, options)
    _report(options, record, descriptor, value, reason)
    return None


def _serialize_fragment(
    record: RecordBase,
    descriptor: FragmentField,
    value: object,
    options: MarshalOptions,
) -> object:
    if is_none(value):
        return None
    return _serialize_nested(
        record, descriptor, value, options, "value does not support serialization"
    )


def _serialize_fragment_array(
    record: RecordBase,
    descriptor: FragmentArrayField,
    value: object,
    options: MarshalOptions,
) -> list[object]:
    if not isinstance(value, (list, tuple)):
        return []
    return [
        None
        if is_none(item)
        else _serialize_nested(
            record,
            descriptor,
            item,
            options,
            f"element {index} does not support serialization",
        )
        for index, item in enumerate(value)
    ]


def _plain_value(value: object) -> object:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        # The output must never alias the record's own containers.
        return [copy.deepcopy(item) for item in value]
    return value


def serialize_record(
    record: RecordBase,
    options: MarshalOptions | None = None,
) -> JSONObject:
    options = resolve_options(options)
    schema = get_schema(type(record))
    result: dict[str, object] = {}
    for descriptor in schema.descriptors:
        if not descriptor.include_on_write:
            continue
        value = getattr(record, descriptor.key, None)
        match descriptor:
            case FragmentField():
                written = _serialize_fragment(record, descriptor, value, options)
            case FragmentArrayField():
                written = _serialize_fragment_array(record, descriptor, value, options)
            case _:
                written = _plain_value(value)
        result[descriptor.effective_wire_key] = written
    return options.case.to_external(result)
