"""The ``Record`` base class: the public face of the marshaling engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from recordwire.base import RecordBase
from recordwire.json_types import JSONObject, WireInput
from recordwire.marshal import create_record, deserialize_record, populate, serialize_record
from recordwire.options import MarshalOptions
from recordwire.registry import Schema, get_schema
from recordwire.structural import clone_record, records_equal

RecordT = TypeVar("RecordT", bound="Record")


class Record(RecordBase):
    """Base class for schema-bearing records.

    Subclasses declare fields with the helpers in ``recordwire.fields``;
    every declared field holds a value on every instance.
    """

    def __init__(self, **values: object) -> None:
        populate(self, values)

    @classmethod
    def schema(cls) -> Schema:
        return get_schema(cls)

    @classmethod
    def create(
        cls: type[RecordT],
        initial: Mapping[str, object] | None = None,
        /,
        **overrides: object,
    ) -> RecordT:
        values = dict(initial or {})
        values.update(overrides)
        return create_record(cls, values)

    @classmethod
    def deserialize(
        cls: type[RecordT],
        data: WireInput,
        *,
        options: MarshalOptions | None = None,
    ) -> RecordT | None:
        return deserialize_record(cls, data, options)

    def serialize(self, options: MarshalOptions | None = None) -> JSONObject:
        return serialize_record(self, options)

    def clone(self: RecordT) -> RecordT:
        return clone_record(self)

    def is_equal(self, other: object) -> bool:
        return records_equal(self, other)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{key}={getattr(self, key, None)!r}" for key in get_schema(type(self))
        )
        return f"{type(self).__qualname__}({fields})"
