"""Clone and field-wise equality derived from the schema walk."""

from __future__ import annotations

import copy
from enum import Enum
from typing import TypeVar

from recordwire.base import RecordBase
from recordwire.fields import (
    AnyField,
    FragmentArrayField,
    FragmentField,
    ScalarField,
    ScalarKind,
)
from recordwire.marshal import create_record
from recordwire.registry import get_schema

RecordT = TypeVar("RecordT", bound=RecordBase)


def _clone_value(value: object) -> object:
    if isinstance(value, RecordBase):
        return value.clone()
    return copy.deepcopy(value)


def clone_record(record: RecordT) -> RecordT:
    record_type = type(record)
    values: dict[str, object] = {}
    for descriptor in get_schema(record_type).descriptors:
        value = getattr(record, descriptor.key)
        match descriptor:
            case FragmentField():
                values[descriptor.key] = _clone_value(value)
            case FragmentArrayField():
                values[descriptor.key] = (
                    [_clone_value(item) for item in value]
                    if isinstance(value, (list, tuple))
                    else []
                )
            case _:
                values[descriptor.key] = copy.deepcopy(value)
    # Values were validated when the source was built; do not re-reject them.
    return create_record(record_type, values, strict=False)


def _scalar_identity(descriptor: AnyField, value: object) -> object:
    # Enum fields hold either a member or its raw value; both mean the same.
    if isinstance(descriptor, ScalarField) and descriptor.kind is ScalarKind.ENUM:
        if isinstance(value, Enum):
            return value.value
    return value


def records_equal(left: RecordBase, right: object) -> bool:
    """Shallow field-wise comparison.

    Scalars compare by value, enum fields by member value. Nested records
    compare by identity, so two distinct but structurally identical fragments
    are not equal.
    """
    if type(left) is not type(right):
        return False
    for descriptor in get_schema(type(left)).descriptors:
        mine = getattr(left, descriptor.key)
        theirs = getattr(right, descriptor.key)
        match descriptor:
            case FragmentField():
                if mine is not theirs:
                    return False
            case FragmentArrayField():
                if not (isinstance(mine, (list, tuple)) and isinstance(theirs, (list, tuple))):
                    if mine is not theirs:
                        return False
                    continue
                if len(mine) != len(theirs):
                    return False
                if any(a is not b for a, b in zip(mine, theirs)):
                    return False
            case _:
                if _scalar_identity(descriptor, mine) != _scalar_identity(descriptor, theirs):
                    return False
    return True
