"""Wire-key case transforms.

A transform renames mapping keys between the wire convention and the
snake_case attribute names records use internally. Both directions recurse
through dicts, lists and tuples and leave record instances alone; nested
records are converted by their own marshaling calls.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Callable, Protocol, runtime_checkable

from recordwire.base import RecordBase

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@lru_cache(maxsize=4096)
def camel_to_snake(name: str) -> str:
    if "_" in name or name.islower():
        return name
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@lru_cache(maxsize=4096)
def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    if not rest:
        return name
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def rename_keys(value: object, rename: Callable[[str], str]) -> object:
    """Copy a plain-data tree with every string mapping key renamed."""
    if isinstance(value, RecordBase):
        return value
    if isinstance(value, Mapping):
        return {
            (rename(key) if isinstance(key, str) else key): rename_keys(item, rename)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [rename_keys(item, rename) for item in value]
    return value


@runtime_checkable
class CaseTransform(Protocol):
    name: str

    def to_internal(self, tree: object) -> object: ...

    def to_external(self, tree: object) -> object: ...


class IdentityCase:
    """Wire keys already match attribute names."""

    name = "identity"

    def to_internal(self, tree: object) -> object:
        return tree

    def to_external(self, tree: object) -> object:
        return tree


class CamelCaseWire:
    """camelCase on the wire, snake_case in records."""

    name = "camel"

    def to_internal(self, tree: object) -> object:
        return rename_keys(tree, camel_to_snake)

    def to_external(self, tree: object) -> object:
        return rename_keys(tree, snake_to_camel)


class SnakeCaseWire(IdentityCase):
    name = "snake"


_TRANSFORMS: dict[str, type[IdentityCase] | type[CamelCaseWire]] = {
    IdentityCase.name: IdentityCase,
    CamelCaseWire.name: CamelCaseWire,
    SnakeCaseWire.name: SnakeCaseWire,
}


def case_transform_for(name: str) -> CaseTransform:
    factory = _TRANSFORMS.get(name.strip().lower())
    if factory is None:
        known = ", ".join(sorted(_TRANSFORMS))
        raise ValueError(f"unknown wire case {name!r}; expected one of {known}")
    return factory()
