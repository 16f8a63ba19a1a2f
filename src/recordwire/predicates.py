"""Value predicates shared by the coercion and marshaling layers."""

from __future__ import annotations

import inspect
from enum import Enum
from typing import Final


class _Missing:
    """Sentinel for "no value supplied", distinct from an explicit ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> _Missing:
        return self


MISSING: Final = _Missing()


def is_none(value: object) -> bool:
    return value is None or value is MISSING


def is_empty(value: object) -> bool:
    """True for absent, ``None`` and empty-string values.

    ``0``, ``False`` and empty containers are present values and are not
    considered empty.
    """
    if is_none(value):
        return True
    return isinstance(value, str) and value == ""


def is_producer(value: object) -> bool:
    """True when ``value`` is a callable that can be invoked with no arguments.

    Types are producers (``list``, ``dict`` or a record type build a blank
    value) except enumerations, which cannot be instantiated without a value.
    """
    if not callable(value):
        return False
    if isinstance(value, type):
        return not issubclass(value, Enum)
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        return False
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            continue
        if parameter.default is inspect.Parameter.empty:
            return False
    return True


def enum_has_value(enum_type: type[Enum], value: object) -> bool:
    if isinstance(value, enum_type):
        return True
    for member in enum_type:
        try:
            if member.value == value:
                return True
        except TypeError:
            continue
    return False
