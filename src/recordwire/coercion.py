"""Conversion of raw wire values into the typed value a field declares."""

from __future__ import annotations

import logging
import math

from recordwire.exceptions import ValidationError
from recordwire.fields import (
    FieldDescriptor,
    FragmentArrayField,
    ScalarField,
    ScalarKind,
)
from recordwire.invariants import strict_enums
from recordwire.predicates import MISSING, enum_has_value, is_empty, is_none, is_producer

logger = logging.getLogger(__name__)

_TRUE_LITERALS = frozenset({"true", "1"})
_FALSE_LITERALS = frozenset({"false", "0", "null"})


def zero_value(descriptor: FieldDescriptor) -> object:
    match descriptor:
        case ScalarField(kind=ScalarKind.BOOLEAN):
            return False
        case ScalarField(kind=ScalarKind.STRING):
            return ""
        case ScalarField(kind=ScalarKind.ARRAY) | FragmentArrayField():
            return []
        case _:
            return None


def coerce(
    descriptor: FieldDescriptor,
    raw: object,
    *,
    strict: bool | None = None,
) -> object:
    """Coerce ``raw`` to the kind declared by ``descriptor``.

    Empty values resolve to the declared default or the kind's zero value.
    A zero-argument producer is invoked and its result coerced. Values for
    fragment kinds pass through unchanged.
    """
    if is_empty(raw):
        default = descriptor.resolve_default()
        return zero_value(descriptor) if default is MISSING else default
    if is_producer(raw):
        return coerce(descriptor, raw(), strict=strict)
    match descriptor:
        case ScalarField(kind=ScalarKind.STRING):
            return "" if is_none(raw) else str(raw)
        case ScalarField(kind=ScalarKind.NUMBER):
            return _coerce_number(raw)
        case ScalarField(kind=ScalarKind.BOOLEAN):
            return _coerce_boolean(descriptor, raw)
        case ScalarField(kind=ScalarKind.ARRAY):
            return raw if isinstance(raw, (list, tuple)) else []
        case ScalarField(kind=ScalarKind.ENUM):
            return _coerce_enum(descriptor, raw, strict=strict)
        case _:
            # Fragment kinds, and any kind added later without a rule.
            return raw


def _coerce_number(raw: object) -> float:
    # Decimal or exponent literals only; digit separators, NaN and infinities
    # read as 0.0.
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str, bytes)):
        return 0.0
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str) and "_" in raw:
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _coerce_boolean(descriptor: ScalarField, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, (int, float)):
        return raw != 0
    if isinstance(raw, str):
        literal = raw.strip().lower()
        if literal in _TRUE_LITERALS:
            return True
        if literal in _FALSE_LITERALS:
            return False
    raise ValidationError(
        f"{raw!r} is not a boolean literal",
        kind=ScalarKind.BOOLEAN.value,
        value=raw,
        field=descriptor.key,
    )


def _coerce_enum(descriptor: ScalarField, raw: object, *, strict: bool | None) -> object:
    enum_type = descriptor.enum_type
    if enum_type is None:
        raise ValidationError(
            f"field {descriptor.key!r} is declared as enum without an enum type",
            kind=ScalarKind.ENUM.value,
            value=raw,
            field=descriptor.key,
        )
    if enum_has_value(enum_type, raw):
        return raw
    message = f"{raw!r} is not a valid {enum_type.__name__}"
    if strict is None:
        strict = strict_enums()
    if strict:
        raise ValidationError(
            message,
            kind=ScalarKind.ENUM.value,
            value=raw,
            enum_type=enum_type,
            field=descriptor.key,
        )
    logger.warning("%s (field %r); passing value through", message, descriptor.key)
    return raw
