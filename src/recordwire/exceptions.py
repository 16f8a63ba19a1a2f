"""Error taxonomy for recordwire."""

from __future__ import annotations


class RecordWireError(Exception):
    """Base class for every error raised by the marshaling core."""


class ParseError(RecordWireError, ValueError):
    """Textual input to ``deserialize`` is not a JSON object."""

    def __init__(self, message: str, *, record_type: type | None = None):
        super().__init__(message)
        self.record_type = record_type


class ValidationError(RecordWireError, ValueError):
    """A raw value cannot be coerced to its declared kind.

    Raised for enum values outside the declared enumeration and for boolean
    text that is not an accepted literal.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        value: object,
        enum_type: type | None = None,
        field: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.value = value
        self.enum_type = enum_type
        self.field = field


class SchemaDerivationError(RecordWireError, TypeError):
    """A record type cannot be introspected into a schema."""

    def __init__(self, record_type: object, reason: str):
        name = getattr(record_type, "__qualname__", repr(record_type))
        super().__init__(f"cannot derive schema for {name}: {reason}")
        self.record_type = record_type
        self.reason = reason


class NeverThrown(RecordWireError, RuntimeError):
    """Raised by ``never()`` when an unreachable branch is reached."""

    def __init__(self, message: str, *, env: dict[str, object] | None = None):
        super().__init__(message)
        self.env = dict(env or {})
