"""recordwire package root."""

from recordwire import fields
from recordwire.casing import CamelCaseWire, CaseTransform, IdentityCase, SnakeCaseWire
from recordwire.diagnostics import (
    CollectingDiagnosticSink,
    DiagnosticSink,
    LoggingDiagnosticSink,
    SerializationAnomaly,
)
from recordwire.exceptions import (
    NeverThrown,
    ParseError,
    RecordWireError,
    SchemaDerivationError,
    ValidationError,
)
from recordwire.invariants import never, strict_enums_scope
from recordwire.options import MarshalOptions
from recordwire.predicates import MISSING
from recordwire.record import Record
from recordwire.registry import Schema, SchemaRegistry, default_registry, get_schema

__all__ = [
    "__version__",
    "CamelCaseWire",
    "CaseTransform",
    "CollectingDiagnosticSink",
    "DiagnosticSink",
    "IdentityCase",
    "LoggingDiagnosticSink",
    "MISSING",
    "MarshalOptions",
    "NeverThrown",
    "ParseError",
    "Record",
    "RecordWireError",
    "Schema",
    "SchemaDerivationError",
    "SchemaRegistry",
    "SerializationAnomaly",
    "SnakeCaseWire",
    "ValidationError",
    "default_registry",
    "fields",
    "get_schema",
    "never",
    "strict_enums_scope",
]

__version__ = "0.1.0"
