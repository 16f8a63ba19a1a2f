from __future__ import annotations

from dataclasses import dataclass, field

from recordwire.casing import CamelCaseWire, CaseTransform
from recordwire.diagnostics import DiagnosticSink, LoggingDiagnosticSink
from recordwire.invariants import strict_enums as ambient_strict_enums


@dataclass(frozen=True)
class MarshalOptions:
    """Settings threaded through every recursive marshaling call.

    ``strict_enums=None`` defers to the ambient ``strict_enums_scope``.
    """

    case: CaseTransform = field(default_factory=CamelCaseWire)
    diagnostics: DiagnosticSink = field(default_factory=LoggingDiagnosticSink)
    strict_enums: bool | None = None

    def resolved_strict_enums(self) -> bool:
        if self.strict_enums is not None:
            return self.strict_enums
        return ambient_strict_enums()


DEFAULT_OPTIONS = MarshalOptions()


def resolve_options(options: MarshalOptions | None) -> MarshalOptions:
    return DEFAULT_OPTIONS if options is None else options
