"""Reporting of recoverable serialization anomalies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SerializationAnomaly:
    field: str
    owner: str
    value: object
    reason: str

    def describe(self) -> str:
        return (
            f"{self.owner}.{self.field}: {self.reason} "
            f"(value={self.value!r}); written as null"
        )


@runtime_checkable
class DiagnosticSink(Protocol):
    def report(self, anomaly: SerializationAnomaly) -> None: ...


class LoggingDiagnosticSink:
    def __init__(self, target: logging.Logger | None = None):
        self._logger = target or logger

    def report(self, anomaly: SerializationAnomaly) -> None:
        self._logger.warning("serialization anomaly: %s", anomaly.describe())


@dataclass
class CollectingDiagnosticSink:
    anomalies: list[SerializationAnomaly] = field(default_factory=list)

    def report(self, anomaly: SerializationAnomaly) -> None:
        self.anomalies.append(anomaly)

    @property
    def fields(self) -> list[str]:
        return [anomaly.field for anomaly in self.anomalies]
