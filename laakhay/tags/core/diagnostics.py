"""Diagnostic side-channel for rejected records and upstream error messages.

Core code only talks to the ``DiagnosticSink`` protocol. The default sink
writes to ``logging``; callers can pass their own (for example to collect
rejected records into a report).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class DiagnosticSink(Protocol):
    """Anything that can receive a named diagnostic event."""

    def emit(self, event: str, **fields: Any) -> None: ...


class LoggingDiagnostics:
    """Emit diagnostics as structured warning log records."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def emit(self, event: str, **fields: Any) -> None:
        details = " ".join(f"{key}={value!r}" for key, value in fields.items())
        self._log.warning("%s %s", event, details, extra=fields)


@dataclass
class DiagnosticEvent:
    event: str
    fields: dict[str, Any]


@dataclass
class CollectingDiagnostics:
    """Keep emitted events in memory, in emission order."""

    events: list[DiagnosticEvent] = field(default_factory=list)

    def emit(self, event: str, **fields: Any) -> None:
        self.events.append(DiagnosticEvent(event=event, fields=fields))

    def of_type(self, event: str) -> list[DiagnosticEvent]:
        return [e for e in self.events if e.event == event]
