from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class LogMessage:
    # Structured log payload for registry and run-context diagnostics.
    level: str
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(tz=UTC))
    fields: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.level or not self.message:
            raise ValueError("LogMessage requires non-empty level/message")


# LogSink is the port every log adapter implements.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")


def emit_debug(sink: LogSink | None, message: str, **fields: object) -> None:
    # Logging is opt-in: no sink wired means nothing is emitted.
    if sink is None:
        return
    sink.emit(LogMessage(level="debug", message=message, fields=dict(fields)))
