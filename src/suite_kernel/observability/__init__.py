from .adapters import JsonlLogSink, MemoryLogSink, StdoutLogSink
from .domain import LogMessage, LogSink, emit_debug

__all__ = [
    "LogMessage",
    "LogSink",
    "emit_debug",
    "StdoutLogSink",
    "JsonlLogSink",
    "MemoryLogSink",
]
