from .logging import JsonlLogSink, MemoryLogSink, StdoutLogSink

__all__ = ["StdoutLogSink", "JsonlLogSink", "MemoryLogSink"]
