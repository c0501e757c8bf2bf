from .logging import LogMessage, LogSink, emit_debug

__all__ = ["LogMessage", "LogSink", "emit_debug"]
