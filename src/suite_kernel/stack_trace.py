from __future__ import annotations

import traceback
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType

# Files directly inside this directory are framework code; subpackages are not.
FRAMEWORK_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True, slots=True)
class StackFrame:
    # A call of `function` made from `file` at `line`; file/line are absent for synthetic frames.
    function: str
    file: str | None = None
    line: int | None = None


def frames_from_summaries(summaries: Iterable[traceback.FrameSummary]) -> list[StackFrame]:
    # Pair each callee name with its caller's location. The innermost summary
    # called nothing further and produces no frame.
    ordered = list(summaries)
    return [
        StackFrame(function=callee.name, file=caller.filename, line=caller.lineno)
        for caller, callee in zip(ordered, ordered[1:])
    ]


def frames_from_traceback(tb: TracebackType | None) -> list[StackFrame]:
    # extract_tb lists frames outermost-first, the order trace_method scans in.
    if tb is None:
        return []
    return frames_from_summaries(traceback.extract_tb(tb))


class StackTracer:
    """Interrogates a call stack to recover the user's failure point.

    The tracer walks frames from the outermost call towards the point of
    capture, skipping frames that belong to the framework itself, and
    reports the first frame whose function name starts with one of the
    configured prefixes. Scanning outermost-first means that when a user
    wraps assertions in their own helpers (``assert_valid_user`` calling
    ``assert_equal``), the highest-level helper call is reported, which is
    the line the user actually wrote in the test.
    """

    def __init__(self, prefixes: Iterable[str], *, framework_dir: Path | str | None = None) -> None:
        self._prefixes = tuple(prefixes)
        self._framework_dir = Path(framework_dir).resolve() if framework_dir is not None else FRAMEWORK_DIR

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def trace_method(self, stack: Sequence[StackFrame] | None = None) -> str:
        """Return `` at [file line N]`` for the failure point, or ``""``.

        When ``stack`` is omitted the live stack is captured. A given stack
        must already be ordered outermost-first.
        """
        frames = self._capture_trace() if stack is None else stack
        for frame in frames:
            if self._frame_lies_within_framework(frame):
                continue
            if self._frame_matches_prefix(frame):
                return _format_location(frame)
        return ""

    def trace_exception(self, exc: BaseException) -> str:
        """Same scan over the frames an exception unwound through."""
        return self.trace_method(frames_from_traceback(exc.__traceback__))

    def _frame_lies_within_framework(self, frame: StackFrame) -> bool:
        # Exact parent-directory match: a file in a subfolder of the
        # framework directory is user code as far as tracing goes.
        if not frame.file:
            return False
        return Path(frame.file).resolve().parent == self._framework_dir

    def _frame_matches_prefix(self, frame: StackFrame) -> bool:
        return any(frame.function.startswith(prefix) for prefix in self._prefixes)

    def _capture_trace(self) -> list[StackFrame]:
        # extract_stack is already outermost-first; the last entry is this call.
        return frames_from_summaries(traceback.extract_stack())


def _format_location(frame: StackFrame) -> str:
    # Missing file or line render as empty.
    file = frame.file or ""
    line = "" if frame.line is None else frame.line
    return f" at [{file} line {line}]"
