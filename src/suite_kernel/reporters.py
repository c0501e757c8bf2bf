from __future__ import annotations

from typing import Protocol, runtime_checkable


# Reporter is the sink capability every report variant provides.
@runtime_checkable
class Reporter(Protocol):
    def report(self, event: object) -> None:
        """Consume one test-run event."""
        raise NotImplementedError("Reporter is a port; use a concrete adapter.")


class BufferedReporter(Reporter):
    # Default variants only buffer events; formatting belongs to the output layer.
    capabilities: frozenset[str] = frozenset({"reporter"})

    def __init__(self) -> None:
        self.events: list[object] = []

    def report(self, event: object) -> None:
        self.events.append(event)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(events={len(self.events)})"


class HtmlReporter(BufferedReporter):
    capabilities = frozenset({"reporter", "html"})


class TextReporter(BufferedReporter):
    capabilities = frozenset({"reporter", "text"})


class XmlReporter(BufferedReporter):
    capabilities = frozenset({"reporter", "xml"})


# Seed order of the preferred pool: HTML, text, XML.
DEFAULT_REPORTERS: tuple[type[BufferedReporter], ...] = (HtmlReporter, TextReporter, XmlReporter)
