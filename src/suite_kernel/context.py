from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

from suite_kernel.observability.domain.logging import LogSink, emit_debug


# Errors are explicit for fast feedback on wiring mistakes.
class UnknownResourceError(KeyError):
    pass


class ResourceFactoryError(ValueError):
    pass


ResourceFactory = Callable[[], object]


@dataclass
class ResourceFactories:
    # Maps a resource kind (tag or class) to its zero-argument constructor.
    _factories: dict[Hashable, ResourceFactory] = field(default_factory=dict)

    def register(self, kind: Hashable, factory: ResourceFactory) -> None:
        if kind in self._factories:
            raise ResourceFactoryError(f"Duplicate resource factory: {_kind_name(kind)}")
        self._factories[kind] = factory

    def resolve(self, kind: Hashable) -> ResourceFactory:
        if kind in self._factories:
            return self._factories[kind]
        # A class is its own zero-argument factory unless registered otherwise.
        if isinstance(kind, type):
            return kind
        raise UnknownResourceError(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._factories


class RunContext:
    """Holds everything scoped to one test run.

    Mock objects reach the active test case and reporter through here, and
    collaborating helpers share one instance per resource kind via ``get``.
    Switching the test or the reporter drops every cached resource.
    """

    def __init__(self, factories: ResourceFactories | None = None, *, log_sink: LogSink | None = None) -> None:
        self._factories = factories if factories is not None else ResourceFactories()
        self._log_sink = log_sink
        self._test: object | None = None
        self._reporter: object | None = None
        self._resources: dict[Hashable, object] = {}

    @property
    def factories(self) -> ResourceFactories:
        return self._factories

    def clear(self) -> None:
        # Only the resource cache; test and reporter stay as they are.
        self._resources = {}

    def set_test(self, test: object | None) -> None:
        self.clear()
        self._test = test
        emit_debug(self._log_sink, "context.test", test=type(test).__name__ if test is not None else None)

    def get_test(self) -> object | None:
        return self._test

    def set_reporter(self, reporter: object | None) -> None:
        self.clear()
        self._reporter = reporter
        emit_debug(
            self._log_sink,
            "context.reporter",
            reporter=type(reporter).__name__ if reporter is not None else None,
        )

    def get_reporter(self) -> object | None:
        return self._reporter

    def get(self, kind: Hashable) -> object:
        # Run-scoped singleton: built on first request, reused until the next switch.
        if kind not in self._resources:
            factory = self._factories.resolve(kind)
            self._resources[kind] = factory()
            emit_debug(self._log_sink, "context.resource_built", kind=_kind_name(kind))
        return self._resources[kind]


def _kind_name(kind: Hashable) -> str:
    if isinstance(kind, type):
        return kind.__name__
    return str(kind)
