from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence

from suite_kernel.context import RunContext
from suite_kernel.observability.domain.logging import LogSink, emit_debug
from suite_kernel.reflection import Reflector
from suite_kernel.registry import PreferredKind, Registry
from suite_kernel.version import get_version

ClassRef = str | type


class SuiteFacade:
    """Single entry point the rest of the framework talks to.

    Forwards to the process registry and the current run context, and owns
    the rule that a base class of an ignored test case is ignored too.
    """

    def __init__(
        self,
        registry: Registry,
        context: RunContext,
        reflector: Reflector,
        *,
        log_sink: LogSink | None = None,
    ) -> None:
        self._registry = registry
        self._context = context
        self._reflector = reflector
        self._log_sink = log_sink

    @property
    def registry(self) -> Registry:
        return self._registry

    def get_context(self) -> RunContext:
        return self._context

    def get_version(self) -> str:
        return get_version()

    # Ignore list

    def ignore(self, cls: ClassRef) -> None:
        self._registry.ignore(_class_name(cls))

    def is_ignored(self, cls: ClassRef) -> bool:
        return self._registry.is_ignored(_class_name(cls))

    def ignore_parents_if_ignored(self, classes: Iterable[ClassRef]) -> None:
        # One generation per call: only the direct parent of an ignored class.
        self._ignore_parents(classes)

    def ignore_ancestors_if_ignored(self, classes: Iterable[ClassRef]) -> None:
        # Keep climbing from each newly ignored parent until no class has one left.
        seen: set[str] = set()
        pending = list(classes)
        while pending:
            parents = self._ignore_parents(pending)
            pending = []
            for parent in parents:
                key = _class_name(parent).lower()
                if key not in seen:
                    seen.add(key)
                    pending.append(parent)

    def _ignore_parents(self, classes: Iterable[ClassRef]) -> list[ClassRef]:
        ignored: list[ClassRef] = []
        for cls in classes:
            name = _class_name(cls)
            if not self._registry.is_ignored(name):
                continue
            parent = self._parent_of(cls)
            if parent is None:
                continue
            parent_name = _class_name(parent)
            emit_debug(self._log_sink, "facade.ignore_parent", class_name=name, parent=parent_name)
            self._registry.ignore(parent_name)
            ignored.append(parent)
        return ignored

    def _parent_of(self, cls: ClassRef) -> ClassRef | None:
        # Real classes carry their own hierarchy; names go through the reflector.
        if isinstance(cls, type):
            bases = cls.__bases__
            if not bases or bases[0] is object:
                return None
            return bases[0]
        return self._reflector.get_parent(cls) or None

    # Preferred pool

    def prefer(self, obj: object, *, capabilities: Iterable[str] | None = None) -> None:
        self._registry.prefer(obj, capabilities=capabilities)

    def preferred(self, kinds: PreferredKind | Iterable[PreferredKind]) -> object | None:
        return self._registry.preferred(kinds)

    # Proxy

    def use_proxy(self, proxy: str | None, username: str | None = None, password: str | None = None) -> None:
        self._registry.use_proxy(proxy, username, password)

    def get_default_proxy(self) -> str | None:
        return self._registry.proxy

    def get_default_proxy_username(self) -> str | None:
        return self._registry.proxy_username

    def get_default_proxy_password(self) -> str | None:
        return self._registry.proxy_password

    # Parsers

    def get_parsers(self) -> Sequence[str] | None:
        return self._registry.parsers

    def set_parsers(self, parsers: Sequence[str] | None) -> None:
        self._registry.set_parsers(parsers)

    # Deprecated

    def get_mock_base_class(self) -> str:
        warnings.warn("get_mock_base_class() is deprecated", DeprecationWarning, stacklevel=2)
        return self._registry.mock_base_class

    def set_mock_base_class(self, name: str) -> None:
        warnings.warn("set_mock_base_class() is deprecated", DeprecationWarning, stacklevel=2)
        self._registry.set_mock_base_class(name)


def _class_name(cls: ClassRef) -> str:
    return cls.__name__ if isinstance(cls, type) else cls
