from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from suite_kernel.observability.domain.logging import LogSink, emit_debug
from suite_kernel.reporters import DEFAULT_REPORTERS

# Registry defaults, applied by Registry.init_defaults(). The preferred pool is
# seeded separately from DEFAULT_REPORTERS because it holds fresh instances.
REGISTRY_DEFAULTS = MappingProxyType(
    {
        "parsers": None,
        "mock_base_class": "SimpleMock",
        "proxy": None,
        "proxy_username": None,
        "proxy_password": None,
    }
)

# A lookup key is a capability tag or a class (matched with isinstance).
PreferredKind = str | type


def capability_tags(obj: object) -> frozenset[str]:
    # Declared capabilities plus the names of the object's class and its bases.
    tags: set[str] = set(getattr(obj, "capabilities", ()) or ())
    for base in type(obj).__mro__:
        if base is object or base.__module__ == "typing":
            continue
        tags.add(base.__name__)
    return frozenset(tags)


@dataclass(frozen=True, slots=True)
class _PreferredEntry:
    obj: object
    tags: frozenset[str]


@dataclass(slots=True)
class PreferredPool:
    # Append-only; lookups scan newest to oldest.
    _entries: list[_PreferredEntry] = field(default_factory=list)

    def add(self, obj: object, *, capabilities: Iterable[str] | None = None) -> None:
        # Explicit capabilities extend what the object already declares.
        tags = capability_tags(obj)
        if capabilities is not None:
            tags |= frozenset(capabilities)
        self._entries.append(_PreferredEntry(obj=obj, tags=tags))

    def find(self, kinds: PreferredKind | Iterable[PreferredKind]) -> object | None:
        tags, classes = _split_kinds(kinds)
        for entry in reversed(self._entries):
            if entry.tags & tags or isinstance(entry.obj, classes):
                return entry.obj
        return None

    def objects(self) -> list[object]:
        return [entry.obj for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)


def _split_kinds(kinds: PreferredKind | Iterable[PreferredKind]) -> tuple[frozenset[str], tuple[type, ...]]:
    # Strings match declared tags; classes match by isinstance.
    if isinstance(kinds, (str, type)):
        kinds = [kinds]
    tags: set[str] = set()
    classes: list[type] = []
    for kind in kinds:
        if isinstance(kind, type):
            classes.append(kind)
        else:
            tags.add(kind)
    return frozenset(tags), tuple(classes)


@dataclass
class Registry:
    """Cross-run configuration for the whole test process.

    Build one with :meth:`init_defaults` in the composition root and hand it
    to whoever needs it; a bare ``Registry()`` has an empty preferred pool.
    """

    parsers: Sequence[str] | None = REGISTRY_DEFAULTS["parsers"]
    mock_base_class: str = REGISTRY_DEFAULTS["mock_base_class"]
    proxy: str | None = REGISTRY_DEFAULTS["proxy"]
    proxy_username: str | None = REGISTRY_DEFAULTS["proxy_username"]
    proxy_password: str | None = REGISTRY_DEFAULTS["proxy_password"]
    ignore_list: set[str] = field(default_factory=set)
    preferred_pool: PreferredPool = field(default_factory=PreferredPool)
    log_sink: LogSink | None = field(default=None, repr=False, compare=False)

    @classmethod
    def init_defaults(
        cls,
        *,
        reporters: Iterable[Callable[[], object]] = DEFAULT_REPORTERS,
        log_sink: LogSink | None = None,
    ) -> Registry:
        registry = cls(log_sink=log_sink)
        for factory in reporters:
            registry.preferred_pool.add(factory())
        return registry

    def ignore(self, class_name: str) -> None:
        key = class_name.lower()
        if key in self.ignore_list:
            return
        self.ignore_list.add(key)
        emit_debug(self.log_sink, "registry.ignore", class_name=key)

    def is_ignored(self, class_name: str) -> bool:
        return class_name.lower() in self.ignore_list

    def prefer(self, obj: object, *, capabilities: Iterable[str] | None = None) -> None:
        self.preferred_pool.add(obj, capabilities=capabilities)
        emit_debug(self.log_sink, "registry.prefer", type=type(obj).__name__)

    def preferred(self, kinds: PreferredKind | Iterable[PreferredKind]) -> object | None:
        return self.preferred_pool.find(kinds)

    def use_proxy(self, proxy: str | None, username: str | None = None, password: str | None = None) -> None:
        # Passing None for proxy disables it.
        self.proxy = proxy
        self.proxy_username = username
        self.proxy_password = password
        emit_debug(self.log_sink, "registry.proxy", proxy=proxy, username=username)

    def set_parsers(self, parsers: Sequence[str] | None) -> None:
        # Stored as given; the parser layer decides how to read it.
        self.parsers = parsers
        emit_debug(self.log_sink, "registry.parsers", parsers=self.parsers)

    def set_mock_base_class(self, name: str) -> None:
        self.mock_base_class = name
        emit_debug(self.log_sink, "registry.mock_base_class", mock_base_class=name)
