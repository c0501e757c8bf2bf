from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import ModuleType
from typing import Protocol, runtime_checkable


# Reflector is the class-hierarchy capability the facade consults for ignore propagation.
@runtime_checkable
class Reflector(Protocol):
    def get_parent(self, class_name: str) -> str | None:
        """Return the parent class name, or None for a root class."""
        raise NotImplementedError("Reflector is a port; use a concrete adapter.")


class MappingReflector(Reflector):
    # Static child -> parent table; lookup is case-insensitive like the ignore list.
    def __init__(self, parents: Mapping[str, str | None]) -> None:
        self._parents = {child.lower(): parent for child, parent in parents.items()}

    def get_parent(self, class_name: str) -> str | None:
        return self._parents.get(class_name.lower())


class ClassIndex(Reflector):
    # Resolves parents of real Python classes known by name.
    def __init__(self, classes: Iterable[type[object]] = ()) -> None:
        self._classes: dict[str, type[object]] = {}
        for cls in classes:
            self.add(cls)

    @classmethod
    def from_modules(cls, modules: Iterable[ModuleType]) -> ClassIndex:
        # Index every class defined in the given modules (re-exports included).
        index = cls()
        for module in modules:
            for value in module.__dict__.values():
                if isinstance(value, type):
                    index.add(value)
        return index

    def add(self, cls: type[object]) -> None:
        self._classes[cls.__name__.lower()] = cls

    def get_parent(self, class_name: str) -> str | None:
        cls = self._classes.get(class_name.lower())
        if cls is None:
            return None
        # First declared base is the direct parent; object is not a parent.
        bases = cls.__bases__
        if not bases or bases[0] is object:
            return None
        return bases[0].__name__
