"""Registries of environment variable specifications."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any, Optional

from ferrite.environment import normalize_name
from ferrite.variable.envvar import Variable


class Registry:
    """A collection of variables keyed by their normalized names."""

    def __init__(
        self,
        key: str = "",
        name: str = "",
        url: Optional[Any] = None,
        is_default: bool = False,
    ) -> None:
        self.key = key
        self.name = name
        self.url = url
        self.is_default = is_default
        self._vars: dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, variable: Any) -> None:
        """Add ``variable``; raise ValueError if its name is already registered."""
        name = variable.spec.name
        key = normalize_name(name)
        with self._lock:
            if key in self._vars:
                raise ValueError(f"a variable named {name} is already registered")
            self._vars[key] = variable

    def assign(self, other: Registry) -> None:
        """Replace the contents of this registry with those of ``other``."""
        if other is self:
            return
        self.key = other.key
        self.name = other.name
        self.url = other.url
        self.is_default = other.is_default
        entries = other.items()
        with self._lock:
            self._vars = dict(entries)

    def clone(self) -> Registry:
        """Return a copy of the registry."""
        copy = Registry()
        copy.assign(self)
        return copy

    def items(self) -> list[tuple[str, Any]]:
        """Return the ``(normalized name, variable)`` pairs in the registry."""
        with self._lock:
            return list(self._vars.items())

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return normalize_name(name) in self._vars

    def __len__(self) -> int:
        with self._lock:
            return len(self._vars)

    def __repr__(self) -> str:
        return f"Registry(key={self.key!r}, name={self.name!r}, variables={len(self)})"


DEFAULT_REGISTRY = Registry(is_default=True)


def reset_default_registry() -> None:
    """Remove all variables from the default registry."""
    DEFAULT_REGISTRY.assign(Registry(is_default=True))


def register(registries: Iterable[Registry], spec: Any) -> Variable:
    """Create a variable for ``spec`` and add it to each registry.

    The default registry is used when ``registries`` is empty.
    """
    targets = list(registries) or [DEFAULT_REGISTRY]
    variable = Variable(spec)
    for registry in targets:
        registry.register(variable)
    return variable