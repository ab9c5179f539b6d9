"""Creation of custom variable registries."""

from __future__ import annotations

from typing import Any

from ferrite.variable.registry import Registry


def new_registry(key: str, name: str, *options: Any) -> Registry:
    """Return a new, empty registry with the given key and name.

    Raises ValueError if either is empty, and TypeError for options that do
    not configure registries.
    """
    if key == "":
        raise ValueError("registry key must not be empty")
    if name == "":
        raise ValueError("registry name must not be empty")

    registry = Registry(key=key, name=name)
    for opt in options:
        opt.apply_to_registry(registry)
    return registry