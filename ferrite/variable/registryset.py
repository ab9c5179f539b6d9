"""A combined view of several variable registries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ferrite.variable.registry import Registry


@dataclass(frozen=True)
class RegisteredVariable:
    """A variable together with the registry it came from."""

    key: str
    variable: Any
    registry: Registry

    @property
    def spec(self) -> Any:
        return self.variable.spec

    def availability(self) -> Any:
        return self.variable.availability()

    def source(self) -> Any:
        return self.variable.source()

    def value(self) -> Any:
        return self.variable.value()

    def native_value(self) -> Any:
        return self.variable.native_value()

    def error(self) -> Any:
        return self.variable.error()


class RegistrySet:
    """A set of registries whose variables must not overlap."""

    def __init__(self) -> None:
        self._registries: dict[str, Registry] = {}
        self._variables: list[RegisteredVariable] = []

    def add(self, registry: Registry) -> None:
        """Add the current contents of ``registry`` to the set.

        Raises ValueError if the registry is already present or defines a
        variable that another registry in the set also defines.
        """
        if registry.key in self._registries:
            raise ValueError(f"the set already contains the {registry.key} registry")

        for existing in self._variables:
            if existing.key in registry:
                raise ValueError(
                    f'the "{existing.spec.name}" environment variable is defined in '
                    f'both the "{existing.registry.key}" and "{registry.key}" registries'
                )

        self._variables.extend(
            RegisteredVariable(key, variable, registry)
            for key, variable in registry.items()
        )
        self._variables.sort(key=lambda v: v.spec.name)
        self._registries[registry.key] = registry

    def variables(self) -> list[RegisteredVariable]:
        """Return the variables in all registries, sorted by name."""
        return list(self._variables)

    def is_empty(self) -> bool:
        """Return True if the set contains no registries."""
        return not self._registries