"""Variable sets: the application-facing way to obtain variable values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from ferrite.options import SetKind
from ferrite.variable.envvar import Availability, Variable
from ferrite.variable.registry import Registry, register


@dataclass
class SetConfig:
    """Configuration common to all variable sets."""

    registries: list[Registry] = field(default_factory=list)


class VariableSet(ABC):
    """A value built from one or more environment variables."""

    def __init__(self, variable: Variable) -> None:
        self._variable = variable

    def variables(self) -> list[Variable]:
        """Return the variables in the set."""
        return [self._variable]

    @abstractmethod
    def current_value(self) -> Any:
        """Return the value if it is available, otherwise None. Never raises."""

    def _raise_if_invalid(self) -> None:
        error = self._variable.error()
        if error is not None:
            raise error


class Required(VariableSet):
    """A set whose value must always be available."""

    def value(self) -> Any:
        """Return the value; raise the variable's error if undefined or invalid."""
        self._raise_if_invalid()
        return self._variable.native_value()

    def current_value(self) -> Any:
        if self._variable.error() is not None:
            return None
        return self._variable.native_value()


class _MaybeAvailable(VariableSet):
    def _get(self) -> tuple[Any, bool]:
        self._raise_if_invalid()
        return self._variable.native_value(), self._variable.availability() is Availability.OK

    def current_value(self) -> Any:
        if self._variable.availability() is Availability.OK:
            return self._variable.native_value()
        return None


class Optional(_MaybeAvailable):
    """A set whose value may be unavailable."""

    def value(self) -> tuple[Any, bool]:
        """Return ``(value, True)``, or ``(zero, False)`` if unavailable.

        Raises the variable's error if its value is invalid.
        """
        return self._get()


class Deprecated(_MaybeAvailable):
    """A deprecated set whose value may be unavailable."""

    def deprecated_value(self) -> tuple[Any, bool]:
        """Return ``(value, True)``, or ``(zero, False)`` if unavailable.

        Raises the variable's error if its value is invalid.
        """
        return self._get()


def _build(kind: SetKind, schema: Any, builder: Any, options: tuple[Any, ...]) -> Variable:
    config = SetConfig()
    for opt in options:
        opt.apply_to_config(kind, config)
        opt.apply_to_spec(kind, builder)
    return register(config.registries, builder.done(schema))


def required(schema: Any, builder: Any, *options: Any) -> Required:
    """Register a required variable and return the set for it."""
    builder.mark_required()
    return Required(_build(SetKind.REQUIRED, schema, builder, options))


def optional(schema: Any, builder: Any, *options: Any) -> Optional:
    """Register an optional variable and return the set for it."""
    return Optional(_build(SetKind.OPTIONAL, schema, builder, options))


def deprecated(schema: Any, builder: Any, *options: Any) -> Deprecated:
    """Register a deprecated variable and return the set for it."""
    builder.mark_deprecated()
    return Deprecated(_build(SetKind.DEPRECATED, schema, builder, options))