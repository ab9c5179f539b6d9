"""Specifications of environment variables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from ferrite.maybe import Maybe, map_value, none
from ferrite.variable.constraint import Constraint
from ferrite.variable.literal import Literal, ValueOf


def is_default(spec: Any, literal: Literal) -> bool:
    """Return True if ``literal`` is the default value of ``spec``."""
    default, ok = spec.default()
    return ok and default == literal


@dataclass(eq=False)
class TypedSpec:
    """The specification of a single variable."""

    name: str = ""
    description: str = ""
    schema: Any = None
    default_value: Maybe[ValueOf[Any]] = field(default_factory=none)
    required: bool = False
    sensitive: bool = False
    deprecated: bool = False
    examples: list[Any] = field(default_factory=list)
    documentation: list[Any] = field(default_factory=list)
    constraint_list: list[Constraint[Any]] = field(default_factory=list)
    relationships: list[Any] = field(default_factory=list)
    preconditions: list[Callable[[], bool]] = field(default_factory=list)
    native_zero: Any = None

    def zero(self) -> Literal:
        """Return the literal form of the type's zero value."""
        return self.schema.marshal(self.native_zero)

    def default(self) -> tuple[Optional[Literal], bool]:
        """Return ``(default literal, True)`` or ``(None, False)``."""
        return map_value(self.default_value, lambda v: v.canonical).get()

    def constraints(self) -> list[Constraint[Any]]:
        """Return the additional constraints on the value."""
        return list(self.constraint_list)

    def add_relationship(self, relationship: Any) -> None:
        """Record a relationship that involves this variable."""
        self.relationships.append(relationship)

    def check_constraints(self, value: Any) -> None:
        """Raise ConstraintError if ``value`` fails any constraint."""
        for constraint in self.constraint_list:
            constraint.check(value)

    def marshal(self, value: Any) -> Literal:
        """Convert ``value`` to a literal after checking constraints."""
        self.check_constraints(value)
        return self.schema.marshal(value)

    def unmarshal(self, literal: Literal) -> tuple[Any, Literal]:
        """Return the native value of ``literal`` and its canonical literal."""
        native = self.schema.unmarshal(literal)
        self.check_constraints(native)
        try:
            canonical = self.schema.marshal(native)
        except Exception as err:
            raise RuntimeError(
                f"schema cannot marshal a value it unmarshaled: {err}"
            ) from err
        return native, canonical


class SpecError(Exception):
    """A problem with a specification itself rather than a value."""

    def __init__(self, cause: BaseException, name: str = "") -> None:
        if name:
            message = f"specification for {name} is invalid: {cause}"
        else:
            message = f"invalid specification: {cause}"
        super().__init__(message)
        self.name = name
        self.cause = cause
        self.__cause__ = cause