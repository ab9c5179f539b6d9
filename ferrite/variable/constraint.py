"""Constraints on variable values beyond their schema."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ConstraintError(Exception):
    """A value does not satisfy a constraint."""


@dataclass(frozen=True)
class Constraint(Generic[T]):
    """A named check applied to a variable's native value.

    ``validator`` raises ConstraintError when a value is unacceptable.
    """

    description: str
    is_user_defined: bool
    validator: Callable[[T], Any]

    def check(self, value: T) -> None:
        """Raise ConstraintError if ``value`` does not satisfy the constraint."""
        self.validator(value)