"""Schemas describing valid variable values, and the errors they report."""

from __future__ import annotations

from abc import ABC, ABCMeta, abstractmethod
from typing import Any

from ferrite.maybe import Maybe, map_value, try_map
from ferrite.variable.literal import Literal


class InvalidSchemaError(Exception):
    """A schema definition is itself invalid."""


class Marshaler(ABC):
    """Converts values between their native and literal representations."""

    @abstractmethod
    def marshal(self, value: Any) -> Literal:
        """Convert ``value`` to its literal representation."""

    @abstractmethod
    def unmarshal(self, literal: Literal) -> Any:
        """Convert ``literal`` to its native representation."""


class Schema(Marshaler):
    """Describes the valid values of an environment variable.

    Concrete schemas expose a ``kind`` attribute naming the native type.
    """

    @abstractmethod
    def finalize(self) -> None:
        """Prepare the schema for use, raising InvalidSchemaError if it is invalid."""

    @abstractmethod
    def accept_visitor(self, visitor: SchemaVisitor) -> None:
        """Pass the schema to the matching method of ``visitor``."""

    @abstractmethod
    def examples(self, conservative: bool) -> list[Any]:
        """Return a possibly empty list of typed examples of valid values."""


class SchemaVisitor(ABC):
    """Dispatches based on a variable's schema."""

    @abstractmethod
    def visit_binary(self, schema: Any) -> None:
        """Handle a binary schema."""

    @abstractmethod
    def visit_numeric(self, schema: Any) -> None:
        """Handle a numeric schema."""

    @abstractmethod
    def visit_set(self, schema: Any) -> None:
        """Handle a set schema."""

    @abstractmethod
    def visit_string(self, schema: Any) -> None:
        """Handle a string schema."""

    @abstractmethod
    def visit_other(self, schema: Any) -> None:
        """Handle any other schema."""


class SchemaErrorVisitor(ABC):
    """Dispatches based on the type of a SchemaError."""

    @abstractmethod
    def visit_min_error(self, error: Any) -> None:
        """Handle a numeric value below its minimum."""

    @abstractmethod
    def visit_max_error(self, error: Any) -> None:
        """Handle a numeric value above its maximum."""

    @abstractmethod
    def visit_set_membership_error(self, error: Any) -> None:
        """Handle a value that is not a member of a set."""

    @abstractmethod
    def visit_min_length_error(self, error: Any) -> None:
        """Handle a value shorter than its minimum length."""

    @abstractmethod
    def visit_max_length_error(self, error: Any) -> None:
        """Handle a value longer than its maximum length."""


class SchemaError(Exception, metaclass=ABCMeta):
    """A value violates its schema."""

    def __init__(self, schema: Any, message: str) -> None:
        super().__init__(message)
        self.schema = schema

    @abstractmethod
    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        """Pass the error to the matching method of ``visitor``."""


def _explain_length_error(schema: Any) -> str:
    minimum, has_min = schema.min_length()
    maximum, has_max = schema.max_length()

    if not has_min:
        return f"expected length to be {maximum} bytes or fewer"
    if not has_max:
        return f"expected length to be {maximum or 0} bytes or more"
    if minimum == maximum:
        return f"expected length to be exactly {minimum} bytes"
    return f"expected length to be between {minimum} and {maximum} bytes"


class MinLengthError(SchemaError):
    """A value is shorter than the minimum permitted length."""

    def __init__(self, schema: Any) -> None:
        super().__init__(schema, f"too short, {_explain_length_error(schema)}")

    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        visitor.visit_min_length_error(self)


class MaxLengthError(SchemaError):
    """A value is longer than the maximum permitted length."""

    def __init__(self, schema: Any) -> None:
        super().__init__(schema, f"too long, {_explain_length_error(schema)}")

    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        visitor.visit_max_length_error(self)


def marshal_maybe(marshaler: Marshaler, value: Maybe[Any]) -> Maybe[Literal]:
    """Marshal an optional native value; errors from the marshaler propagate."""
    return try_map(value, marshaler.marshal)


def must_marshal_maybe(marshaler: Marshaler, value: Maybe[Any]) -> Maybe[Literal]:
    """Marshal an optional native value that is known to be valid."""
    return map_value(value, marshaler.marshal)