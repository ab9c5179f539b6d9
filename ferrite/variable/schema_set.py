"""A schema that only allows a fixed set of values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ferrite.variable.example import TypedExample
from ferrite.variable.literal import Literal
from ferrite.variable.schema import (
    InvalidSchemaError,
    Schema,
    SchemaError,
    SchemaErrorVisitor,
    SchemaVisitor,
)

T = TypeVar("T")


def _go_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


@dataclass(frozen=True)
class SetMember(Generic[T]):
    """A permitted value of a TypedSet."""

    value: T
    description: str = ""


@dataclass(frozen=True)
class TypedSet(Schema):
    """A schema permitting only the values of its members."""

    members: tuple[SetMember[Any], ...]
    to_literal: Callable[[Any], Literal]
    kind: str = "string"

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def literals(self) -> list[Literal]:
        """Return the members as literals, in order."""
        return [self.to_literal(m.value) for m in self.members]

    def finalize(self) -> None:
        if len(self.members) < 2:
            raise InvalidSchemaError("must allow at least two distinct values")

        seen: set[Literal] = set()
        for lit in self.literals():
            if lit.string == "":
                raise InvalidSchemaError("literals can not be an empty string")
            if lit in seen:
                raise InvalidSchemaError(
                    "literals must be unique but multiple values are represented as "
                    + _go_quote(lit.string)
                )
            seen.add(lit)

    def accept_visitor(self, visitor: SchemaVisitor) -> None:
        visitor.visit_set(self)

    def marshal(self, value: Any) -> Literal:
        lit = self.to_literal(value)
        if lit in self.literals():
            return lit
        raise SetMembershipError(self)

    def unmarshal(self, literal: Literal) -> Any:
        for member in self.members:
            if literal == self.to_literal(member.value):
                return member.value
        raise SetMembershipError(self)

    def examples(self, conservative: bool) -> list[Any]:
        return [
            TypedExample(native=m.value, description=m.description, is_normative=True)
            for m in self.members
        ]


def _explain_membership(schema: Any) -> str:
    quoted = [lit.quote() for lit in schema.literals()]
    count = len(quoted)
    if count == 2:
        return f"expected either {quoted[0]} or {quoted[1]}"
    if count in (3, 4):
        return "expected " + ", ".join(quoted[:-1]) + f" or {quoted[-1]}"
    return (
        f"expected {quoted[0]}, {quoted[1]} ... {quoted[-1]}, "
        f"or one of {count - 3} other values"
    )


class SetMembershipError(SchemaError):
    """A value is not a member of the set."""

    def __init__(self, schema: Any) -> None:
        super().__init__(schema, _explain_membership(schema))

    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        visitor.visit_set_membership_error(self)