"""A schema for values of arbitrary types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ferrite.variable.literal import Literal
from ferrite.variable.schema import Marshaler, Schema, SchemaVisitor


@dataclass(frozen=True)
class TypedOther(Schema):
    """A last-resort schema that defers entirely to its marshaler."""

    marshaler: Marshaler
    kind: str = "string"

    def finalize(self) -> None:
        """Nothing to check; every marshaler is acceptable."""

    def accept_visitor(self, visitor: SchemaVisitor) -> None:
        visitor.visit_other(self)

    def marshal(self, value: Any) -> Literal:
        return self.marshaler.marshal(value)

    def unmarshal(self, literal: Literal) -> Any:
        return self.marshaler.unmarshal(literal)

    def examples(self, conservative: bool) -> list[Any]:
        return []