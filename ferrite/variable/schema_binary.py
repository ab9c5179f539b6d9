"""A schema for binary data."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Optional

from ferrite.maybe import Maybe, none
from ferrite.variable.example import TypedExample
from ferrite.variable.literal import Literal
from ferrite.variable.schema import (
    InvalidSchemaError,
    Marshaler,
    MinLengthError,
    Schema,
    SchemaVisitor,
)

_DEFAULT_EXAMPLE_SIZE = 16


@dataclass(frozen=True)
class TypedBinary(Schema):
    """Binary data with optional length limits, encoded by ``marshaler``."""

    marshaler: Marshaler
    min_len: Maybe[int] = field(default_factory=none)
    max_len: Maybe[int] = field(default_factory=none)
    encoding_description: str = ""
    kind: str = "slice"

    def min_length(self) -> tuple[Optional[int], bool]:
        """Return ``(minimum length, True)`` or ``(None, False)``."""
        return self.min_len.get()

    def max_length(self) -> tuple[Optional[int], bool]:
        """Return ``(maximum length, True)`` or ``(None, False)``."""
        return self.max_len.get()

    def finalize(self) -> None:
        minimum = 1

        value, ok = self.min_len.get()
        if ok:
            if value < minimum:  # type: ignore[operator]
                raise InvalidSchemaError(f"minimum length: must be at least {minimum}")
            minimum = value  # type: ignore[assignment]

        value, ok = self.max_len.get()
        if ok and value < minimum:  # type: ignore[operator]
            raise InvalidSchemaError(f"maximum length: must be at least {minimum}")

    def accept_visitor(self, visitor: SchemaVisitor) -> None:
        visitor.visit_binary(self)

    def marshal(self, value: bytes) -> Literal:
        self._validate(value)
        return self.marshaler.marshal(value)

    def unmarshal(self, literal: Literal) -> bytes:
        native = self.marshaler.unmarshal(literal)
        self._validate(native)
        return native

    def examples(self, conservative: bool) -> list[Any]:
        """Return one deterministic pseudo-random example unless conservative."""
        if conservative:
            return []

        size, ok = self.min_len.get()
        if not ok:
            size = _DEFAULT_EXAMPLE_SIZE
            maximum, has_max = self.max_len.get()
            if has_max:
                size = min(size, maximum)  # type: ignore[type-var]

        rng = random.Random(size)
        example = bytes(rng.getrandbits(8) for _ in range(size))  # type: ignore[arg-type]
        return [TypedExample(native=example)]

    def _validate(self, value: bytes) -> None:
        minimum, ok = self.min_len.get()
        if ok and len(value) < minimum:  # type: ignore[operator]
            raise MinLengthError(self)

        maximum, ok = self.max_len.get()
        if ok and len(value) > maximum:  # type: ignore[operator]
            raise MinLengthError(self)