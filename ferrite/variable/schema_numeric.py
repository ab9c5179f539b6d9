"""A schema for numeric values."""

from __future__ import annotations

import builtins
import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Optional

from ferrite.limits import NumericKind, bit_size, limits_of
from ferrite.maybe import Maybe, none
from ferrite.variable.example import TypedExample
from ferrite.variable.literal import Literal
from ferrite.variable.schema import (
    InvalidSchemaError,
    Marshaler,
    Schema,
    SchemaError,
    SchemaErrorVisitor,
    SchemaVisitor,
    marshal_maybe,
    must_marshal_maybe,
)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


@dataclass(frozen=True)
class TypedNumeric(Schema):
    """Numbers of a fixed-size ``kind`` with optional bounds."""

    marshaler: Marshaler
    kind: NumericKind
    native_min: Maybe[Any] = field(default_factory=none)
    native_max: Maybe[Any] = field(default_factory=none)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", NumericKind(self.kind))

    def min(self) -> tuple[Optional[Literal], bool]:
        """Return ``(minimum literal, True)`` or ``(None, False)``."""
        return must_marshal_maybe(self.marshaler, self.native_min).get()

    def max(self) -> tuple[Optional[Literal], bool]:
        """Return ``(maximum literal, True)`` or ``(None, False)``."""
        return must_marshal_maybe(self.marshaler, self.native_max).get()

    def limits(self) -> tuple[Literal, Literal, bool]:
        """Return ``(min, max, explicit)``.

        ``explicit`` is True only when both bounds were given by the application.
        """
        lower, upper = limits_of(self.kind)
        explicit = True

        value, ok = self.native_min.get()
        if ok:
            lower = value
        else:
            explicit = False

        value, ok = self.native_max.get()
        if ok:
            lower = value
        else:
            explicit = False

        return self.marshaler.marshal(lower), self.marshaler.marshal(upper), explicit

    def bits(self) -> int:
        """Return the number of bits used to store the number."""
        return bit_size(self.kind)

    def finalize(self) -> None:
        try:
            marshal_maybe(self.marshaler, self.native_min)
        except Exception as err:
            raise InvalidSchemaError(f"minimum value: {err}") from err

        try:
            marshal_maybe(self.marshaler, self.native_max)
        except Exception as err:
            raise InvalidSchemaError(f"maximum value: {err}") from err

    def accept_visitor(self, visitor: SchemaVisitor) -> None:
        visitor.visit_numeric(self)

    def marshal(self, value: Any) -> Literal:
        self._validate(value)
        return self.marshaler.marshal(value)

    def unmarshal(self, literal: Literal) -> Any:
        native = self.marshaler.unmarshal(literal)
        self._validate(native)
        return native

    def examples(self, conservative: bool) -> list[Any]:
        """Return the bounds as examples, plus interpolated values unless conservative."""
        examples: list[Any] = []
        lower, upper = limits_of(self.kind)

        value, ok = self.native_min.get()
        if ok:
            lower = value
            examples.append(
                TypedExample(native=lower, description="the minimum accepted value")
            )

        value, ok = self.native_max.get()
        if ok:
            upper = value
            examples.append(
                TypedExample(native=upper, description="the maximum accepted value")
            )

        if not conservative:
            for distance in (0.45, 0.60):
                examples.append(TypedExample(native=self._lerp(lower, upper, distance)))

        return examples

    def _lerp(self, lower: Any, upper: Any, distance: float) -> Any:
        result = float(lower) * (1 - distance) + float(upper) * distance
        if self.kind is NumericKind.FLOAT32:
            return _to_float32(result)
        if self.kind.is_float:
            return result
        return int(result)

    def _validate(self, value: Any) -> None:
        minimum, ok = self.native_min.get()
        if ok and value < minimum:
            raise MinError(self)

        maximum, ok = self.native_max.get()
        if ok and value > maximum:
            raise MaxError(self)


def _explain_range_error(schema: Any) -> str:
    minimum, has_min = schema.min()
    maximum, has_max = schema.max()

    if not has_min:
        return f"expected {maximum.quote()} or less"
    if not has_max:
        return f"expected {minimum.quote()} or greater"
    if minimum == maximum:
        return f"expected exactly {minimum.quote()}"
    return f"expected between {minimum.quote()} and {maximum.quote()}"


class MinError(SchemaError):
    """A numeric value is less than the minimum permitted value."""

    def __init__(self, schema: Any) -> None:
        super().__init__(schema, f"too low, {_explain_range_error(schema)}")

    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        visitor.visit_min_error(self)


class MaxError(SchemaError):
    """A numeric value is greater than the maximum permitted value."""

    def __init__(self, schema: Any) -> None:
        super().__init__(schema, f"too high, {_explain_range_error(schema)}")

    def accept_visitor(self, visitor: SchemaErrorVisitor) -> None:
        visitor.visit_max_error(self)


class NumericParseError(Exception):
    """Text could not be parsed as a number, or is outside the type's range."""

    def __init__(self, number: str, out_of_range: bool = False) -> None:
        reason = "value out of range" if out_of_range else "invalid syntax"
        super().__init__(f'parsing "{number}": {reason}')
        self.number = number
        self.out_of_range = out_of_range


def unwrap_numeric_parse_error(
    error: BaseException,
    kind: NumericKind | str,
    format: Callable[[Any], str],
) -> BaseException:
    """Return a friendlier error for a NumericParseError; other errors are returned as-is."""
    if not isinstance(error, NumericParseError):
        return error

    kind = NumericKind(kind)
    lower, upper = limits_of(kind)

    if not error.out_of_range:
        return builtins.ValueError(f"unrecognized {kind} syntax")

    if error.number.strip().startswith("-"):
        return builtins.ValueError(
            f"too low, expected the smallest {kind} value of {format(lower)} or greater"
        )

    return builtins.ValueError(
        f"too high, expected the largest {kind} value of {format(upper)} or less"
    )