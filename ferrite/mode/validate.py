"""Validation of variables, reporting problems to the user."""

from __future__ import annotations

from enum import IntEnum
from io import StringIO
from typing import Any, TextIO

import regex

from ferrite.mode.render import render_value
from ferrite.variable.envvar import Availability, Source
from ferrite.variable.literal import Literal
from ferrite.variable.literal import ValueError as VariableValueError
from ferrite.variable.schema import SchemaError, SchemaErrorVisitor, SchemaVisitor

ICON_OK = "✓"
ICON_WARN = "⚠"
ICON_ERROR = "✗"
ICON_NEUTRAL = "•"
ICON_ATTENTION = "❯"

_GRAPHEME = regex.compile(r"\X")

_BASIC_KINDS = frozenset(
    {
        "bool",
        "int", "int8", "int16", "int32", "int64",
        "uint", "uint8", "uint16", "uint32", "uint64",
        "uintptr",
        "float32", "float64",
        "complex64", "complex128",
        "string",
    }
)

_MAX_HUMAN_READABLE_BITS = 16


class AttentionLevel(IntEnum):
    """How much attention a variable needs from the user."""

    NONE = 0
    WARNING = 1
    ERROR = 2


class Table:
    """A column-aligned plain text table."""

    def __init__(self) -> None:
        self._rows: list[list[str]] = []
        self._columns = 0
        self._widths: list[int] = []

    def add_row(self, *columns: str) -> None:
        """Add a row; trailing columns that are empty in every row are dropped."""
        for index, text in enumerate(columns):
            width = len(_GRAPHEME.findall(text))
            if width == 0:
                continue
            if len(self._widths) <= index:
                self._widths.extend([0] * (index + 1 - len(self._widths)))
            self._columns = max(self._columns, index + 1)
            self._widths[index] = max(self._widths[index], width)
        self._rows.append(list(columns))

    def write_to(self, stream: TextIO) -> int:
        """Write the table to ``stream`` and return the number of characters written."""
        count = 0
        for row in self._rows:
            last = self._columns - 1
            for index, text in enumerate(row[:last]):
                cell = text.ljust(self._widths[index]) + "  "
                stream.write(cell)
                count += len(cell)
            line = row[last] + "\n"
            stream.write(line)
            count += len(line)
        return count

    def __str__(self) -> str:
        buffer = StringIO()
        self.write_to(buffer)
        return buffer.getvalue()


def attention_needed(variable: Any) -> AttentionLevel:
    """Return how much attention ``variable`` needs from the user."""
    error = variable.error()
    if error is not None:
        if variable.availability() != Availability.IGNORED:
            return AttentionLevel.ERROR
        if isinstance(error, VariableValueError):
            return AttentionLevel.WARNING

    if variable.spec.deprecated and variable.source() == Source.ENVIRONMENT:
        return AttentionLevel.WARNING

    return AttentionLevel.NONE


def _name_column(variable: Any) -> str:
    icon = " "
    if attention_needed(variable) != AttentionLevel.NONE:
        icon = ICON_ATTENTION
    return f" {icon} {variable.spec.name}"


def _description_column(variable: Any) -> str:
    return variable.spec.description


class _SchemaRenderer(SchemaVisitor):
    def __init__(self) -> None:
        self.output = ""

    def visit_binary(self, schema: Any) -> None:
        self.output = f"<{schema.encoding_description}>"

    def visit_numeric(self, schema: Any) -> None:
        minimum, has_min = schema.min()
        maximum, has_max = schema.max()
        if has_min and has_max:
            self.output = f"{minimum.quote()} .. {maximum.quote()}"
        elif has_min:
            self.output = f"{minimum.quote()} ..."
        elif has_max:
            self.output = f"... {maximum.quote()}"
        else:
            self.output = f"<{schema.kind}>"

    def visit_set(self, schema: Any) -> None:
        self.output = " | ".join(lit.quote() for lit in schema.literals())

    def visit_string(self, schema: Any) -> None:
        self.output = f"<{schema.kind}>"

    def visit_other(self, schema: Any) -> None:
        kind = str(schema.kind).lstrip("*")
        self.output = f"<{kind}>" if kind in _BASIC_KINDS else "<string>"


def _spec_column(variable: Any) -> str:
    spec = variable.spec
    renderer = _SchemaRenderer()
    spec.schema.accept_visitor(renderer)

    default, ok = spec.default()
    if ok:
        return f"[ {renderer.output} ] = {render_value(spec, default)}"
    if spec.required:
        return f"  {renderer.output}  "
    return f"[ {renderer.output} ]"


class _ErrorRenderer(SchemaVisitor, SchemaErrorVisitor):
    def __init__(self, schema: Any, cause: BaseException) -> None:
        self._schema = schema
        self._cause = cause
        self.output = ""

    def visit_generic_error(self, error: BaseException) -> None:
        self._schema.accept_visitor(self)

    def visit_binary(self, schema: Any) -> None:
        self.output = str(self._cause)

    def visit_numeric(self, schema: Any) -> None:
        type_name = str(schema.kind).lower()
        if "int" in type_name:
            type_name = "integer"
        text = f"expected {type_name}"

        minimum, maximum, explicit = schema.limits()
        if explicit or schema.bits() <= _MAX_HUMAN_READABLE_BITS:
            text += f" between {minimum.quote()} and {maximum.quote()}"
        self.output = text

    def visit_set(self, schema: Any) -> None:
        self.output = str(self._cause)

    def visit_string(self, schema: Any) -> None:
        self.output = str(self._cause)

    def visit_other(self, schema: Any) -> None:
        self.output = str(self._cause)

    def visit_min_error(self, error: Any) -> None:
        self.output = str(error)

    def visit_max_error(self, error: Any) -> None:
        self.output = str(error)

    def visit_set_membership_error(self, error: Any) -> None:
        self.output = str(error)

    def visit_min_length_error(self, error: Any) -> None:
        self.output = str(error)

    def visit_max_length_error(self, error: Any) -> None:
        self.output = str(error)


def _render_error(spec: Any, error: VariableValueError) -> str:
    cause = error.cause
    renderer = _ErrorRenderer(spec.schema, cause)
    if isinstance(cause, SchemaError):
        cause.accept_visitor(renderer)
    else:
        renderer.visit_generic_error(cause)
    return renderer.output


def _value_column(variable: Any) -> str:
    spec = variable.spec

    def explicit(icon: str, literal: Literal, message: str) -> str:
        text = f"{icon} "
        if spec.deprecated:
            text += "deprecated variable "
        text += f"set to {render_value(spec, literal)}"
        if message:
            text += f", {message}"
        return text

    source = variable.source()
    if source == Source.NONE:
        icon = ICON_ERROR if spec.required else ICON_NEUTRAL
        return f"{icon} undefined"
    if source == Source.DEFAULT:
        return f"{ICON_OK} using default value"

    error = variable.error()
    if isinstance(error, VariableValueError):
        return explicit(ICON_ERROR, error.literal, _render_error(spec, error))

    icon = ICON_WARN if spec.deprecated else ICON_OK
    value = variable.value()
    message = ""
    if value.verbatim != value.canonical:
        message = f"equivalent to {render_value(spec, value.canonical)}"
    return explicit(icon, value.verbatim, message)


def run(config: Any) -> None:
    """Report the variables if any need attention; exit with 1 if any are invalid."""
    table = Table()
    show = False
    valid = True

    for variable in config.registries.variables():
        table.add_row(
            _name_column(variable),
            _description_column(variable),
            _spec_column(variable),
            _value_column(variable),
        )

        level = attention_needed(variable)
        if level != AttentionLevel.NONE:
            show = True
        if level == AttentionLevel.ERROR:
            valid = False

    if show:
        config.err.write("Environment Variables:\n\n")
        table.write_to(config.err)
        config.err.write("\n")

    if not valid:
        config.exit(1)