"""Rendering of variable values for human-readable output."""

from __future__ import annotations

from typing import Any

from ferrite.variable.literal import Literal
from ferrite.variable.schema import SchemaVisitor


class _ValueRenderer(SchemaVisitor):
    def __init__(self, spec: Any, literal: Literal) -> None:
        self._spec = spec
        self._literal = literal
        self.output = ""

    def visit_binary(self, schema: Any) -> None:
        size = len(self._literal.string.encode("utf-8"))
        suffix = "" if size == 1 else "s"
        self.output = f"{{{size} byte{suffix}}}"

    def visit_numeric(self, schema: Any) -> None:
        self._visit_generic()

    def visit_set(self, schema: Any) -> None:
        self._visit_generic()

    def visit_string(self, schema: Any) -> None:
        self._visit_generic()

    def visit_other(self, schema: Any) -> None:
        self._visit_generic()

    def _visit_generic(self) -> None:
        if self._spec.sensitive:
            self.output = "*" * len(self._literal.string.encode("utf-8"))
        else:
            self.output = self._literal.quote()


def render_value(spec: Any, literal: Literal) -> str:
    """Return ``literal`` rendered for display, masking sensitive values."""
    renderer = _ValueRenderer(spec, literal)
    spec.schema.accept_visitor(renderer)
    return renderer.output