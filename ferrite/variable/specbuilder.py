"""Fluent construction of variable specifications."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from typing import Any

from ferrite.maybe import Maybe, none, some
from ferrite.variable.constraint import Constraint, ConstraintError
from ferrite.variable.documentation import DocumentationBuilder
from ferrite.variable.example import Example, ExampleSource, TypedExample
from ferrite.variable.literal import Literal, ValueOf
from ferrite.variable.spec import SpecError, TypedSpec


class TypedSpecBuilder:
    """Builds the specification of a single variable."""

    def __init__(self, name: str = "", description: str = "", zero: Any = None) -> None:
        self._spec = TypedSpec(name=name, description=description, native_zero=zero)
        self._default: Maybe[Any] = none()
        self._examples: list[TypedExample[Any]] = []

    def with_default(self, value: Any) -> None:
        """Set the default value of the variable."""
        self._default = some(value)

    def built_in_constraint(self, description: str, check: Callable[[Any], Any]) -> None:
        """Add a library-defined constraint; ``check`` raises ConstraintError."""
        self._spec.constraint_list.append(Constraint(description, False, check))

    def user_constraint(self, description: str, predicate: Callable[[Any], bool]) -> None:
        """Add an application-defined constraint that passes when ``predicate`` is true."""

        def check(value: Any) -> None:
            if not predicate(value):
                raise ConstraintError(description)

        self._spec.constraint_list.append(Constraint(description, True, check))

    def mark_required(self) -> None:
        """Mark the variable as required."""
        self._spec.required = True

    def mark_sensitive(self) -> None:
        """Mark the variable's content as sensitive."""
        self._spec.sensitive = True

    def mark_deprecated(self) -> None:
        """Mark the variable as deprecated."""
        self._spec.deprecated = True

    def normative_example(self, value: Any, description: str) -> None:
        """Add an example that is meaningful in the context of the variable's use."""
        self._examples.append(TypedExample(value, description, True))

    def non_normative_example(self, value: Any, description: str) -> None:
        """Add an example that is only illustrative."""
        self._examples.append(TypedExample(value, description, False))

    def documentation(self) -> DocumentationBuilder:
        """Return a builder that adds documentation to the specification."""
        return DocumentationBuilder(self._spec.documentation)

    def precondition(self, fn: Callable[[], bool]) -> None:
        """Add a predicate that must hold for the value to be made available."""
        self._spec.preconditions.append(fn)

    def peek(self) -> TypedSpec:
        """Return the (possibly incomplete) specification being built."""
        return self._spec

    def done(self, schema: Any) -> TypedSpec:
        """Finish the specification using ``schema``; raise SpecError if invalid."""
        self._spec.schema = schema
        self._finalize()
        return self._spec

    def _finalize(self) -> None:
        spec = self._spec

        if not spec.name:
            raise SpecError(builtins.ValueError("variable name must not be empty"))

        if not spec.description:
            raise SpecError(
                builtins.ValueError("variable description must not be empty"), spec.name
            )

        try:
            spec.schema.finalize()
        except Exception as err:
            raise SpecError(err, spec.name) from err

        value, ok = self._default.get()
        if ok:
            try:
                literal = spec.marshal(value)
            except Exception as err:
                cause = builtins.ValueError(f"default value: {err}")
                cause.__cause__ = err
                raise SpecError(cause, spec.name) from err
            spec.default_value = some(ValueOf(canonical=literal, native=value))

        try:
            self._build_examples()
        except Exception as err:
            cause = builtins.ValueError(f"example value: {err}")
            cause.__cause__ = err
            raise SpecError(cause, spec.name) from err

    def _build_examples(self) -> None:
        spec = self._spec
        seen: set[Literal] = set()

        for example in self._examples:
            literal = spec.marshal(example.native)
            if literal not in seen:
                seen.add(literal)
                spec.examples.append(
                    Example(
                        canonical=literal,
                        description=example.description,
                        is_normative=example.is_normative,
                        source=ExampleSource.SPEC_BUILDER,
                    )
                )

        # Explicit examples and defaults make better examples than generated ones.
        conservative = bool(self._examples) or not spec.default_value.is_empty()

        for example in spec.schema.examples(conservative):
            try:
                literal = spec.marshal(example.native)
            except Exception:
                continue
            if literal not in seen:
                seen.add(literal)
                spec.examples.append(
                    Example(
                        canonical=literal,
                        description=example.description,
                        is_normative=example.is_normative,
                        source=ExampleSource.SCHEMA,
                    )
                )

        default, ok = spec.default_value.get()
        if ok and default.canonical not in seen:
            seen.add(default.canonical)
            spec.examples.insert(
                0,
                Example(
                    canonical=default.canonical,
                    is_normative=True,
                    source=ExampleSource.SPEC_DEFAULT,
                ),
            )