"""Example values for variable specifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar

from ferrite.variable.literal import Literal
from ferrite.variable.spec import is_default

T = TypeVar("T")


class ExampleSource(IntEnum):
    """Where an example came from; higher values are preferred."""

    UNKNOWN = 0
    SCHEMA = 1
    SPEC_BUILDER = 2
    SPEC_DEFAULT = 3


@dataclass(frozen=True)
class Example:
    """An example value in its canonical literal form."""

    canonical: Literal = Literal()
    description: str = ""
    is_normative: bool = False
    source: ExampleSource = ExampleSource.UNKNOWN


@dataclass(frozen=True)
class TypedExample(Generic[T]):
    """An example value in its native form."""

    native: Any
    description: str = ""
    is_normative: bool = False


def _is_better(a: Example, b: Example) -> bool:
    if a.is_normative != b.is_normative:
        return a.is_normative

    if a.source != b.source:
        return a.source > b.source

    if a.description != b.description:
        return len(a.description) > len(b.description)

    # Schema-generated non-normative values: shorter is less likely to be odd.
    if a.source == ExampleSource.SCHEMA and not a.is_normative:
        return len(a.canonical.string) < len(b.canonical.string)

    return len(a.canonical.string) > len(b.canonical.string)


def best_example(spec: Any) -> Example:
    """Return the heuristically best example of ``spec``.

    An example of the default value always wins.
    """
    incumbent = Example()

    for candidate in spec.examples:
        if is_default(spec, candidate.canonical):
            return candidate
        if _is_better(candidate, incumbent):
            incumbent = candidate

    return incumbent