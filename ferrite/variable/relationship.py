"""Relationships between variable specifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeVar

R = TypeVar("R", bound="Relationship")


class Relationship(ABC):
    """A relationship between a subject specification and an object specification."""

    subject: Any

    @property
    @abstractmethod
    def object(self) -> Any:
        """The specification the subject is related to."""


@dataclass(frozen=True, eq=False)
class Supersedes(Relationship):
    """The subject supersedes another (usually deprecated) variable."""

    subject: Any
    supersedes: Any

    @property
    def object(self) -> Any:
        return self.supersedes


@dataclass(frozen=True, eq=False)
class RefersTo(Relationship):
    """The subject refers to another variable for documentation purposes."""

    subject: Any
    refers_to: Any

    @property
    def object(self) -> Any:
        return self.refers_to


@dataclass(frozen=True, eq=False)
class DependsOn(Relationship):
    """The subject is only used when another variable is "truthy"."""

    subject: Any
    depends_on: Any

    @property
    def object(self) -> Any:
        return self.depends_on


def establish_relationships(*relationships: Relationship) -> None:
    """Record each relationship on both its subject and its object."""
    for rel in relationships:
        rel.subject.add_relationship(rel)
        rel.object.add_relationship(rel)


def _all_relationships(spec: Any) -> list[Relationship]:
    rels = spec.relationships
    return list(rels() if callable(rels) else rels)


def relationships(spec: Any, kind: type[R]) -> list[R]:
    """Return the relationships of type ``kind`` in which ``spec`` is the subject."""
    return [
        rel
        for rel in _all_relationships(spec)
        if rel.subject is spec and isinstance(rel, kind)
    ]


def inverse_relationships(spec: Any, kind: type[R]) -> list[R]:
    """Return the relationships of type ``kind`` in which ``spec`` is the object."""
    return [
        rel
        for rel in _all_relationships(spec)
        if rel.object is spec and isinstance(rel, kind)
    ]