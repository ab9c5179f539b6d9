"""Options that configure registries, variable sets and initialization."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlsplit

from ferrite.variable.relationship import (
    DependsOn,
    RefersTo,
    Supersedes,
    establish_relationships,
)


class SetKind(Enum):
    """The kind of variable set an option is applied to."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    DEPRECATED = "deprecated"


_ALL_KINDS = frozenset(SetKind)

Applier = Callable[[Any], None]


@dataclass(frozen=True, eq=False)
class Option:
    """An option usable wherever it has an applier.

    ``kinds`` names the variable set kinds the option may be passed to.
    """

    kinds: frozenset[SetKind] = frozenset()
    init: Optional[Applier] = None
    registry: Optional[Applier] = None
    set_config: Optional[Applier] = None
    spec: Optional[Applier] = None
    set_config_by_kind: Mapping[SetKind, Applier] = field(default_factory=dict)
    spec_by_kind: Mapping[SetKind, Applier] = field(default_factory=dict)

    def apply_to_init(self, config: Any) -> None:
        """Apply the option to an initialization config."""
        if self.init is None:
            raise TypeError("option cannot be used when initializing")
        self.init(config)

    def apply_to_registry(self, registry: Any) -> None:
        """Apply the option to a registry."""
        if self.registry is None:
            raise TypeError("option cannot be used to configure a registry")
        self.registry(registry)

    def apply_to_config(self, kind: SetKind, config: Any) -> None:
        """Apply the option to the configuration of a variable set of ``kind``."""
        self._check_kind(kind)
        for fn in (self.set_config, self.set_config_by_kind.get(kind)):
            if fn is not None:
                fn(config)

    def apply_to_spec(self, kind: SetKind, builder: Any) -> None:
        """Apply the option to the spec builder of a variable set of ``kind``."""
        self._check_kind(kind)
        for fn in (self.spec, self.spec_by_kind.get(kind)):
            if fn is not None:
                fn(builder)

    def _check_kind(self, kind: SetKind) -> None:
        if SetKind(kind) not in self.kinds:
            raise TypeError(f"option cannot be used with a {SetKind(kind).value} variable set")


def _reject_options(name: str, options: tuple[Any, ...]) -> None:
    if options:
        raise TypeError(f"{name}() does not accept any options")


def _is_truthy(value: Any) -> bool:
    return value is not None and bool(value)


def relevant_if(varset: Any, *options: Any) -> Option:
    """Make a variable set relevant only when ``varset`` has a truthy value.

    An irrelevant set behaves as though its variables are undefined.
    """
    _reject_options("relevant_if", options)

    def apply(builder: Any) -> None:
        subject = builder.peek()
        for variable in varset.variables():
            establish_relationships(
                RefersTo(subject, variable.spec),
                DependsOn(subject, variable.spec),
            )
            builder.precondition(lambda: _is_truthy(varset.current_value()))

    return Option(kinds=_ALL_KINDS, spec=apply)


def see_also(varset: Any, *options: Any) -> Option:
    """Add the variables of ``varset`` to the "see also" documentation."""
    _reject_options("see_also", options)

    def apply(builder: Any) -> None:
        subject = builder.peek()
        for variable in varset.variables():
            establish_relationships(RefersTo(subject, variable.spec))

    return Option(kinds=_ALL_KINDS, spec=apply)


def superseded_by(varset: Any, *options: Any) -> Option:
    """Indicate that the variables of ``varset`` replace a deprecated set."""
    _reject_options("superseded_by", options)

    def apply(builder: Any) -> None:
        superseded = builder.peek()
        for variable in varset.variables():
            establish_relationships(Supersedes(variable.spec, superseded))

    return Option(
        kinds=frozenset({SetKind.DEPRECATED}),
        spec_by_kind={SetKind.DEPRECATED: apply},
    )


_CONTROL = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def with_documentation_url(url: str) -> Option:
    """Return a registry option that links to supplementary documentation."""
    if _CONTROL.search(url):
        raise ValueError(f"invalid URL: {url!r}: invalid control character in URL")
    if url.startswith(":"):
        raise ValueError(f"invalid URL: {url!r}: missing protocol scheme")
    if _BAD_ESCAPE.search(url):
        raise ValueError(f"invalid URL: {url!r}: invalid URL escape")
    try:
        parsed = urlsplit(url)
    except ValueError as err:
        raise ValueError(f"invalid URL: {err}") from err

    location = parsed.geturl()

    def apply(registry: Any) -> None:
        registry.url = location

    return Option(registry=apply)


def with_registry(registry: Any) -> Option:
    """Use ``registry`` for a variable set, or import it when initializing."""
    if registry is None:
        raise ValueError("registry must not be None")

    def apply_init(config: Any) -> None:
        config.registries.add(registry)

    def apply_set(config: Any) -> None:
        config.registries.append(registry)

    return Option(kinds=_ALL_KINDS, init=apply_init, set_config=apply_set)