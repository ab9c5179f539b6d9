"""Configuration used when running a mode."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any, TextIO

from ferrite.variable.registryset import RegistrySet


@dataclass
class Config:
    """The registries, arguments, streams and exit function a mode uses."""

    registries: RegistrySet = field(default_factory=RegistrySet)
    args: list[str] = field(default_factory=lambda: list(sys.argv))
    out: TextIO = field(default_factory=lambda: sys.stdout)
    err: TextIO = field(default_factory=lambda: sys.stderr)
    exit: Callable[[int], Any] = field(default_factory=lambda: sys.exit)


DEFAULT_CONFIG = Config()


def reset_default_config() -> None:
    """Return DEFAULT_CONFIG to its initial state, in place."""
    fresh = Config()
    for f in fields(Config):
        setattr(DEFAULT_CONFIG, f.name, getattr(fresh, f.name))