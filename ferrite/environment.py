"""Access to the process environment."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from dataclasses import dataclass

_CASE_INSENSITIVE = sys.platform == "win32"


def normalize_name(name: str) -> str:
    """Return the form of ``name`` used to compare and key variable names."""
    return name.upper() if _CASE_INSENSITIVE else name


def equal_names(a: str, b: str) -> bool:
    """Return True if ``a`` and ``b`` refer to the same environment variable."""
    return normalize_name(a) == normalize_name(b)


def get_var(name: str) -> str:
    """Return the value of the variable ``name``, or an empty string if unset."""
    return os.environ.get(name, "")


def set_var(name: str, value: str) -> None:
    """Set the variable ``name`` to ``value``."""
    os.environ[name] = value


def unset_var(name: str) -> None:
    """Remove the variable ``name`` from the environment, if present."""
    os.environ.pop(name, None)


def variables() -> Iterator[tuple[str, str]]:
    """Yield each ``(name, value)`` pair currently in the environment."""
    yield from list(os.environ.items())


@dataclass(frozen=True)
class Snapshot:
    """A copy of the environment at a point in time."""

    entries: tuple[tuple[str, str], ...]

    def restore(self) -> None:
        """Return the environment to the state captured by this snapshot."""
        for name, _ in variables():
            unset_var(name)
        for name, value in self.entries:
            set_var(name, value)

    def __enter__(self) -> Snapshot:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()


def take_snapshot() -> Snapshot:
    """Capture the variables currently in the environment."""
    return Snapshot(tuple(variables()))