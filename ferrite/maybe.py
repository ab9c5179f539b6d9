"""An optional value that may or may not be present."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """A value of type T that may be empty."""

    __slots__ = ("_value", "_ok")

    def __init__(self, value: Optional[T] = None, ok: bool = False) -> None:
        self._value = value if ok else None
        self._ok = ok

    def must_get(self) -> T:
        """Return the value, raising ValueError if it is empty."""
        if self._ok:
            return self._value  # type: ignore[return-value]
        raise ValueError("maybe-value is empty")

    def get(self) -> tuple[Optional[T], bool]:
        """Return ``(value, True)`` or ``(None, False)`` if empty."""
        return self._value, self._ok

    def is_empty(self) -> bool:
        """Return True if there is no value."""
        return not self._ok

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._ok == other._ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._ok, self._value))

    def __repr__(self) -> str:
        if self._ok:
            return f"some({self._value!r})"
        return "none()"


def some(value: T) -> Maybe[T]:
    """Return a non-empty value."""
    return Maybe(value, True)


def none() -> Maybe[Any]:
    """Return an empty value."""
    return Maybe()


def map_value(m: Maybe[T], fn: Callable[[T], U]) -> Maybe[U]:
    """Apply ``fn`` to the value of ``m``, keeping emptiness."""
    value, ok = m.get()
    if not ok:
        return none()
    return some(fn(value))  # type: ignore[arg-type]


def try_map(m: Maybe[T], fn: Callable[[T], U]) -> Maybe[U]:
    """Apply a fallible ``fn`` to the value of ``m``.

    ``fn`` is not called when ``m`` is empty; any exception it raises
    propagates to the caller.
    """
    value, ok = m.get()
    if not ok:
        return none()
    result = fn(value)  # type: ignore[arg-type]
    return some(result)