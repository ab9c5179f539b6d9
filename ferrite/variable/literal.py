"""String representations of variable values and value errors."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

_NEEDS_QUOTES = re.compile(r"[^0-9A-Za-z_@%+=:,./-]")


@dataclass(frozen=True, order=True)
class Literal:
    """The string representation of an environment variable value."""

    string: str = ""

    def quote(self) -> str:
        """Return the value escaped for direct use in a shell."""
        if not _NEEDS_QUOTES.search(self.string):
            return self.string
        return "'" + self.string.replace("'", "'\"'\"'") + "'"

    def __str__(self) -> str:
        return self.string


@dataclass(frozen=True)
class ValueOf(Generic[T]):
    """A variable value in its verbatim, canonical and native forms."""

    verbatim: Literal = Literal()
    canonical: Literal = Literal()
    native: Optional[T] = None


class VariableError(Exception):
    """A problem with parsing or validating an environment variable."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class ValueError(VariableError):
    """The value of a variable is invalid."""

    def __init__(self, name: str, literal: Literal, cause: BaseException) -> None:
        super().__init__(name, f"value of {name} ({literal.quote()}) is invalid: {cause}")
        self.literal = literal
        self.cause = cause
        self.__cause__ = cause

    def accept_visitor(self, visitor: Any) -> None:
        """Dispatch the cause of the error to the matching method of ``visitor``.

        Schema errors dispatch themselves; anything else goes to
        ``visitor.visit_generic_error``.
        """
        dispatch = getattr(self.cause, "accept_visitor", None)
        if callable(dispatch):
            dispatch(visitor)
        else:
            visitor.visit_generic_error(self.cause)