"""Environment variables resolved against their specifications."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, Optional

from ferrite.environment import get_var
from ferrite.variable.literal import Literal, ValueOf, VariableError
from ferrite.variable.literal import ValueError as VariableValueError


class Availability(IntEnum):
    """Whether, and why or why not, a variable's value is available."""

    NONE = 0
    INVALID = 1
    IGNORED = 2
    OK = 3


class Source(IntEnum):
    """Where a variable's value came from."""

    NONE = 0
    DEFAULT = 1
    ENVIRONMENT = 2


class UndefinedError(VariableError):
    """A required variable is undefined and has no default value."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"{name} is undefined and does not have a default value")


class Variable:
    """A variable whose value is read from the environment on first use."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        self._lock = threading.RLock()
        self._resolved = False
        self._availability = Availability.NONE
        self._source = Source.NONE
        self._value: ValueOf[Any] = ValueOf(native=spec.native_zero)
        self._error: Optional[VariableError] = None

    def availability(self) -> Availability:
        """Return the variable's availability."""
        self._resolve()
        return self._availability

    def source(self) -> Source:
        """Return the source of the variable's value."""
        self._resolve()
        return self._source

    def value(self) -> ValueOf[Any]:
        """Return the value; it holds the zero value when none is available."""
        self._resolve()
        return self._value

    def native_value(self) -> Any:
        """Return the native value; it is the zero value when none is available."""
        self._resolve()
        return self._value.native

    def error(self) -> Optional[VariableError]:
        """Return the error describing the variable's state, or None if valid."""
        self._resolve()
        return self._error

    def _resolve(self) -> None:
        with self._lock:
            if self._resolved:
                return
            self._read()
            if not all(fn() for fn in self.spec.preconditions):
                self._availability = Availability.IGNORED
            self._resolved = True

    def _read(self) -> None:
        spec = self.spec
        literal = Literal(get_var(spec.name))

        if literal.string == "":
            default, ok = spec.default_value.get()
            if ok:
                self._availability = Availability.OK
                self._source = Source.DEFAULT
                self._value = default
            elif spec.required:
                self._availability = Availability.NONE
                self._error = UndefinedError(spec.name)
            return

        self._source = Source.ENVIRONMENT

        try:
            native, canonical = spec.unmarshal(literal)
        except RuntimeError:
            raise
        except Exception as err:
            self._availability = Availability.INVALID
            self._error = VariableValueError(spec.name, literal, err)
            return

        self._availability = Availability.OK
        self._value = ValueOf(verbatim=literal, canonical=canonical, native=native)