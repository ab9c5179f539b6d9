"""Ranges and sizes of the numeric types variables may hold."""

from __future__ import annotations

from enum import Enum

_FLOAT32_MAX = 3.40282346638528859811704183484516925440e38


class NumericKind(str, Enum):
    """A fixed-size numeric type."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    def __str__(self) -> str:
        return self.value

    @property
    def is_float(self) -> bool:
        return self.value.startswith("float")

    @property
    def is_unsigned(self) -> bool:
        return self.value.startswith("uint")

    @property
    def is_signed(self) -> bool:
        return self.value.startswith("int")


_BITS = {
    NumericKind.INT: 64,
    NumericKind.INT8: 8,
    NumericKind.INT16: 16,
    NumericKind.INT32: 32,
    NumericKind.INT64: 64,
    NumericKind.UINT: 64,
    NumericKind.UINT8: 8,
    NumericKind.UINT16: 16,
    NumericKind.UINT32: 32,
    NumericKind.UINT64: 64,
    NumericKind.FLOAT32: 32,
    NumericKind.FLOAT64: 64,
}


def bit_size(kind: NumericKind | str) -> int:
    """Return the number of bits used to store a value of ``kind``."""
    return _BITS[NumericKind(kind)]


def limits_of(kind: NumericKind | str) -> tuple[int | float, int | float]:
    """Return the ``(min, max)`` values representable by ``kind``.

    Both float kinds report the float32 range.
    """
    kind = NumericKind(kind)
    if kind.is_float:
        return -_FLOAT32_MAX, _FLOAT32_MAX
    bits = bit_size(kind)
    if kind.is_unsigned:
        return 0, (1 << bits) - 1
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1