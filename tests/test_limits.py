import pytest

from ferrite.limits import NumericKind, bit_size, limits_of

SIGNED = [NumericKind.INT, NumericKind.INT8, NumericKind.INT16, NumericKind.INT32, NumericKind.INT64]
UNSIGNED = [
    NumericKind.UINT,
    NumericKind.UINT8,
    NumericKind.UINT16,
    NumericKind.UINT32,
    NumericKind.UINT64,
]


def test_int8_limits():
    assert limits_of(NumericKind.INT8) == (-128, 127)


def test_uint8_limits():
    assert limits_of(NumericKind.UINT8) == (0, 255)


def test_float_limits_use_float32_range():
    assert limits_of(NumericKind.FLOAT32) == (
        -3.40282346638528859811704183484516925440e38,
        3.40282346638528859811704183484516925440e38,
    )
    assert limits_of(NumericKind.FLOAT64) == limits_of(NumericKind.FLOAT32)


@pytest.mark.parametrize("kind", SIGNED)
def test_signed_limits_are_symmetric_twos_complement(kind):
    low, high = limits_of(kind)
    assert low == -(high + 1)
    assert high.bit_length() == bit_size(kind) - 1


@pytest.mark.parametrize("kind", UNSIGNED)
def test_unsigned_limits_start_at_zero(kind):
    low, high = limits_of(kind)
    assert low == 0
    assert high.bit_length() == bit_size(kind)


def test_bit_sizes():
    assert bit_size(NumericKind.INT8) == 8
    assert bit_size(NumericKind.UINT16) == 16
    assert bit_size(NumericKind.FLOAT32) == 32
    assert bit_size(NumericKind.INT) == 64


def test_kind_accepts_name_and_renders_it():
    assert limits_of("uint16") == limits_of(NumericKind.UINT16)
    assert str(NumericKind.UINT16) == "uint16"


def test_kind_classification_matches_limits():
    assert NumericKind.INT32.is_signed and not NumericKind.INT32.is_unsigned
    assert limits_of(NumericKind.INT32)[0] == -(2**31)
    assert NumericKind.UINT32.is_unsigned and not NumericKind.UINT32.is_signed
    assert limits_of(NumericKind.UINT32)[0] == 0
    assert NumericKind.FLOAT64.is_float and not NumericKind.FLOAT64.is_signed
    assert isinstance(limits_of(NumericKind.FLOAT64)[1], float)


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        limits_of("complex64")