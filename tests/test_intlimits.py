import pytest
from hypothesis import given
from hypothesis import strategies as st

from rvlab.intlimits import (
    INT8,
    INT16,
    INT32,
    INT64,
    INTMAX,
    INTPTR,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINTMAX,
    UINTPTR,
    IntType,
    wrap_signed,
    wrap_unsigned,
)


@pytest.mark.parametrize(
    "kind,value,bits",
    [
        (INT8, 0x7F, 8),
        (INT16, 0x7FFF, 16),
        (INT32, 0x7FFFFFFF, 32),
        (INT64, 0x7FFFFFFFFFFFFFFF, 64),
    ],
)
def test_signed_maxima_match_header(kind, value, bits):
    assert kind.max == value
    assert kind.contains(value)
    assert not kind.contains(value + 1)
    assert wrap_signed(value + 1, bits) == -(value + 1)


@pytest.mark.parametrize(
    "kind,value,bits",
    [
        (UINT8, 0xFF, 8),
        (UINT16, 0xFFFF, 16),
        (UINT32, 0xFFFFFFFF, 32),
        (UINT64, 0xFFFFFFFFFFFFFFFF, 64),
    ],
)
def test_unsigned_maxima_match_header(kind, value, bits):
    assert kind.max == value
    assert kind.contains(value)
    assert not kind.contains(value + 1)
    assert wrap_unsigned(value + 1, bits) == 0


@pytest.mark.parametrize("kind", [INT8, INT16, INT32, INT64])
def test_signed_min_is_cast_of_top_bit(kind):
    assert kind.min == kind.wrap(1 << (kind.bits - 1))
    assert kind.min == -kind.max - 1


@pytest.mark.parametrize("kind", [UINT8, UINT16, UINT32, UINT64])
def test_unsigned_min_is_zero(kind):
    assert kind.min == 0
    assert kind.wrap(-1) == kind.max


def test_aliases():
    assert INTPTR is INT64
    assert INTMAX is INT64
    assert UINTPTR is UINT64
    assert UINTMAX is UINT64
    assert INTPTR.wrap(1 << 63) == INT64.min
    assert UINTPTR.wrap(-1) == UINT64.max


@pytest.mark.parametrize(
    "kind", [INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64]
)
def test_contains_boundaries(kind):
    assert kind.contains(kind.min)
    assert kind.contains(kind.max)
    assert not kind.contains(kind.max + 1)
    assert not kind.contains(kind.min - 1)
    assert wrap_unsigned(kind.max + 1, kind.bits) == kind.min % (1 << kind.bits)


@pytest.mark.parametrize(
    "kind", [INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64]
)
@given(value=st.integers(min_value=-(1 << 70), max_value=1 << 70))
def test_wrap_lands_in_range(kind, value):
    wrapped = kind.wrap(value)
    assert kind.contains(wrapped)
    assert wrap_unsigned(value, kind.bits) == wrapped % (1 << kind.bits)


@pytest.mark.parametrize(
    "kind", [INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64]
)
@given(value=st.integers(min_value=-(1 << 70), max_value=1 << 70))
def test_wrap_is_periodic(kind, value):
    assert kind.wrap(value + (1 << kind.bits)) == kind.wrap(value)
    assert wrap_unsigned(value + (1 << kind.bits), kind.bits) == wrap_unsigned(
        value, kind.bits
    )


@pytest.mark.parametrize(
    "kind", [INT8, INT16, INT32, INT64, UINT8, UINT16, UINT32, UINT64]
)
@given(data=st.data())
def test_wrap_keeps_representable_values(kind, data):
    value = data.draw(st.integers(min_value=kind.min, max_value=kind.max))
    assert kind.wrap(value) == value
    assert wrap_unsigned(value, kind.bits) == value % (1 << kind.bits)


@given(value=st.integers(min_value=-(1 << 40), max_value=1 << 40))
def test_signed_and_unsigned_agree_modulo(value):
    assert wrap_signed(value, 32) % (1 << 32) == wrap_unsigned(value, 32)


def test_wrap_unsigned_minus_one():
    assert wrap_unsigned(-1, 32) == UINT32.max
    assert wrap_signed(UINT64.max, 64) == -1


@pytest.mark.parametrize("bits", [0, -8])
def test_invalid_width_raises(bits):
    with pytest.raises(ValueError):
        wrap_unsigned(1, bits)
    with pytest.raises(ValueError):
        wrap_signed(1, bits)


def test_custom_type():
    kind = IntType("int12", 12, True)
    assert kind.max == (1 << 11) - 1
    assert kind.wrap(kind.max + 1) == kind.min