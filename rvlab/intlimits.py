"""Fixed-width integer types with their limits and wrap-around arithmetic."""

from __future__ import annotations

from dataclasses import dataclass


def wrap_unsigned(value: int, bits: int) -> int:
    """Reduce ``value`` modulo ``2**bits`` as an unsigned integer of that width."""
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")
    return value & ((1 << bits) - 1)


def wrap_signed(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement signed integer of ``bits`` bits."""
    unsigned = wrap_unsigned(value, bits)
    if unsigned >= 1 << (bits - 1):
        unsigned -= 1 << bits
    return unsigned


@dataclass(frozen=True)
class IntType:
    """A fixed-width integer type such as ``int32_t`` or ``uint64_t``."""

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        """Convert ``value`` to this type the way a cast does."""
        if self.signed:
            return wrap_signed(value, self.bits)
        return wrap_unsigned(value, self.bits)

    def contains(self, value: int) -> bool:
        """Whether ``value`` is representable without wrapping."""
        return self.min <= value <= self.max


INT8 = IntType("int8_t", 8, True)
INT16 = IntType("int16_t", 16, True)
INT32 = IntType("int32_t", 32, True)
INT64 = IntType("int64_t", 64, True)

UINT8 = IntType("uint8_t", 8, False)
UINT16 = IntType("uint16_t", 16, False)
UINT32 = IntType("uint32_t", 32, False)
UINT64 = IntType("uint64_t", 64, False)

INT_FAST8, INT_FAST16, INT_FAST32, INT_FAST64 = INT8, INT16, INT32, INT64
INT_LEAST8, INT_LEAST16, INT_LEAST32, INT_LEAST64 = INT8, INT16, INT32, INT64
UINT_FAST8, UINT_FAST16, UINT_FAST32, UINT_FAST64 = UINT8, UINT16, UINT32, UINT64
UINT_LEAST8, UINT_LEAST16, UINT_LEAST32, UINT_LEAST64 = UINT8, UINT16, UINT32, UINT64

INTMAX = INT64
INTPTR = INT64
UINTMAX = UINT64
UINTPTR = UINT64

INT8_MIN, INT8_MAX = INT8.min, INT8.max
INT16_MIN, INT16_MAX = INT16.min, INT16.max
INT32_MIN, INT32_MAX = INT32.min, INT32.max
INT64_MIN, INT64_MAX = INT64.min, INT64.max

UINT8_MAX = UINT8.max
UINT16_MAX = UINT16.max
UINT32_MAX = UINT32.max
UINT64_MAX = UINT64.max

INTMAX_MIN, INTMAX_MAX = INTMAX.min, INTMAX.max
INTPTR_MIN, INTPTR_MAX = INTPTR.min, INTPTR.max
UINTMAX_MAX = UINTMAX.max
UINTPTR_MAX = UINTPTR.max