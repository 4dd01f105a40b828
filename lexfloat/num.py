"""Binary floating-point kinds and their bit-level properties."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

U64_FULL = 64
U64_HALF = U64_FULL // 2
U64_MAX = (1 << U64_FULL) - 1
U64_HIMASK = 0xFFFFFFFF00000000
U64_LOMASK = 0x00000000FFFFFFFF

# Exactly representable powers of ten for each kind.
_F32_POW10 = tuple(float(10**i) for i in range(11))
_F64_POW10 = tuple(float(10**i) for i in range(23))


def _round_int(n: int, significand_bits: int) -> int:
    """Round a non-negative integer to `significand_bits` bits, ties to even."""
    excess = n.bit_length() - significand_bits
    if excess <= 0:
        return n
    quotient = n >> excess
    remainder = n & ((1 << excess) - 1)
    halfway = 1 << (excess - 1)
    if remainder > halfway or (remainder == halfway and quotient & 1):
        quotient += 1
    return quotient << excess


@dataclass(frozen=True)
class FloatKind:
    """Parameters and bit operations of an IEEE-754 binary float format."""

    name: str
    bits: int
    max_digits: int
    sign_mask: int
    exponent_mask: int
    hidden_bit_mask: int
    mantissa_mask: int
    mantissa_size: int
    exponent_bias: int
    carry_mask: int
    exponent_limit: tuple[int, int]
    mantissa_limit: int
    _pack: str
    _unpack: str

    zero = 0.0

    @property
    def infinity_bits(self) -> int:
        return self.exponent_mask

    @property
    def negative_infinity_bits(self) -> int:
        return self.infinity_bits | self.sign_mask

    @property
    def denormal_exponent(self) -> int:
        return 1 - self.exponent_bias

    @property
    def max_exponent(self) -> int:
        return (self.exponent_mask >> self.mantissa_size) - self.exponent_bias

    @property
    def default_shift(self) -> int:
        return U64_FULL - self.mantissa_size - 1

    def _narrow(self, value: float) -> float:
        """Round a double to this kind's precision."""
        if self.bits == 64 or math.isnan(value) or math.isinf(value):
            return value
        try:
            return struct.unpack(self._pack, struct.pack(self._pack, value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def from_bits(self, bits: int) -> float:
        """Build a float from its raw bit pattern."""
        return struct.unpack(self._pack, struct.pack(self._unpack, bits))[0]

    def to_bits(self, value: float) -> int:
        """Return the raw bit pattern of a float."""
        return struct.unpack(self._unpack, struct.pack(self._pack, value))[0]

    def is_denormal(self, value: float) -> bool:
        """True for zero and subnormal values."""
        return self.to_bits(value) & self.exponent_mask == 0

    def is_special(self, value: float) -> bool:
        """True for NaN and infinity."""
        return self.to_bits(value) & self.exponent_mask == self.exponent_mask

    def is_inf(self, value: float) -> bool:
        """True for positive or negative infinity."""
        return self.is_special(value) and self.to_bits(value) & self.mantissa_mask == 0

    def exponent(self, value: float) -> int:
        """Binary exponent such that value == mantissa * 2**exponent."""
        if self.is_denormal(value):
            return self.denormal_exponent
        biased = (self.to_bits(value) & self.exponent_mask) >> self.mantissa_size
        return biased - self.exponent_bias

    def mantissa(self, value: float) -> int:
        """Significand including the hidden bit for normal values."""
        significand = self.to_bits(value) & self.mantissa_mask
        if self.is_denormal(value):
            return significand
        return significand + self.hidden_bit_mask

    def next_positive(self, value: float) -> float:
        """Next representable value above a non-negative finite float."""
        if math.copysign(1.0, value) < 0 or self.is_inf(value):
            raise ValueError("next_positive requires a non-negative finite value")
        return self.from_bits(self.to_bits(value) + 1)

    def round_positive_even(self, value: float) -> float:
        """Move a positive value up one step if its significand is odd."""
        if self.mantissa(value) & 1:
            return self.next_positive(value)
        return value

    def pow10(self, value: float, n: int) -> float:
        """Scale by an exactly representable power of ten."""
        low, high = self.exponent_limit
        if not low <= n <= high:
            raise ValueError(f"power of ten {n} outside [{low}, {high}]")
        table = _F64_POW10 if self.bits == 64 else _F32_POW10
        if n > 0:
            return self._narrow(value * table[n])
        return self._narrow(value / table[-n])

    def from_int(self, n: int) -> float:
        """Convert a non-negative integer with round-to-nearest, ties to even."""
        if n < 0:
            raise ValueError("from_int requires a non-negative integer")
        rounded = _round_int(n, self.mantissa_size + 1)
        try:
            return self._narrow(float(rounded))
        except OverflowError:
            return math.inf


F32 = FloatKind(
    name="f32",
    bits=32,
    max_digits=114,
    sign_mask=0x80000000,
    exponent_mask=0x7F800000,
    hidden_bit_mask=0x00800000,
    mantissa_mask=0x007FFFFF,
    mantissa_size=23,
    exponent_bias=127 + 23,
    carry_mask=0x1000000,
    exponent_limit=(-10, 10),
    mantissa_limit=7,
    _pack="<f",
    _unpack="<I",
)

F64 = FloatKind(
    name="f64",
    bits=64,
    max_digits=769,
    sign_mask=0x8000000000000000,
    exponent_mask=0x7FF0000000000000,
    hidden_bit_mask=0x0010000000000000,
    mantissa_mask=0x000FFFFFFFFFFFFF,
    mantissa_size=52,
    exponent_bias=1023 + 52,
    carry_mask=0x20000000000000,
    exponent_limit=(-22, 22),
    mantissa_limit=15,
    _pack="<d",
    _unpack="<Q",
)