"""Extended-precision (64-bit mantissa) floats, shifts and rounding schemes."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass

from .num import U64_FULL, U64_HALF, U64_LOMASK, U64_MAX, FloatKind

RoundingAlgorithm = Callable[["ExtendedFloat", int], None]


@dataclass
class ExtendedFloat:
    """A value `mant * 2**exp` with an unsigned 64-bit mantissa."""

    mant: int
    exp: int

    def mul(self, other: ExtendedFloat) -> ExtendedFloat:
        """Product of two normalized values; the result is not normalized."""
        ah = self.mant >> U64_HALF
        al = self.mant & U64_LOMASK
        bh = other.mant >> U64_HALF
        bl = other.mant & U64_LOMASK

        ah_bl = ah * bl
        al_bh = al * bh
        al_bl = al * bl
        ah_bh = ah * bh

        tmp = (ah_bl & U64_LOMASK) + (al_bh & U64_LOMASK) + (al_bl >> U64_HALF)
        tmp += 1 << (U64_HALF - 1)

        mant = ah_bh + (ah_bl >> U64_HALF) + (al_bh >> U64_HALF) + (tmp >> U64_HALF)
        return ExtendedFloat(mant & U64_MAX, self.exp + other.exp + U64_FULL)

    def imul(self, other: ExtendedFloat) -> None:
        """Multiply in place; the result is not normalized."""
        product = self.mul(other)
        self.mant = product.mant
        self.exp = product.exp

    def normalize(self) -> int:
        """Shift left until the top bit is set; return the shift applied."""
        shift = 0 if self.mant == 0 else U64_FULL - self.mant.bit_length()
        self.shl(shift)
        return shift

    def shr(self, shift: int) -> None:
        """Shift the mantissa right, raising the exponent."""
        if not 0 <= shift < U64_FULL:
            raise ValueError(f"shift {shift} out of range for shr")
        self.mant >>= shift
        self.exp += shift

    def overflowing_shr(self, shift: int) -> None:
        """Shift right, allowing a full 64-bit shift that clears the mantissa."""
        if not 0 <= shift <= U64_FULL:
            raise ValueError(f"shift {shift} out of range for overflowing_shr")
        self.mant = 0 if shift == U64_FULL else self.mant >> shift
        self.exp += shift

    def shl(self, shift: int) -> None:
        """Shift the mantissa left, lowering the exponent."""
        if not 0 <= shift < U64_FULL:
            raise ValueError(f"shift {shift} out of range for shl")
        self.mant = (self.mant << shift) & U64_MAX
        self.exp -= shift

    def round_to_native(self, kind: FloatKind, algorithm: RoundingAlgorithm) -> None:
        """Round in place to the mantissa width of `kind`."""
        self.normalize()
        round_to_float(kind, self, algorithm)
        avoid_overflow(kind, self)

    @classmethod
    def from_float(cls, kind: FloatKind, value: float) -> ExtendedFloat:
        """Exact extended representation of a native float."""
        return cls(kind.mantissa(value), kind.exponent(value))

    def into_float(self, kind: FloatKind) -> float:
        """Nearest native float, ties to even."""
        fp = dataclasses.replace(self)
        fp.round_to_native(kind, round_nearest_tie_even)
        return to_native(kind, fp)

    def into_downward_float(self, kind: FloatKind) -> float:
        """Native float rounded toward zero."""
        fp = dataclasses.replace(self)
        fp.round_to_native(kind, round_downward)
        return to_native(kind, fp)


def to_native(kind: FloatKind, fp: ExtendedFloat) -> float:
    """Build a native float from an already rounded extended float."""
    if fp.mant == 0 or fp.exp < kind.denormal_exponent:
        return kind.zero
    if fp.exp >= kind.max_exponent:
        return kind.from_bits(kind.infinity_bits)
    if fp.exp == kind.denormal_exponent and fp.mant & kind.hidden_bit_mask == 0:
        biased = 0
    else:
        biased = fp.exp + kind.exponent_bias
    bits = (fp.mant & kind.mantissa_mask) | (biased << kind.mantissa_size)
    return kind.from_bits(bits)


def nth_bit(n: int) -> int:
    """The value with only bit `n` set."""
    if not 0 <= n < U64_FULL:
        raise ValueError(f"bit {n} out of range")
    return 1 << n


def lower_n_mask(n: int) -> int:
    """Mask of the lowest `n` bits."""
    if not 0 <= n <= U64_FULL:
        raise ValueError(f"mask width {n} out of range")
    if n == U64_FULL:
        return U64_MAX
    return (1 << n) - 1


def lower_n_halfway(n: int) -> int:
    """Halfway point of the lowest `n` bits."""
    if not 0 <= n <= U64_FULL:
        raise ValueError(f"halfway width {n} out of range")
    return 0 if n == 0 else nth_bit(n - 1)


def internal_n_mask(bit: int, n: int) -> int:
    """Mask of `n` bits ending just below position `bit`."""
    if not (0 <= bit <= U64_FULL and 0 <= n <= U64_FULL and bit >= n):
        raise ValueError(f"invalid internal mask ({bit}, {n})")
    return lower_n_mask(bit) ^ lower_n_mask(bit - n)


def round_nearest(fp: ExtendedFloat, shift: int) -> tuple[bool, bool]:
    """Shift right; report whether the dropped bits were above or at halfway."""
    mask = lower_n_mask(shift)
    halfway = lower_n_halfway(shift)
    truncated_bits = fp.mant & mask
    is_above = truncated_bits > halfway
    is_halfway = truncated_bits == halfway
    fp.overflowing_shr(shift)
    return is_above, is_halfway


def tie_even(fp: ExtendedFloat, is_above: bool, is_halfway: bool) -> None:
    """Round up when above halfway, or at halfway with an odd mantissa."""
    is_odd = fp.mant & 1 == 1
    if is_above or (is_odd and is_halfway):
        fp.mant = (fp.mant + 1) & U64_MAX


def round_nearest_tie_even(fp: ExtendedFloat, shift: int) -> None:
    """Shift right, rounding to nearest with ties to even."""
    is_above, is_halfway = round_nearest(fp, shift)
    tie_even(fp, is_above, is_halfway)


def round_downward(fp: ExtendedFloat, shift: int) -> None:
    """Shift right, discarding the dropped bits."""
    fp.overflowing_shr(shift)


def round_to_float(kind: FloatKind, fp: ExtendedFloat, algorithm: RoundingAlgorithm) -> None:
    """Bring the mantissa to the width of `kind`, handling denormals."""
    final_exp = fp.exp + kind.default_shift
    if final_exp < kind.denormal_exponent:
        diff = kind.denormal_exponent - fp.exp
        if diff <= U64_FULL:
            algorithm(fp, diff)
        else:
            fp.mant = 0
            fp.exp = 0
    else:
        algorithm(fp, kind.default_shift)

    if fp.mant & kind.carry_mask == kind.carry_mask:
        fp.shr(1)


def avoid_overflow(kind: FloatKind, fp: ExtendedFloat) -> None:
    """Shift a large value left so its hidden bit is set, if that keeps it finite."""
    if fp.exp >= kind.max_exponent:
        diff = fp.exp - kind.max_exponent
        if diff <= kind.mantissa_size:
            mask = internal_n_mask(kind.mantissa_size + 1, diff + 1)
            if fp.mant & mask == 0:
                fp.shl(diff + 1)