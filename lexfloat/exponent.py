"""Exponent arithmetic and decimal digit helpers, saturating at 32 bits."""

from __future__ import annotations

from .num import U64_MAX

I32_MAX = 2**31 - 1
I32_MIN = -(2**31)


def _saturate(value: int) -> int:
    return max(I32_MIN, min(I32_MAX, value))


def _into_i32(value: int) -> int:
    return min(value, I32_MAX)


def scientific_exponent(exponent: int, integer_digits: int, fraction_start: int) -> int:
    """Exponent of the value in scientific notation (0.1 -> -1, 10 -> 1)."""
    if integer_digits == 0:
        shifted = _saturate(exponent - _into_i32(fraction_start))
        return _saturate(shifted - 1)
    return _saturate(exponent + _into_i32(integer_digits - 1))


def mantissa_exponent(exponent: int, fraction_digits: int, truncated: int) -> int:
    """Exponent that scales the parsed integer mantissa back to the value."""
    if fraction_digits > truncated:
        return _saturate(exponent - _into_i32(fraction_digits - truncated))
    return _saturate(exponent + _into_i32(truncated - fraction_digits))


def to_digit(c: int | str) -> int | None:
    """Value of an ASCII decimal digit, or None if it is not one."""
    code = ord(c) if isinstance(c, str) else c
    if 0x30 <= code <= 0x39:
        return code - 0x30
    return None


def add_digit(value: int, digit: int) -> int | None:
    """Append a decimal digit to a 64-bit mantissa, or None on overflow."""
    result = value * 10 + digit
    if result > U64_MAX:
        return None
    return result