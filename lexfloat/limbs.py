"""Little-endian 64-bit limb arithmetic for arbitrary-precision integers.

Limb lists are modified in place; index 0 holds the least significant limb.
"""

from __future__ import annotations

from .num import U64_FULL, U64_MAX

LIMB_BITS = U64_FULL


def nonzero(x: list[int], rindex: int) -> bool:
    """Whether any limb below the top `rindex` limbs is non-zero."""
    return any(limb != 0 for limb in x[: len(x) - rindex])


def _leading_zeros_u64(value: int) -> int:
    return LIMB_BITS - value.bit_length()


def u64_to_hi64_1(r0: int) -> tuple[int, bool]:
    """Shift a non-zero 64-bit value so its top bit is set."""
    if r0 == 0:
        raise ValueError("hi64 of a zero limb")
    return (r0 << _leading_zeros_u64(r0)) & U64_MAX, False


def u64_to_hi64_2(r0: int, r1: int) -> tuple[int, bool]:
    """High 64 bits of the 128-bit value r0:r1, and whether bits were dropped."""
    if r0 == 0:
        raise ValueError("hi64 with a zero high limb")
    ls = _leading_zeros_u64(r0)
    if ls == 0:
        value = r0
    else:
        value = ((r0 << ls) & U64_MAX) | (r1 >> (LIMB_BITS - ls))
    truncated = (r1 << ls) & U64_MAX != 0
    return value, truncated


def hi64(x: list[int]) -> tuple[int, bool]:
    """Top 64 significant bits of a normalized bigint and whether any lower bit is set."""
    if not x:
        return 0, False
    if len(x) == 1:
        return u64_to_hi64_1(x[0])
    value, truncated = u64_to_hi64_2(x[-1], x[-2])
    return value, truncated or nonzero(x, 2)


def iadd_small(x: list[int], y: int, xstart: int = 0) -> None:
    """Add a single limb at position `xstart`, propagating the carry."""
    if len(x) <= xstart:
        x.append(y)
        return
    total = x[xstart] + y
    x[xstart] = total & U64_MAX
    carry = total > U64_MAX
    position = xstart + 1
    while carry and position < len(x):
        total = x[position] + 1
        x[position] = total & U64_MAX
        carry = total > U64_MAX
        position += 1
    if carry:
        x.append(1)


def isub_small(x: list[int], y: int, xstart: int = 0) -> None:
    """Subtract a single limb at position `xstart`, propagating the borrow."""
    if len(x) <= xstart:
        raise ValueError("subtraction would underflow")
    difference = x[xstart] - y
    x[xstart] = difference & U64_MAX
    borrow = difference < 0
    position = xstart + 1
    while borrow and position < len(x):
        difference = x[position] - 1
        x[position] = difference & U64_MAX
        borrow = difference < 0
        position += 1
    normalize(x)


def imul_small(x: list[int], y: int) -> None:
    """Multiply by a single limb in place."""
    carry = 0
    for index, limb in enumerate(x):
        product = limb * y + carry
        x[index] = product & U64_MAX
        carry = product >> LIMB_BITS
    if carry:
        x.append(carry)


def mul_small(x: list[int], y: int) -> list[int]:
    """Product of a bigint and a single limb, as a new list."""
    result = list(x)
    imul_small(result, y)
    return result


def leading_zeros(x: list[int]) -> int:
    """Leading zero bits of the most significant limb."""
    if not x:
        return 0
    return _leading_zeros_u64(x[-1])


def bit_length(x: list[int]) -> int:
    """Number of bits in the bigint."""
    return LIMB_BITS * len(x) - leading_zeros(x)


def ishl_bits(x: list[int], n: int) -> None:
    """Shift left by fewer than 64 bits."""
    if not 0 <= n < LIMB_BITS:
        raise ValueError(f"bit shift {n} out of range")
    if n == 0 or not x:
        return
    rshift = LIMB_BITS - n
    carry = x[-1] >> rshift
    x[:] = [
        ((limb << n) & U64_MAX) | (prev >> rshift)
        for limb, prev in zip(x, [0, *x[:-1]])
    ]
    if carry:
        x.append(carry)


def ishl_limbs(x: list[int], n: int) -> None:
    """Shift left by `n` whole limbs."""
    if n <= 0:
        raise ValueError("limb shift must be positive")
    if x:
        x[:0] = [0] * n


def ishl(x: list[int], n: int) -> None:
    """Shift left by `n` bits."""
    limbs, bits = divmod(n, LIMB_BITS)
    ishl_bits(x, bits)
    if limbs:
        ishl_limbs(x, limbs)


def normalize(x: list[int]) -> None:
    """Drop zero limbs from the most significant end."""
    while x and x[-1] == 0:
        x.pop()