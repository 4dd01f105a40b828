"""Error estimates for extended-precision approximations of floats."""

from __future__ import annotations

from .extended import ExtendedFloat, lower_n_halfway, lower_n_mask
from .num import U64_MAX, FloatKind


def error_scale() -> int:
    """Full error scale in units of the last place."""
    return 8


def error_halfscale() -> int:
    """Half the error scale."""
    return error_scale() // 2


def nearest_error_is_accurate(errors: int, fp: ExtendedFloat, extrabits: int) -> bool:
    """Whether round-to-nearest stays unambiguous given `errors` units of error."""
    if extrabits == 65:
        return fp.mant + errors <= U64_MAX

    extra = fp.mant & lower_n_mask(extrabits)
    halfway = lower_n_halfway(extrabits)
    cmp1 = (halfway - errors) & U64_MAX < extra
    cmp2 = extra < (halfway + errors) & U64_MAX
    return not (cmp1 and cmp2)


def error_is_accurate(kind: FloatKind, count: int, fp: ExtendedFloat) -> bool:
    """Whether `fp`, carrying `count` error units, rounds to a unique `kind` value."""
    bias = -(kind.exponent_bias - kind.mantissa_size)
    denormal_exp = bias - 63
    if fp.exp <= denormal_exp:
        extrabits = 64 - kind.mantissa_size + denormal_exp - fp.exp
    else:
        extrabits = 63 - kind.mantissa_size

    if extrabits > 65:
        return True
    return nearest_error_is_accurate(count, fp, extrabits)