# lexfloat

`lexfloat` holds the building blocks for turning decimal digits into the
nearest IEEE 754 binary float: descriptions of the 32-bit and 64-bit float
formats, an extended-precision float with a 64-bit mantissa, the rounding
schemes that bring it back to a native float, an error estimate for deciding
whether an approximation can be trusted, cached powers of ten, and
little-endian 64-bit limb arithmetic.

It has no dependencies outside the standard library.

## Installation

```
pip install lexfloat
```

To install with the test tools:

```
pip install "lexfloat[test]"
```

## Float kinds: `lexfloat.num`

`FloatKind` describes a binary float format. The module provides two
instances, `F32` and `F64`. Values are ordinary Python floats. For `F32`,
results are rounded to single precision.

```python
from lexfloat.num import F64

F64.to_bits(1.0)                # 0x3FF0000000000000
F64.from_bits(0x3FF0000000000000)  # 1.0
F64.mantissa(1.0), F64.exponent(1.0)  # (2**52, -52)
F64.pow10(3.0, 2)               # 300.0
F64.from_int(2**53 + 1)         # rounded to nearest, ties to even
```

Other methods:

- `is_denormal`, `is_special` and `is_inf` classify a value.
- `next_positive` steps to the next representable value. It raises
  `ValueError` for negative or infinite input.
- `round_positive_even` steps up only when the significand is odd.

`pow10` accepts only exponents within the kind's `exponent_limit`, which is
(-22, 22) for `F64` and (-10, 10) for `F32`. `from_int` accepts only
non-negative integers. Both raise `ValueError` for anything else.

## Exponents and digits: `lexfloat.exponent`

These functions saturate at the limits of a signed 32-bit integer.

- `scientific_exponent(exponent, integer_digits, fraction_start)` gives the
  exponent in scientific notation.
- `mantissa_exponent(exponent, fraction_digits, truncated)` gives the
  exponent that scales an integer mantissa back to the value.
- `to_digit(c)` accepts a byte value or a one-character string. It returns
  the digit value, or `None` when `c` is not an ASCII digit.
- `add_digit(value, digit)` appends a decimal digit to a 64-bit mantissa. It
  returns `None` on overflow.

## Extended floats and rounding: `lexfloat.extended`

`ExtendedFloat(mant, exp)` represents `mant * 2**exp`, where `mant` is an
unsigned 64-bit value.

```python
from lexfloat.extended import ExtendedFloat
from lexfloat.num import F64

fp = ExtendedFloat.from_float(F64, 1.0)   # ExtendedFloat(mant=2**52, exp=-52)
fp.normalize()                            # returns 11; mant now has its top bit set
fp.into_float(F64)                        # 1.0
```

Methods on `ExtendedFloat`:

- `mul` and `imul` multiply two values. The result is not normalized.
- `normalize` shifts the value left until its top bit is set.
- `shl`, `shr` and `overflowing_shr` shift the mantissa and adjust the
  exponent to match.
- `round_to_native(kind, algorithm)` rounds the value in place.
- `into_float` converts to a native float with ties to even, without
  changing the receiver.
- `into_downward_float` converts to a native float rounded toward zero,
  also without changing the receiver.

Module-level functions:

- Rounding schemes: `round_nearest_tie_even`, `round_downward`,
  `round_nearest` and `tie_even`.
- `round_to_float` and `avoid_overflow` handle the mantissa width,
  denormals and values near overflow.
- `to_native` builds the native float from an already rounded value. It
  returns zero on underflow and infinity on overflow.
- Mask helpers: `nth_bit`, `lower_n_mask`, `lower_n_halfway` and
  `internal_n_mask`.

## Error estimates: `lexfloat.errors`

`error_is_accurate(kind, count, fp)` tells whether an extended float that
carries `count` units of accumulated error still rounds to a single value of
`kind`. It returns `False` when the error reaches across the halfway point.
`nearest_error_is_accurate`, `error_scale` and `error_halfscale` are the
pieces it is built from.

## Cached powers of ten: `lexfloat.cached`

`get_powers()` returns a `ModeratePathPowers` with three tables:

- normalized extended floats for 10^0 through 10^9, from `get_small`;
- normalized extended floats for 10^-350 through 10^300 in steps of ten,
  from `get_large`;
- the integers 10^0 through 10^9, from `get_small_int`.

The `step` (10) and `bias` (350) fields map a decimal exponent to the right
pair of table entries.

## Limb arithmetic: `lexfloat.limbs`

A big integer is a list of 64-bit limbs, least significant first. The
functions work on the list in place unless their name says otherwise.

- Addition and subtraction of a single limb: `iadd_small` and `isub_small`.
- Multiplication by a single limb: `imul_small`, or `mul_small`, which
  returns a new list.
- Shifts: `ishl_bits`, `ishl_limbs` and `ishl`.
- Size: `bit_length` and `leading_zeros`.
- `normalize` strips zero limbs from the top.
- `hi64` returns the top 64 significant bits, and whether any lower bit was
  set. Its helpers `u64_to_hi64_1`, `u64_to_hi64_2` and `nonzero` are also
  available.

## What this package does not do

The package does not itself convert a string or a sequence of decimal digits
into a float. It has no function that decides between an exact
multiplication, the extended-precision approximation and an exact
comparison. It has no big-integer type with multiplication by powers of
five, and no exact comparison against the halfway point between two
candidate floats. Callers put those steps together from the pieces above.