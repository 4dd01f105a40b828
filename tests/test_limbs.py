import pytest
from hypothesis import given
from hypothesis import strategies as st

from lexfloat import limbs
from lexfloat.num import U64_MAX


def to_int(x):
    return sum(limb << (64 * position) for position, limb in enumerate(x))


def from_int(value):
    result = []
    while value:
        result.append(value & U64_MAX)
        value >>= 64
    return result


bigints = st.integers(min_value=1, max_value=2**500)
limb_values = st.integers(min_value=0, max_value=U64_MAX)


def test_hi64_of_one_pinned():
    assert limbs.u64_to_hi64_1(1) == (9223372036854775808, False)


def test_hi64_empty():
    assert limbs.hi64([]) == (0, False)


def test_hi64_zero_rejected():
    with pytest.raises(ValueError):
        limbs.u64_to_hi64_1(0)
    with pytest.raises(ValueError):
        limbs.u64_to_hi64_2(0, 5)


def test_u64_to_hi64_2_without_shift():
    assert limbs.u64_to_hi64_2(U64_MAX, 3) == (U64_MAX, True)
    assert limbs.u64_to_hi64_2(U64_MAX, 0) == (U64_MAX, False)


def test_nonzero():
    assert limbs.nonzero([0, 0, 5, 7], 2) is False
    assert limbs.nonzero([3, 0, 5, 7], 2) is True


@given(bigints)
def test_hi64_matches_top_bits(value):
    x = from_int(value)
    top, truncated = limbs.hi64(x)
    assert top >> 63 == 1
    shift = value.bit_length() - 64
    if shift <= 0:
        assert top == value << -shift
        assert truncated is False
    else:
        assert top == value >> shift
        assert truncated == (value & ((1 << shift) - 1) != 0)


@given(bigints, limb_values, st.data())
def test_iadd_small(value, y, data):
    x = from_int(value)
    xstart = data.draw(st.integers(min_value=0, max_value=len(x) - 1))
    limbs.iadd_small(x, y, xstart)
    assert to_int(x) == value + (y << (64 * xstart))
    assert all(0 <= limb <= U64_MAX for limb in x)


def test_iadd_small_past_end_appends():
    x = [4]
    limbs.iadd_small(x, 9, 3)
    assert x == [4, 9]


def test_iadd_small_carry_chain():
    x = [U64_MAX, U64_MAX]
    limbs.iadd_small(x, 1)
    assert to_int(x) == 2**128


@given(bigints, limb_values)
def test_isub_small(value, y):
    x = from_int(value + y)
    limbs.isub_small(x, y)
    assert to_int(x) == value
    assert x[-1] != 0


def test_isub_small_empty_rejected():
    with pytest.raises(ValueError):
        limbs.isub_small([], 1)


@given(bigints, limb_values)
def test_imul_and_mul_small(value, y):
    x = from_int(value)
    product = limbs.mul_small(x, y)
    assert to_int(x) == value
    assert to_int(product) == value * y
    limbs.imul_small(x, y)
    assert x == product


@given(bigints)
def test_bit_length(value):
    assert limbs.bit_length(from_int(value)) == value.bit_length()


def test_leading_zeros_empty():
    assert limbs.leading_zeros([]) == 0
    assert limbs.bit_length([]) == 0


@given(bigints, st.integers(min_value=0, max_value=400))
def test_ishl(value, n):
    x = from_int(value)
    limbs.ishl(x, n)
    assert to_int(x) == value << n
    assert x[-1] != 0


@given(bigints, st.integers(min_value=0, max_value=63))
def test_ishl_bits(value, n):
    x = from_int(value)
    limbs.ishl_bits(x, n)
    assert to_int(x) == value << n


@given(bigints, st.integers(min_value=1, max_value=5))
def test_ishl_limbs(value, n):
    x = from_int(value)
    limbs.ishl_limbs(x, n)
    assert to_int(x) == value << (64 * n)


def test_shift_errors():
    with pytest.raises(ValueError):
        limbs.ishl_bits([1], 64)
    with pytest.raises(ValueError):
        limbs.ishl_limbs([1], 0)


def test_shift_empty_stays_empty():
    x = []
    limbs.ishl(x, 200)
    assert x == []


def test_normalize():
    x = [1, 0, 0]
    limbs.normalize(x)
    assert x == [1]
    y = [0, 0]
    limbs.normalize(y)
    assert y == []