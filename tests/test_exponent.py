from hypothesis import given
from hypothesis import strategies as st

from lexfloat.exponent import (
    I32_MAX,
    I32_MIN,
    add_digit,
    mantissa_exponent,
    scientific_exponent,
    to_digit,
)

U64_MAX = 2**64 - 1


def test_scientific_exponent_documented_examples():
    # 0.1 -> -1
    assert scientific_exponent(0, 0, 0) == -1
    # 10 -> 1
    assert scientific_exponent(0, 2, 0) == 1


def test_scientific_exponent_saturates():
    assert scientific_exponent(I32_MIN, 0, 5) == I32_MIN
    assert scientific_exponent(0, 2**40, 0) == I32_MAX
    assert scientific_exponent(I32_MAX, 3, 0) == I32_MAX


@given(st.integers(min_value=-1000, max_value=1000), st.integers(0, 500))
def test_scientific_exponent_leading_zeros_lower(exponent, start):
    assert scientific_exponent(exponent, 0, start + 1) == scientific_exponent(
        exponent, 0, start
    ) - 1


def test_mantissa_exponent_saturates():
    assert mantissa_exponent(I32_MIN, 2**40, 0) == I32_MIN
    assert mantissa_exponent(I32_MAX, 0, 2**40) == I32_MAX


@given(
    st.integers(min_value=-10000, max_value=10000),
    st.integers(0, 1000),
    st.integers(0, 1000),
)
def test_mantissa_exponent_balance(exponent, fraction, truncated):
    assert mantissa_exponent(exponent, fraction, fraction) == exponent
    assert mantissa_exponent(exponent, fraction + 1, truncated) == mantissa_exponent(
        exponent, fraction, truncated
    ) - 1


def test_to_digit_ascii_digits():
    for index, byte in enumerate(b"0123456789"):
        assert to_digit(byte) == index
    assert to_digit("7") == 7


def test_to_digit_rejects_non_digits():
    for byte in b"a./:+-eE ":
        assert to_digit(byte) is None


@given(st.integers(0, (U64_MAX - 9) // 10), st.integers(0, 9))
def test_add_digit_then_recover(value, digit):
    result = add_digit(value, digit)
    assert result % 10 == digit
    assert result // 10 == value


def test_add_digit_overflow():
    assert add_digit(U64_MAX, 0) is None
    assert add_digit(U64_MAX // 10, 5) == U64_MAX
    assert add_digit(U64_MAX // 10, 6) is None