from hypothesis import given
from hypothesis import strategies as st

from lexfloat.errors import (
    error_halfscale,
    error_is_accurate,
    error_scale,
    nearest_error_is_accurate,
)
from lexfloat.extended import ExtendedFloat, lower_n_halfway
from lexfloat.num import F32, F64, U64_MAX


def test_scales():
    assert error_scale() == 8
    assert error_halfscale() * 2 == error_scale()


def test_extrabits_65_overflow_check():
    assert nearest_error_is_accurate(1, ExtendedFloat(U64_MAX, 0), 65) is False
    assert nearest_error_is_accurate(1, ExtendedFloat(0, 0), 65) is True


def test_exact_halfway_without_errors_is_accurate():
    fp = ExtendedFloat(lower_n_halfway(11), 0)
    assert nearest_error_is_accurate(0, fp, 11) is True


def test_halfway_with_errors_is_not_accurate():
    fp = ExtendedFloat(lower_n_halfway(11), 0)
    assert nearest_error_is_accurate(1, fp, 11) is False


@given(st.integers(min_value=0, max_value=U64_MAX), st.integers(min_value=0, max_value=64))
def test_zero_errors_always_accurate(mant, extrabits):
    assert nearest_error_is_accurate(0, ExtendedFloat(mant, 0), extrabits) is True


@given(
    st.integers(min_value=0, max_value=U64_MAX),
    st.integers(min_value=-3000, max_value=3000),
)
def test_error_is_accurate_with_no_errors(mant, exp):
    fp = ExtendedFloat(mant, exp)
    assert error_is_accurate(F64, 0, fp) is True
    assert error_is_accurate(F32, 0, fp) is True


def test_deep_underflow_is_accurate():
    fp = ExtendedFloat((1 << 63) | (1 << 10), -5000)
    assert error_is_accurate(F64, 1000, fp) is True


def test_normal_value_near_halfway_is_inaccurate():
    fp = ExtendedFloat((1 << 63) | lower_n_halfway(11), -63)
    assert error_is_accurate(F64, error_halfscale(), fp) is False


def test_normal_value_far_from_halfway_is_accurate():
    fp = ExtendedFloat(1 << 63, -63)
    assert error_is_accurate(F64, error_halfscale(), fp) is True


@given(st.integers(min_value=1, max_value=100))
def test_more_errors_never_more_accurate(count):
    fp = ExtendedFloat((1 << 63) | lower_n_halfway(11) | 3, -63)
    if not error_is_accurate(F64, count, fp):
        assert error_is_accurate(F64, count + 1, fp) is False