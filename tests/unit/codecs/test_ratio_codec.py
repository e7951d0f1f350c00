import pytest
from hypothesis import given, strategies as st

from governance.codecs.ratio_codec import decode_ratio, encode_ratio
from utils.exceptions import InvalidPrecisionError, InvalidRatioError


def test_encode_ratio():
    assert encode_ratio(0.5, 2) == 50
    assert encode_ratio(1, 2) == 100
    assert encode_ratio(0, 18) == 0
    assert encode_ratio(0.25, 18) == 250000000000000000


def test_rounds_half_up():
    assert encode_ratio(0.125, 2) == 13
    assert encode_ratio(0.124, 2) == 12


def test_decode_ratio():
    assert decode_ratio(50, 2) == 0.5
    assert decode_ratio(10**18, 18) == 1.0


@pytest.mark.parametrize("ratio", [-0.1, 1.01, "0.5", None, True])
def test_rejects_out_of_range_ratios(ratio):
    with pytest.raises(InvalidRatioError):
        encode_ratio(ratio, 2)


@pytest.mark.parametrize("digits", [0, -1, 1.5, True])
def test_rejects_bad_precision(digits):
    with pytest.raises(InvalidPrecisionError):
        encode_ratio(0.5, digits)
    with pytest.raises(InvalidPrecisionError):
        decode_ratio(50, digits)


@given(st.integers(min_value=0, max_value=100))
def test_two_digit_values_survive(value):
    assert encode_ratio(decode_ratio(value, 2), 2) == value
