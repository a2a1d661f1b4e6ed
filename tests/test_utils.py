import math

from easycolor.utils import is_close_to_int, nan_to_zero, round_half_away


def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(127.5) == 128


def test_is_close_to_int():
    assert is_close_to_int(219.99999999999997)
    assert not is_close_to_int(216.75)


def test_nan_to_zero():
    assert nan_to_zero(float("nan")) == 0
    assert nan_to_zero(3.5) == 3.5
    assert math.isinf(nan_to_zero(float("inf")))
