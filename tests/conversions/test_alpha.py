import pytest

from easycolor.conversions import alpha_to_byte, byte_to_alpha, calc_rgb_with_alpha, flatten_rgba


def test_calc_rgb_with_alpha():
    assert calc_rgb_with_alpha(43, 0.85) == pytest.approx(74.8)
    assert calc_rgb_with_alpha(0, 0.0) == pytest.approx(255.0)
    assert calc_rgb_with_alpha(100, 1.0) == pytest.approx(100.0)


def test_flatten_rgba_truncates():
    assert flatten_rgba(43, 196, 138, 0.85) == (74, 204, 155)
    assert flatten_rgba(125, 60, 240, 0.5) == (190, 157, 247)


def test_flatten_opaque_is_identity():
    assert flatten_rgba(1, 2, 3, 1.0) == (1, 2, 3)


def test_flatten_transparent_is_white():
    assert flatten_rgba(1, 2, 3, 0.0) == (255, 255, 255)


def test_alpha_to_byte():
    assert alpha_to_byte(1.0) == 255
    assert alpha_to_byte(0.0) == 0
    assert alpha_to_byte(0.85) == 216
    assert alpha_to_byte(0.5) == 127


def test_alpha_byte_round_trip():
    for n in range(256):
        assert alpha_to_byte(byte_to_alpha(n)) == n
