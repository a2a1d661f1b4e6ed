from __future__ import annotations
import math
from typing import Tuple

from ..utils.num_utils import round_half_away


def hue_from_unit_rgb(r: float, g: float, b: float, c_max: float, delta: float) -> float:
    """
    Hue in degrees for unit RGB channels, shared by HSL and HSV.

    The sector is chosen by the largest channel; negative hues from the red
    sector are moved into [0, 360).
    """
    if delta == 0.0:
        h = 0.0
    elif c_max == r:
        h = 60.0 * math.fmod((g - b) / delta, 6.0)
    elif c_max == g:
        h = 60.0 * ((b - r) / delta + 2.0)
    else:
        h = 60.0 * ((r - g) / delta + 4.0)
    if h < 0.0:
        h += 360.0
    return h


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """
    Convert unit RGB to integer HSL.

    Args:
        r, g, b: channels in [0, 1]

    Returns:
        (h, s, l) with h in [0, 360], s and l in [0, 100]
    """
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    h = hue_from_unit_rgb(r, g, b, c_max, delta)
    l = (c_max + c_min) / 2.0
    s = 0.0 if delta == 0.0 else delta / (1.0 - abs(2.0 * l - 1.0))

    return round_half_away(h), round_half_away(s * 100.0), round_half_away(l * 100.0)


def rgb_to_hsl(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """Convert byte RGB to integer HSL."""
    return unit_rgb_to_hsl(r / 255.0, g / 255.0, b / 255.0)


def rgba_to_hsla(r: int, g: int, b: int, a: float) -> Tuple[int, int, int, float]:
    """Convert RGBA to HSLA, carrying alpha untouched."""
    h, s, l = rgb_to_hsl(r, g, b)
    return h, s, l, a
