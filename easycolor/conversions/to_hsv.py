from __future__ import annotations
from typing import Tuple

from ..utils.num_utils import round_half_away
from .to_hsl import hue_from_unit_rgb


def rgb_to_hsv(r: int, g: int, b: int) -> Tuple[int, int, int]:
    """
    Convert byte RGB to integer HSV.

    Saturation is ``delta / max`` (0 for black) and value is ``max``.
    """
    r_, g_, b_ = r / 255.0, g / 255.0, b / 255.0

    c_max = max(r_, g_, b_)
    c_min = min(r_, g_, b_)
    delta = c_max - c_min

    h = hue_from_unit_rgb(r_, g_, b_, c_max, delta)
    s = 0.0 if c_max == 0.0 else delta / c_max

    return round_half_away(h), round_half_away(s * 100.0), round_half_away(c_max * 100.0)
