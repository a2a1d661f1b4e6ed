from __future__ import annotations
from typing import Tuple

from ..types.channel_type import HUE_360
from ..utils.num_utils import round_half_away


def normalize_hue(h: int) -> int:
    """Normalize hue to [0, 360) range, so 360 behaves like 0."""
    return h % HUE_360


def _sector_rgb(h: int, c: float, x: float) -> Tuple[float, float, float]:
    hue_section = normalize_hue(h) // 60

    if hue_section == 0:
        return c, x, 0.0
    elif hue_section == 1:
        return x, c, 0.0
    elif hue_section == 2:
        return 0.0, c, x
    elif hue_section == 3:
        return 0.0, x, c
    elif hue_section == 4:
        return x, 0.0, c
    return c, 0.0, x


def _to_bytes(r: float, g: float, b: float, m: float) -> Tuple[int, int, int]:
    return (
        round_half_away((r + m) * 255.0),
        round_half_away((g + m) * 255.0),
        round_half_away((b + m) * 255.0),
    )


def hsl_to_rgb(h: int, s: int, l: int) -> Tuple[int, int, int]:
    """
    Convert integer HSL to byte RGB.

    Uses the chroma (C), secondary (X) and match (m) decomposition over six
    60 degree hue sectors.

    Args:
        h: hue in [0, 360]
        s: saturation in [0, 100]
        l: lightness in [0, 100]

    Returns:
        (r, g, b) in [0, 255]
    """
    s_ = s / 100.0
    l_ = l / 100.0
    c = (1.0 - abs(l_ * 2.0 - 1.0)) * s_
    x = c * (1.0 - abs((normalize_hue(h) / 60.0) % 2.0 - 1.0))
    m = l_ - c / 2.0
    r, g, b = _sector_rgb(h, c, x)
    return _to_bytes(r, g, b, m)


def hsv_to_rgb(h: int, s: int, v: int) -> Tuple[int, int, int]:
    """Convert integer HSV to byte RGB."""
    s_ = s / 100.0
    v_ = v / 100.0
    c = v_ * s_
    x = c * (1.0 - abs((normalize_hue(h) / 60.0) % 2.0 - 1.0))
    m = v_ - c
    r, g, b = _sector_rgb(h, c, x)
    return _to_bytes(r, g, b, m)


def cmyk_to_rgb(c: int, m: int, y: int, k: int) -> Tuple[int, int, int]:
    """Convert integer CMYK percentages to byte RGB."""
    t = 1.0 - k / 100.0
    return (
        round_half_away((1.0 - c / 100.0) * t * 255.0),
        round_half_away((1.0 - m / 100.0) * t * 255.0),
        round_half_away((1.0 - y / 100.0) * t * 255.0),
    )
