from __future__ import annotations
from typing import Tuple

from ..utils.num_utils import is_close_to_int


def calc_rgb_with_alpha(channel: int, alpha: float) -> float:
    """Composite one channel over an opaque white background."""
    return channel * alpha + 255.0 * (1.0 - alpha)


def flatten_rgba(r: int, g: int, b: int, a: float) -> Tuple[int, int, int]:
    """
    Flatten a translucent color onto white.

    Composited channels are truncated, not rounded.
    """
    return (
        int(calc_rgb_with_alpha(r, a)),
        int(calc_rgb_with_alpha(g, a)),
        int(calc_rgb_with_alpha(b, a)),
    )


def alpha_to_byte(alpha: float) -> int:
    """
    Scale an alpha fraction to a byte, truncating.

    Fractions that came from a byte (``n / 255``) map back to exactly ``n``.
    """
    scaled = alpha * 255.0
    if is_close_to_int(scaled):
        return int(round(scaled))
    return int(scaled)


def byte_to_alpha(value: int) -> float:
    return value / 255.0
