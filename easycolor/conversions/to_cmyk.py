from __future__ import annotations
from typing import Tuple

from ..utils.num_utils import round_half_away


def rgb_to_cmyk(r: int, g: int, b: int) -> Tuple[int, int, int, int]:
    """
    Convert byte RGB to integer CMYK percentages.

    Pure black gives ``(0, 0, 0, 100)``; c, m, y are not divided by ``1 - k``
    in that case.
    """
    r_, g_, b_ = r / 255.0, g / 255.0, b / 255.0

    k = 1.0 - max(r_, g_, b_)
    if k == 1.0:
        c = m = y = 0.0
    else:
        c = (1.0 - r_ - k) / (1.0 - k)
        m = (1.0 - g_ - k) / (1.0 - k)
        y = (1.0 - b_ - k) / (1.0 - k)

    return (
        round_half_away(c * 100.0),
        round_half_away(m * 100.0),
        round_half_away(y * 100.0),
        round_half_away(k * 100.0),
    )
