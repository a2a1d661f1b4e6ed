"""Process-wide random source used by the ``random()`` constructors."""
from __future__ import annotations
from typing import Optional

import numpy as np

from ..types.channel_type import ChannelType, channel_maxima

_rng: np.random.Generator = np.random.default_rng()


def seed(value: Optional[int] = None) -> None:
    """Reseed the shared generator, e.g. for reproducible tests."""
    global _rng
    _rng = np.random.default_rng(value)


def random_channel(channel: ChannelType) -> int | float:
    """
    Draw one valid value for a channel.

    Integral channels are uniform over ``[0, max]`` inclusive; alpha is
    uniform in ``[0, 1)`` rounded to two decimals.
    """
    if channel == ChannelType.ALPHA:
        return round(float(_rng.random()) * 100) / 100
    return int(_rng.integers(0, channel_maxima[channel], endpoint=True))
