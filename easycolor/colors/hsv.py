from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.channel_type import ChannelType
from ..types.color_types import ColorSpace
from .color_base import ColorBase

_PCT = ChannelType.PERCENT


class HSV(ColorBase):
    """
    Hue in degrees, saturation and value in percent: ``hsv(h,s%,v%)``.

    The value channel is exposed as ``brightness`` since ``value`` is the
    channel tuple.
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    space:         ClassVar[ColorSpace] = ColorSpace.HSV
    channels:      ClassVar[Tuple[ChannelType, ...]] = (ChannelType.HUE, _PCT, _PCT)
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "value")

    @property
    def hue(self) -> int:
        return self.value[0]

    @property
    def saturation(self) -> int:
        return self.value[1]

    @property
    def brightness(self) -> int:
        return self.value[2]

    def with_hue(self, hue: int) -> HSV:
        return self._with_channel(0, hue)

    def with_saturation(self, saturation: int) -> HSV:
        return self._with_channel(1, saturation)

    def with_brightness(self, brightness: int) -> HSV:
        return self._with_channel(2, brightness)
