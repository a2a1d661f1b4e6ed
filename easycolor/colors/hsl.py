from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.channel_type import ChannelType
from ..types.color_types import ColorSpace, ScalarVector
from .color_base import ColorBase, WithAlpha

_HUE = ChannelType.HUE
_PCT = ChannelType.PERCENT


class HSL(ColorBase):
    """Hue in degrees, saturation and lightness in percent: ``hsl(h,s%,l%)``."""
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    space:         ClassVar[ColorSpace] = ColorSpace.HSL
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_HUE, _PCT, _PCT)
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness")

    @property
    def hue(self) -> int:
        return self.value[0]

    @property
    def saturation(self) -> int:
        return self.value[1]

    @property
    def lightness(self) -> int:
        return self.value[2]

    def with_hue(self, hue: int) -> HSL:
        return self._with_channel(0, hue)

    def with_saturation(self, saturation: int) -> HSL:
        return self._with_channel(1, saturation)

    def with_lightness(self, lightness: int) -> HSL:
        return self._with_channel(2, lightness)


class HSLA(WithAlpha, ColorBase):
    """HSL plus an alpha fraction: ``hsla(h,s%,l%,a)``. Owns an :class:`HSL`."""
    __slots__ = ('_hsl', '_alpha')

    num_channels:  ClassVar[int] = 4
    space:         ClassVar[ColorSpace] = ColorSpace.HSLA
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_HUE, _PCT, _PCT, ChannelType.ALPHA)
    channel_names: ClassVar[Tuple[str, ...]] = ("hue", "saturation", "lightness", "alpha")

    def _store(self, values: ScalarVector) -> None:
        self._hsl = HSL(values[:3])
        self._alpha = float(values[3])

    @property
    def value(self) -> ScalarVector:
        return self._hsl.value + (self._alpha,)

    @property
    def hsl(self) -> HSL:
        return self._hsl

    def _rewrap(self, hsl: HSL) -> HSLA:
        return HSLA(hsl.value + (self._alpha,))

    @property
    def hue(self) -> int:
        return self._hsl.hue

    @property
    def saturation(self) -> int:
        return self._hsl.saturation

    @property
    def lightness(self) -> int:
        return self._hsl.lightness

    def with_hue(self, hue: int) -> HSLA:
        return self._rewrap(self._hsl.with_hue(hue))

    def with_saturation(self, saturation: int) -> HSLA:
        return self._rewrap(self._hsl.with_saturation(saturation))

    def with_lightness(self, lightness: int) -> HSLA:
        return self._rewrap(self._hsl.with_lightness(lightness))
