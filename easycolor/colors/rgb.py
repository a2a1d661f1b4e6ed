from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.channel_type import ChannelType
from ..types.color_types import ColorSpace, ScalarVector
from .color_base import ColorBase, WithAlpha

_BYTE = ChannelType.BYTE


class RGB(ColorBase):
    """
    Opaque color as three bytes, text form ``rgb(r,g,b)``.

    >>> rgb = RGB.parse("rgb(43,196,138)")
    >>> str(rgb.with_green(255))
    'rgb(43,255,138)'
    >>> str(rgb.to_hex())
    '#2BC48A'
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 3
    space:         ClassVar[ColorSpace] = ColorSpace.RGB
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_BYTE, _BYTE, _BYTE)
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    @property
    def red(self) -> int:
        return self.value[0]

    @property
    def green(self) -> int:
        return self.value[1]

    @property
    def blue(self) -> int:
        return self.value[2]

    def with_red(self, red: int) -> RGB:
        return self._with_channel(0, red)

    def with_green(self, green: int) -> RGB:
        return self._with_channel(1, green)

    def with_blue(self, blue: int) -> RGB:
        return self._with_channel(2, blue)


class RGBA(WithAlpha, ColorBase):
    """
    RGB plus an alpha fraction, text form ``rgba(r,g,b,a)``.

    Owns an :class:`RGB` and forwards the channel accessors to it.

    >>> rgba = RGBA((125, 60, 98, 0.8))
    >>> str(rgba.with_alpha(0.5))
    'rgba(125,60,98,0.50)'
    """
    __slots__ = ('_rgb', '_alpha')

    num_channels:  ClassVar[int] = 4
    space:         ClassVar[ColorSpace] = ColorSpace.RGBA
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_BYTE, _BYTE, _BYTE, ChannelType.ALPHA)
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")

    def _store(self, values: ScalarVector) -> None:
        self._rgb = RGB(values[:3])
        self._alpha = float(values[3])

    @property
    def value(self) -> ScalarVector:
        return self._rgb.value + (self._alpha,)

    @property
    def rgb(self) -> RGB:
        return self._rgb

    def _rewrap(self, rgb: RGB) -> RGBA:
        return RGBA(rgb.value + (self._alpha,))

    @property
    def red(self) -> int:
        return self._rgb.red

    @property
    def green(self) -> int:
        return self._rgb.green

    @property
    def blue(self) -> int:
        return self._rgb.blue

    def with_red(self, red: int) -> RGBA:
        return self._rewrap(self._rgb.with_red(red))

    def with_green(self, green: int) -> RGBA:
        return self._rewrap(self._rgb.with_green(green))

    def with_blue(self, blue: int) -> RGBA:
        return self._rewrap(self._rgb.with_blue(blue))
