from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.channel_type import ChannelType, OPAQUE
from ..types.color_types import ColorSpace
from .color_base import ColorBase, WithAlpha
from . import codec

_BYTE = ChannelType.BYTE


class Hex(WithAlpha, ColorBase):
    """
    Hexadecimal color: ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``.

    Stores its own ``(r, g, b, a)`` tuple. ``str()`` drops the alpha byte when
    the color is fully opaque; :meth:`to_hex_alpha` and :meth:`to_alpha_hex`
    always write it.

    >>> hex_color = Hex.parse("#FFDFAC").to_rgba().with_alpha(0.5).to_hex()
    >>> hex_color.to_hex_alpha()
    '#FFDFAC7F'
    >>> hex_color.to_alpha_hex()
    '#7FFFDFAC'
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    space:         ClassVar[ColorSpace] = ColorSpace.HEX
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_BYTE, _BYTE, _BYTE, ChannelType.ALPHA)
    channel_names: ClassVar[Tuple[str, ...]] = ("red", "green", "blue", "alpha")

    @classmethod
    def parse(cls, text: str) -> Hex:
        return cls(codec.parse_hex(text, cls.__name__))

    @property
    def red(self) -> int:
        return self.value[0]

    @property
    def green(self) -> int:
        return self.value[1]

    @property
    def blue(self) -> int:
        return self.value[2]

    def with_red(self, red: int) -> Hex:
        return self._with_channel(0, red)

    def with_green(self, green: int) -> Hex:
        return self._with_channel(1, green)

    def with_blue(self, blue: int) -> Hex:
        return self._with_channel(2, blue)

    def to_hex_alpha(self) -> str:
        """``#RRGGBBAA``, alpha byte last."""
        r, g, b, a = self.value
        return codec.format_hex(r, g, b, a)

    def to_alpha_hex(self) -> str:
        """``#AARRGGBB``, alpha byte first."""
        r, g, b, a = self.value
        return codec.format_hex(r, g, b, a, alpha_first=True)

    def __str__(self) -> str:
        r, g, b, a = self.value
        if a == OPAQUE:
            return codec.format_hex(r, g, b)
        return codec.format_hex(r, g, b, a)
