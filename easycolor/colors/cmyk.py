from __future__ import annotations
from typing import ClassVar, Tuple

from ..types.channel_type import ChannelType
from ..types.color_types import ColorSpace
from .color_base import ColorBase

_INK = ChannelType.INK


class CMYK(ColorBase):
    """
    Cyan, magenta, yellow and black percentages: ``cmyk(c,m,y,k)``.

    >>> str(CMYK((100, 34, 53, 38)).to_hex())
    '#00684A'
    """
    __slots__ = ()

    num_channels:  ClassVar[int] = 4
    space:         ClassVar[ColorSpace] = ColorSpace.CMYK
    channels:      ClassVar[Tuple[ChannelType, ...]] = (_INK, _INK, _INK, _INK)
    channel_names: ClassVar[Tuple[str, ...]] = ("cyan", "magenta", "yellow", "black")

    @property
    def cyan(self) -> int:
        return self.value[0]

    @property
    def magenta(self) -> int:
        return self.value[1]

    @property
    def yellow(self) -> int:
        return self.value[2]

    @property
    def black(self) -> int:
        return self.value[3]

    def with_cyan(self, cyan: int) -> CMYK:
        return self._with_channel(0, cyan)

    def with_magenta(self, magenta: int) -> CMYK:
        return self._with_channel(1, magenta)

    def with_yellow(self, yellow: int) -> CMYK:
        return self._with_channel(2, yellow)

    def with_black(self, black: int) -> CMYK:
        return self._with_channel(3, black)
