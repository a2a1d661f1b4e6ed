from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
RGBATuple = Tuple[int, int, int, float]


class ColorSpace(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    CMYK = "cmyk"


ALPHA_SPACES = {ColorSpace.HEX, ColorSpace.RGBA, ColorSpace.HSLA}
HUE_SPACES = {ColorSpace.HSL, ColorSpace.HSLA, ColorSpace.HSV}


def to_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Normalize a color space name to a ColorSpace member.

    Args:
        space: ColorSpace member or its (case-insensitive) name

    Returns:
        The matching ColorSpace

    Raises:
        ValueError: if the name is not a known color space
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None

