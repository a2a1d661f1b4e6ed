from __future__ import annotations
from typing import Dict, Optional, Union

from ..errors import ColorFormatError
from ..types.channel_type import OPAQUE
from ..types.color_types import ColorSpace, Scalar, to_color_space
from .cmyk import CMYK
from .color_base import ColorBase, build_registry
from .hex import Hex
from .hsl import HSL, HSLA
from .hsv import HSV
from .rgb import RGB, RGBA

unified_space_to_class: Dict[ColorSpace, type[ColorBase]] = build_registry(
    Hex, RGB, RGBA, HSL, HSLA, HSV, CMYK,
)

# Alpha-bearing counterpart used by with_alpha on opaque types
_ALPHA_COUNTERPART: Dict[ColorSpace, ColorSpace] = {
    ColorSpace.RGB: ColorSpace.RGBA,
    ColorSpace.HSL: ColorSpace.HSLA,
    ColorSpace.HSV: ColorSpace.RGBA,
    ColorSpace.CMYK: ColorSpace.RGBA,
}


def get_color_class(color_space: Union[ColorSpace, str]) -> type[ColorBase]:
    color_class = unified_space_to_class.get(to_color_space(color_space))
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class


def color_convert(self: ColorBase, to_space: Union[ColorSpace, str, None] = None) -> ColorBase:
    """
    Convert this color to another color space.

    Routes through the RGBA pivot; alpha is flattened onto white when the
    target has no alpha channel, and set to opaque when the source has none.

    Args:
        to_space: Target color space (e.g. ColorSpace.HSL, "cmyk"). Defaults to
            this color's own space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = to_color_space(to_space or self.space)
    cls = get_color_class(to_space)
    return cls(self)


def with_alpha(self: ColorBase, alpha: Optional[Scalar] = None) -> ColorBase:
    """
    Return the alpha-bearing counterpart of an opaque color.

    RGB becomes RGBA, HSL becomes HSLA, HSV and CMYK become RGBA.

    Args:
        alpha: Alpha to set, clamped into [0, 1]. If None, fully opaque.
    """
    target = self.convert(_ALPHA_COUNTERPART[self.space])
    return target.with_alpha(OPAQUE if alpha is None else alpha)


ColorBase.convert = color_convert
ColorBase.with_alpha = with_alpha


def color_from_string(text: str) -> ColorBase:
    """
    Parse any supported text form, picking the type from its prefix.

    >>> str(color_from_string("hsl(0,100%,50%)").to_rgb())
    'rgb(255,0,0)'
    """
    color = text.strip().lower()
    if color.startswith("#"):
        return Hex.parse(text)

    prefix, paren, _ = color.partition("(")
    try:
        space = to_color_space(prefix) if paren else None
    except ValueError:
        space = None
    if space is None or space == ColorSpace.HEX:
        raise ColorFormatError(text, "Color")
    return get_color_class(space).parse(text)
