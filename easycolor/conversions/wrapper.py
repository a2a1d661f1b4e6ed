from __future__ import annotations
from typing import Callable, Dict, Tuple, Union

from ..types.color_types import ColorSpace, RGBATuple, ScalarVector, to_color_space
from ..types.channel_type import OPAQUE
from .alpha import flatten_rgba
from .to_cmyk import rgb_to_cmyk
from .to_hsl import rgb_to_hsl, rgba_to_hsla
from .to_hsv import rgb_to_hsv
from .to_rgb import cmyk_to_rgb, hsl_to_rgb, hsv_to_rgb

# Lift a raw channel tuple onto the RGBA pivot
TO_PIVOT: Dict[ColorSpace, Callable[[ScalarVector], RGBATuple]] = {
    ColorSpace.HEX:  lambda c: (c[0], c[1], c[2], c[3]),
    ColorSpace.RGBA: lambda c: (c[0], c[1], c[2], c[3]),
    ColorSpace.RGB:  lambda c: (c[0], c[1], c[2], OPAQUE),
    ColorSpace.HSL:  lambda c: hsl_to_rgb(c[0], c[1], c[2]) + (OPAQUE,),
    ColorSpace.HSLA: lambda c: hsl_to_rgb(c[0], c[1], c[2]) + (c[3],),
    ColorSpace.HSV:  lambda c: hsv_to_rgb(c[0], c[1], c[2]) + (OPAQUE,),
    ColorSpace.CMYK: lambda c: cmyk_to_rgb(c[0], c[1], c[2], c[3]) + (OPAQUE,),
}

# Lower the RGBA pivot into a target space; non-alpha targets are flattened on white
FROM_PIVOT: Dict[ColorSpace, Callable[[RGBATuple], ScalarVector]] = {
    ColorSpace.HEX:  lambda p: p,
    ColorSpace.RGBA: lambda p: p,
    ColorSpace.RGB:  lambda p: flatten_rgba(*p),
    ColorSpace.HSL:  lambda p: rgb_to_hsl(*flatten_rgba(*p)),
    ColorSpace.HSLA: lambda p: rgba_to_hsla(*p),
    ColorSpace.HSV:  lambda p: rgb_to_hsv(*flatten_rgba(*p)),
    ColorSpace.CMYK: lambda p: rgb_to_cmyk(*flatten_rgba(*p)),
}

# Pairs that bypass the pivot; HSLA embeds an HSL unchanged
DIRECT: Dict[Tuple[ColorSpace, ColorSpace], Callable[[ScalarVector], ScalarVector]] = {
    (ColorSpace.HSL, ColorSpace.HSLA): lambda c: (c[0], c[1], c[2], OPAQUE),
}


def to_pivot(color: ScalarVector, from_space: Union[ColorSpace, str]) -> RGBATuple:
    return TO_PIVOT[to_color_space(from_space)](tuple(color))


def from_pivot(pivot: RGBATuple, to_space: Union[ColorSpace, str]) -> ScalarVector:
    return tuple(FROM_PIVOT[to_color_space(to_space)](tuple(pivot)))


def convert(
    color: ScalarVector,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> Tuple:
    """
    Convert a raw channel tuple between any two color spaces.

    Every pair except HSL -> HSLA routes through the RGBA pivot, so e.g.
    HSV -> CMYK runs HSV -> RGB -> CMYK. HSL -> HSLA keeps the channels and
    adds an opaque alpha. Inputs are assumed valid; the conversion never fails.

    Args:
        color: channel tuple in ``from_space`` (alpha last where present)
        from_space: source ColorSpace or name
        to_space: target ColorSpace or name

    Returns:
        Channel tuple in ``to_space``
    """
    fs, ts = to_color_space(from_space), to_color_space(to_space)
    if fs == ts:
        return tuple(color)  # No conversion needed
    direct = DIRECT.get((fs, ts))
    if direct is not None:
        return tuple(direct(tuple(color)))
    return from_pivot(to_pivot(color, fs), ts)
