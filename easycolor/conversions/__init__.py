"""
Easycolor Color Space Conversions
=================================

Pure functions mapping raw channel tuples between color spaces. They know
nothing about text formats or value classes.

Conversion Functions
--------------------

RGB -> HSL / HSV / CMYK:
    rgb_to_hsl(r, g, b), rgba_to_hsla(r, g, b, a)
    rgb_to_hsv(r, g, b)
    rgb_to_cmyk(r, g, b)

HSL / HSV / CMYK -> RGB:
    hsl_to_rgb(h, s, l)
    hsv_to_rgb(h, s, v)
    cmyk_to_rgb(c, m, y, k)

Alpha:
    calc_rgb_with_alpha(channel, alpha)
        Composite one channel over opaque white
    flatten_rgba(r, g, b, a)
        Composite a whole color over white, truncating to bytes

High-Level API
--------------
    convert(color, from_space, to_space)
        Universal converter routing through the RGBA pivot

Rounding
--------
Kernel outputs are rounded half away from zero on every channel. Flattening
onto white truncates. Hue 360 is treated as hue 0.

Examples
--------
>>> from easycolor.conversions import rgb_to_hsl, convert
>>> rgb_to_hsl(43, 196, 138)
(157, 64, 47)
>>> convert((43, 196, 138, 0.85), "rgba", "rgb")
(74, 204, 155)
"""

from .to_hsl import rgb_to_hsl, rgba_to_hsla, unit_rgb_to_hsl
from .to_hsv import rgb_to_hsv
from .to_cmyk import rgb_to_cmyk
from .to_rgb import hsl_to_rgb, hsv_to_rgb, cmyk_to_rgb, normalize_hue
from .alpha import calc_rgb_with_alpha, flatten_rgba, alpha_to_byte, byte_to_alpha
from .wrapper import convert, to_pivot, from_pivot

from ..types.color_types import ColorSpace

__all__ = [
    # RGB -> X
    'rgb_to_hsl',
    'rgba_to_hsla',
    'unit_rgb_to_hsl',
    'rgb_to_hsv',
    'rgb_to_cmyk',

    # X -> RGB
    'hsl_to_rgb',
    'hsv_to_rgb',
    'cmyk_to_rgb',
    'normalize_hue',

    # Alpha
    'calc_rgb_with_alpha',
    'flatten_rgba',
    'alpha_to_byte',
    'byte_to_alpha',

    # High-level API
    'convert',
    'to_pivot',
    'from_pivot',

    # Types
    'ColorSpace',
]
