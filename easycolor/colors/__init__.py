"""
Easycolor Color Classes
=======================

Immutable value types for seven color encodings:

    - Hex:  ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``
    - RGB:  ``rgb(r,g,b)``
    - RGBA: ``rgba(r,g,b,a)``   (owns an RGB)
    - HSL:  ``hsl(h,s%,l%)``
    - HSLA: ``hsla(h,s%,l%,a)`` (owns an HSL)
    - HSV:  ``hsv(h,s%,v%)``
    - CMYK: ``cmyk(c,m,y,k)``

Usage
-----
>>> from easycolor.colors import Hex, RGBA
>>> hex_color = Hex.parse("#2bc48a")
>>> str(hex_color.to_hsl())
'hsl(157,64%,47%)'
>>> str(RGBA((255, 255, 255, 0.8)).fade(0.5))
'rgba(255,255,255,0.40)'

Notes
-----
- Constructors and ``parse`` validate ranges and raise; ``with_*`` setters
  clamp silently and return a new instance.
- Instances are frozen after initialization.
- Conversions route through the RGBA pivot and never fail.
"""

from .color_base import ColorBase, WithAlpha
from .rgb import RGB, RGBA
from .hsl import HSL, HSLA
from .hsv import HSV
from .cmyk import CMYK
from .hex import Hex
from .color import color_convert, color_from_string, get_color_class, unified_space_to_class
from . import blend
from .blend import mix_rgba, grayscale_rgba, negate_rgba


__all__ = [
    'ColorBase', 'WithAlpha',
    'Hex', 'RGB', 'RGBA', 'HSL', 'HSLA', 'HSV', 'CMYK',
    'color_convert', 'color_from_string', 'get_color_class', 'unified_space_to_class',
    'blend', 'mix_rgba', 'grayscale_rgba', 'negate_rgba',
]
