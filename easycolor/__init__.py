"""Easycolor: conversion, parsing and blending for Hex, RGB(A), HSL(A), HSV and CMYK colors."""

from .colors import (
    ColorBase,
    Hex,
    RGB,
    RGBA,
    HSL,
    HSLA,
    HSV,
    CMYK,
    color_convert,
    color_from_string,
    get_color_class,
)
from .conversions import (
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    rgb_to_cmyk,
    cmyk_to_rgb,
    calc_rgb_with_alpha,
    convert,
)
from .errors import ColorError, ColorFormatError, ColorValueError
from .log import configure, get_logger
from .types.color_types import ColorSpace
from .utils.random_utils import seed

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "ColorBase",
    "Hex", "RGB", "RGBA", "HSL", "HSLA", "HSV", "CMYK",
    "color_convert", "color_from_string", "get_color_class",

    # Conversions
    "rgb_to_hsl", "hsl_to_rgb",
    "rgb_to_hsv", "hsv_to_rgb",
    "rgb_to_cmyk", "cmyk_to_rgb",
    "calc_rgb_with_alpha",
    "convert",
    "ColorSpace",

    # Errors
    "ColorError", "ColorFormatError", "ColorValueError",

    # Utilities
    "configure", "get_logger", "seed",

    # Version
    "__version__",
]
