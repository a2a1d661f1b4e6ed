"""
Alpha-aware blending on the RGBA pivot.

Every operation lifts its input to RGBA, works there, and lowers the result
back to the input's own type. They are injected into ColorBase (and WithAlpha
for fade/opaquer) at import time.
"""
from __future__ import annotations
from typing import Optional

from boundednumbers.functions import clamp

from ..types.color_types import ColorSpace
from ..utils import is_close_to_int, round_half_away, value_or_default
from .color_base import ColorBase, WithAlpha
from .rgb import RGBA

# Luma weights for grayscale; independent of the dark/light test weights
GRAYSCALE_WEIGHTS = (0.3, 0.59, 0.11)
DEFAULT_MIX_WEIGHT = 0.5


def _truncate(value: float) -> int:
    # values that are an integer up to float noise keep that integer
    if is_close_to_int(value):
        return int(round(value))
    return int(value)


def _lower(color: ColorBase, rgba: RGBA) -> ColorBase:
    return rgba.convert(color.space)


def mix_rgba(base: RGBA, other: RGBA, weight: Optional[float] = None) -> RGBA:
    """
    Weighted alpha-compositing mix of two RGBA colors.

    ``weight`` is the share of ``other`` (default 0.5). The channel weights
    are corrected by the alpha difference, as in Sass/LESS ``mix``.
    """
    p = value_or_default(weight, DEFAULT_MIX_WEIGHT)
    w = 2.0 * p - 1.0
    a = other.alpha - base.alpha

    if w * a == -1.0:
        w1 = (w + 1.0) / 2.0
    else:
        w1 = ((w + a) / (1.0 + w * a) + 1.0) / 2.0
    w2 = 1.0 - w1

    channels = tuple(
        int(clamp(_truncate(w1 * o + w2 * b), 0, 255))
        for o, b in zip(other.rgb.value, base.rgb.value)
    )
    alpha = float(clamp(other.alpha * p + base.alpha * (1.0 - p), 0.0, 1.0))
    return RGBA(channels + (alpha,))


def grayscale_rgba(rgba: RGBA) -> RGBA:
    r, g, b = rgba.rgb.value
    wr, wg, wb = GRAYSCALE_WEIGHTS
    v = int(clamp(_truncate(r * wr + g * wg + b * wb), 0, 255))
    return RGBA((v, v, v, rgba.alpha))


def negate_rgba(rgba: RGBA) -> RGBA:
    r, g, b = rgba.rgb.value
    return RGBA((255 - r, 255 - g, 255 - b, rgba.alpha))


def mix(self: ColorBase, other: ColorBase, weight: Optional[float] = None) -> ColorBase:
    """Mix ``other`` into this color; the result keeps this color's type."""
    return _lower(self, mix_rgba(self.to_rgba(), other.to_rgba(), weight))


def grayscale(self: ColorBase) -> ColorBase:
    return _lower(self, grayscale_rgba(self.to_rgba()))


def negate(self: ColorBase) -> ColorBase:
    return _lower(self, negate_rgba(self.to_rgba()))


def _scale_lightness(color: ColorBase, ratio: float) -> ColorBase:
    # HSL-based spaces are adjusted in place to avoid an RGB round trip
    if color.space in (ColorSpace.HSL, ColorSpace.HSLA):
        hsl = color
    else:
        hsl = color.to_hsla()
    lightness = hsl.lightness  # type: ignore[attr-defined]
    result = hsl.with_lightness(round_half_away(lightness + lightness * ratio))  # type: ignore[attr-defined]
    return result if result.space == color.space else result.convert(color.space)


def darken(self: ColorBase, ratio: float) -> ColorBase:
    """Reduce HSL lightness by ``ratio`` of its current value."""
    return _scale_lightness(self, -ratio)


def lighten(self: ColorBase, ratio: float) -> ColorBase:
    """Increase HSL lightness by ``ratio`` of its current value."""
    return _scale_lightness(self, ratio)


def fade(self: WithAlpha, ratio: float):
    """Reduce opacity by ``ratio`` of the current alpha, clamped to [0, 1]."""
    a = self.alpha
    return self.with_alpha(clamp(a - a * ratio, 0.0, 1.0))


def opaquer(self: WithAlpha, ratio: float):
    """Increase opacity by ``ratio`` of the current alpha, clamped to [0, 1]."""
    a = self.alpha
    return self.with_alpha(clamp(a + a * ratio, 0.0, 1.0))


# Inject blend operations into the color classes
ColorBase.mix = mix
ColorBase.grayscale = grayscale
ColorBase.negate = negate
ColorBase.darken = darken
ColorBase.lighten = lighten
WithAlpha.fade = fade
WithAlpha.opaquer = opaquer

__all__ = [
    "mix_rgba", "grayscale_rgba", "negate_rgba",
    "GRAYSCALE_WEIGHTS",
]
