from __future__ import annotations
import numbers
from abc import ABC
from typing import Any, Callable, ClassVar, Dict, Optional, Tuple, Union

from boundednumbers.functions import clamp

from ..conversions import convert
from ..errors import ColorValueError
from ..types.channel_type import ChannelType, channel_classes, channel_maxima
from ..types.color_types import ALPHA_SPACES, HUE_SPACES, ColorSpace, Scalar, ScalarVector
from ..utils import get_dimension, nan_to_zero
from ..utils.random_utils import random_channel
from . import codec

# Luma weights for the dark/light test
DARK_LUMA_WEIGHTS = (0.299, 0.587, 0.114)
DARK_LUMA_THRESHOLD = 192.0


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels:  ClassVar[int]
    space:         ClassVar[ColorSpace]
    channels:      ClassVar[Tuple[ChannelType, ...]]
    channel_names: ClassVar[Tuple[str, ...]]

    # attached by colors.color and colors.blend
    convert:    Callable[..., ColorBase]
    with_alpha: Callable[..., ColorBase]
    mix:        Callable[..., ColorBase]
    grayscale:  Callable[..., ColorBase]
    negate:     Callable[..., ColorBase]
    darken:     Callable[..., ColorBase]
    lighten:    Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorBase, ScalarVector]) -> None:
        # ---- Handle ColorBase input: unchecked conversion ----
        if isinstance(value, ColorBase):
            values = convert(value.value, value.space, self.space)
        else:
            values = self._validate(value)

        self._store(tuple(values))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ VALIDATION ------------------
    @classmethod
    def _bound_description(cls) -> str:
        return ", ".join(
            f"{name} must be between 0~{channel_maxima[ch]}"
            for name, ch in zip(cls.channel_names, cls.channels)
        )

    @classmethod
    def _validate(cls, value: Any) -> ScalarVector:
        if get_dimension(value) != cls.num_channels or isinstance(value, (str, bytes)):
            raw = tuple(value) if isinstance(value, (tuple, list)) else (value,)
            raise ColorValueError(cls.__name__, raw, f"expects {cls.num_channels} channel values")

        raw = tuple(value)
        values = []
        for v, ch in zip(raw, cls.channels):
            if not isinstance(v, numbers.Real):
                raise ColorValueError(cls.__name__, raw, "channel values must be numbers")
            if channel_classes[ch] is int:
                if not float(v).is_integer():
                    raise ColorValueError(cls.__name__, raw, f"{ch.value} channels must be integers")
                v = int(v)
            else:
                v = float(v)
            # NaN fails this comparison as well
            if not 0 <= v <= channel_maxima[ch]:
                raise ColorValueError(cls.__name__, raw, cls._bound_description())
            values.append(v)
        return tuple(values)

    def _store(self, values: ScalarVector) -> None:
        self._value = values

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_tuple(cls, values: ScalarVector):
        """Build a color from channel values, validating every range."""
        return cls(values)

    @classmethod
    def parse(cls, text: str):
        """
        Parse the canonical text form of this color type.

        Raises:
            ColorFormatError: the text does not match the grammar
            ColorValueError: the fields parse but are out of range
        """
        return cls(codec.parse_functional(text, cls.space.value, cls.channels, cls.__name__))

    @classmethod
    def random(cls):
        """Generate a color with every channel drawn from the shared random source."""
        return cls(tuple(random_channel(ch) for ch in cls.channels))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.space in ALPHA_SPACES

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.space in HUE_SPACES

    # ------------------ SETTERS (return new values) ------------------
    def _with_channel(self, index: int, new_value: Scalar):
        """Return a copy with one channel replaced, clamped into its range."""
        ch = self.channels[index]
        clamped = channel_classes[ch](clamp(nan_to_zero(new_value), 0, channel_maxima[ch]))
        values = self.value[:index] + (clamped,) + self.value[index + 1:]
        return self.__class__(values)

    # ------------------ CONVERSION SHORTCUTS ------------------
    def to_hex(self):
        return self.convert(ColorSpace.HEX)

    def to_rgb(self):
        return self.convert(ColorSpace.RGB)

    def to_rgba(self):
        return self.convert(ColorSpace.RGBA)

    def to_hsl(self):
        return self.convert(ColorSpace.HSL)

    def to_hsla(self):
        return self.convert(ColorSpace.HSLA)

    def to_hsv(self):
        return self.convert(ColorSpace.HSV)

    def to_cmyk(self):
        return self.convert(ColorSpace.CMYK)

    # ------------------ LUMA ------------------
    def is_dark(self) -> bool:
        r, g, b = convert(self.value, self.space, ColorSpace.RGB)
        wr, wg, wb = DARK_LUMA_WEIGHTS
        return r * wr + g * wg + b * wb < DARK_LUMA_THRESHOLD

    def is_light(self) -> bool:
        return not self.is_dark()

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self.value!r}"

    def __str__(self) -> str:
        return codec.format_functional(self.space.value, self.value, self.channels)


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel and is a fraction in [0, 1].
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    space: ClassVar[ColorSpace]
    value: ScalarVector

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[float] = 1.0

    # attached by colors.blend
    fade:    Callable[..., Any]
    opaquer: Callable[..., Any]

    @property
    def alpha(self) -> float:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Optional[Scalar] = None):
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped into [0, 1]; NaN counts as 0. ``None`` means opaque.

        Returns:
            New color instance with updated alpha.
        """
        a = self.alpha_max if alpha is None else float(clamp(nan_to_zero(alpha), 0.0, self.alpha_max))
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {cls.space: cls for cls in classes}
