"""
Text grammar shared by the color value types.

Functional forms look like ``prefix(f1,f2,...)``; hex colors are ``#`` plus 3,
6 or 8 hex digits. Parsing is case-insensitive and ignores whitespace around
the whole text and around each field.
"""
from __future__ import annotations
import re
from typing import List, Sequence, Tuple

from ..errors import ColorFormatError
from ..log import get_logger
from ..types.channel_type import (
    ChannelType,
    OPAQUE,
    percent_channels,
    storage_maxima,
)
from ..conversions.alpha import alpha_to_byte, byte_to_alpha

_logger = get_logger('easycolor.codec')

_UINT = re.compile(r"\+?\d+")
_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?")
_HEX_DIGITS = re.compile(r"[0-9a-f]+")


def _reject(text: str, type_name: str, reason: str) -> ColorFormatError:
    _logger.debug("Rejected %s text %r: %s", type_name, text, reason)
    return ColorFormatError(text, type_name)


def split_functional(text: str, prefix: str, count: int, type_name: str) -> List[str]:
    """Strip ``prefix(`` and ``)`` and return exactly ``count`` trimmed fields."""
    color = text.strip().lower()
    head = prefix + "("
    if not (color.startswith(head) and color.endswith(")")):
        raise _reject(text, type_name, "bad prefix or parenthesis")

    fields = [field.strip() for field in color[len(head):-1].split(",")]
    if len(fields) != count:
        raise _reject(text, type_name, f"expected {count} fields, got {len(fields)}")
    return fields


def parse_field(token: str, channel: ChannelType, text: str, type_name: str) -> int | float:
    """
    Parse one field as the numeric type of its channel.

    Ranges are not checked here beyond the channel's storage width; the
    value classes validate ranges and raise ColorValueError.
    """
    if channel in percent_channels and token.endswith("%"):
        token = token[:-1].rstrip()

    if channel == ChannelType.ALPHA:
        if not _FLOAT.fullmatch(token):
            raise _reject(text, type_name, f"{token!r} is not a number")
        return float(token)

    if not _UINT.fullmatch(token):
        raise _reject(text, type_name, f"{token!r} is not an unsigned integer")
    value = int(token)
    if value > storage_maxima[channel]:
        raise _reject(text, type_name, f"{token!r} overflows a {channel.value} channel")
    return value


def parse_functional(
    text: str,
    prefix: str,
    channels: Sequence[ChannelType],
    type_name: str,
) -> Tuple[int | float, ...]:
    fields = split_functional(text, prefix, len(channels), type_name)
    return tuple(
        parse_field(token, channel, text, type_name)
        for token, channel in zip(fields, channels)
    )


def parse_hex(text: str, type_name: str = "Hex") -> Tuple[int, int, int, float]:
    """
    Parse ``#RGB``, ``#RRGGBB`` or ``#RRGGBBAA``.

    The short form duplicates each nibble; the alpha byte becomes ``byte / 255``.
    """
    color = text.strip().lower()
    if not color.startswith("#"):
        raise _reject(text, type_name, "missing '#'")

    digits = color[1:]
    if len(digits) not in (3, 6, 8) or not _HEX_DIGITS.fullmatch(digits):
        raise _reject(text, type_name, "expected 3, 6 or 8 hex digits")

    if len(digits) == 3:
        values = [int(d * 2, 16) for d in digits]
    else:
        values = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]

    alpha = byte_to_alpha(values[3]) if len(values) == 4 else OPAQUE
    return values[0], values[1], values[2], alpha


def format_alpha(alpha: float) -> str:
    return f"{alpha:.2f}"


def format_channel(value: int | float, channel: ChannelType) -> str:
    if channel == ChannelType.ALPHA:
        return format_alpha(value)
    if channel in percent_channels:
        return f"{value}%"
    return str(value)


def format_functional(prefix: str, values: Sequence[int | float], channels: Sequence[ChannelType]) -> str:
    body = ",".join(format_channel(v, ch) for v, ch in zip(values, channels))
    return f"{prefix}({body})"


def format_hex(r: int, g: int, b: int, alpha: float | None = None, alpha_first: bool = False) -> str:
    """Render ``#RRGGBB``, or with an alpha byte appended (or prepended)."""
    body = f"{r:02X}{g:02X}{b:02X}"
    if alpha is None:
        return "#" + body
    a = f"{alpha_to_byte(alpha):02X}"
    return "#" + (a + body if alpha_first else body + a)
