# No dependencies
from enum import Enum


class ChannelType(str, Enum):
    BYTE = "byte"        # r, g, b
    HUE = "hue"          # degrees
    PERCENT = "percent"  # saturation, lightness, value
    INK = "ink"          # cmyk percentages, stored in a byte
    ALPHA = "alpha"      # opacity fraction


# Largest valid value of each channel
channel_maxima = {
    ChannelType.BYTE: 255,
    ChannelType.HUE: 360,
    ChannelType.PERCENT: 100,
    ChannelType.INK: 100,
    ChannelType.ALPHA: 1.0,
}

# Largest value the channel's storage can hold; text above it is malformed
storage_maxima = {
    ChannelType.BYTE: 0xFF,
    ChannelType.HUE: 0xFFFFFFFF,
    ChannelType.PERCENT: 0xFFFFFFFF,
    ChannelType.INK: 0xFF,
}

channel_classes = {
    ChannelType.BYTE: int,
    ChannelType.HUE: int,
    ChannelType.PERCENT: int,
    ChannelType.INK: int,
    ChannelType.ALPHA: float,
}

# Channels whose text form may carry a trailing '%'
percent_channels = {ChannelType.PERCENT}

HUE_360 = 360
OPAQUE = 1.0
