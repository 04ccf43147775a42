"""Color conversion and validation utilities.

Functions that take a color accept either separate channel values
(``rgb_to_hex(255, 0, 0)``) or a single RgbColor / mapping
(``rgb_to_hex(RgbColor(255, 0, 0))``, ``rgb_to_hex({"r": 255, "g": 0, "b": 0})``).
"""

import math
import random
import re
from typing import Any, Mapping, Optional, Union

from orgkit.domain.models.color import HslColor, RgbColor

HEX_PATTERN = re.compile(r"#?([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")

INVALID_HEX_MESSAGE = "Invalid hex color"
INVALID_RGB_MESSAGE = "Invalid RGB values. Must be between 0-255"
INVALID_PERCENT_MESSAGE = "Percent must be between 0 and 100"

RgbInput = Union[RgbColor, Mapping[str, Any], int, float, None]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _channels(r_or_rgb: RgbInput, g: Any = None, b: Any = None) -> tuple:
    """Normalize the accepted input shapes to an (r, g, b) tuple."""
    if isinstance(r_or_rgb, RgbColor):
        return r_or_rgb.as_tuple()
    if isinstance(r_or_rgb, Mapping):
        return r_or_rgb.get("r"), r_or_rgb.get("g"), r_or_rgb.get("b")
    return r_or_rgb, g, b


def _is_valid_channel(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return 0 <= value <= 255
    if isinstance(value, float):
        return value.is_integer() and 0 <= value <= 255
    return False


def is_valid_hex(color: Any) -> bool:
    """Check that a value is a 3- or 6-digit hex color, with optional '#'."""
    if not isinstance(color, str):
        return False
    return HEX_PATTERN.fullmatch(color) is not None


def is_valid_rgb(r_or_rgb: RgbInput, g: Any = None, b: Any = None) -> bool:
    """Check that all three channels are integers between 0 and 255."""
    return all(_is_valid_channel(channel) for channel in _channels(r_or_rgb, g, b))


def hex_to_rgb(hex_color: str) -> RgbColor:
    """Convert a hex color to RGB

    Raises:
        ValueError: If the hex color is invalid
    """
    if not is_valid_hex(hex_color):
        raise ValueError(INVALID_HEX_MESSAGE)

    digits = hex_color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)

    value = int(digits, 16)
    return RgbColor(r=(value >> 16) & 255, g=(value >> 8) & 255, b=value & 255)


def rgb_to_hex(r_or_rgb: RgbInput, g: Optional[int] = None, b: Optional[int] = None) -> str:
    """Convert RGB to a lowercase '#rrggbb' hex color

    Raises:
        ValueError: If any channel is outside 0-255 or not an integer
    """
    channels = _channels(r_or_rgb, g, b)
    if not all(_is_valid_channel(channel) for channel in channels):
        raise ValueError(INVALID_RGB_MESSAGE)
    return "#" + "".join(f"{int(channel):02x}" for channel in channels)


def _check_percent(percent: float) -> None:
    if percent < 0 or percent > 100:
        raise ValueError(INVALID_PERCENT_MESSAGE)


def darken(color: str, percent: float) -> str:
    """Darken a hex color by a percentage (0-100)"""
    if not is_valid_hex(color):
        raise ValueError(INVALID_HEX_MESSAGE)
    _check_percent(percent)

    rgb = hex_to_rgb(color)
    factor = 1 - percent / 100
    return rgb_to_hex(*(_round_half_up(channel * factor) for channel in rgb.as_tuple()))


def lighten(color: str, percent: float) -> str:
    """Lighten a hex color by a percentage (0-100)"""
    if not is_valid_hex(color):
        raise ValueError(INVALID_HEX_MESSAGE)
    _check_percent(percent)

    rgb = hex_to_rgb(color)
    factor = percent / 100
    return rgb_to_hex(*(_round_half_up(channel + (255 - channel) * factor) for channel in rgb.as_tuple()))


def _relative_luminance(rgb: RgbColor) -> float:
    def to_linear(value: int) -> float:
        normalized = value / 255
        if normalized <= 0.03928:
            return normalized / 12.92
        return ((normalized + 0.055) / 1.055) ** 2.4

    return 0.2126 * to_linear(rgb.r) + 0.7152 * to_linear(rgb.g) + 0.0722 * to_linear(rgb.b)


def get_contrast_ratio(color1: str, color2: str) -> float:
    """WCAG contrast ratio between two hex colors, from 1.0 to 21.0"""
    lum1 = _relative_luminance(hex_to_rgb(color1))
    lum2 = _relative_luminance(hex_to_rgb(color2))
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def random_hex() -> str:
    """Generate a random hex color"""
    return rgb_to_hex(random.randint(0, 255), random.randint(0, 255), random.randint(0, 255))


def rgb_to_hsl(r_or_rgb: RgbInput, g: Optional[int] = None, b: Optional[int] = None) -> HslColor:
    """Convert RGB to HSL (hue in degrees, saturation and lightness in percent)"""
    r, g, b = (channel / 255 for channel in _channels(r_or_rgb, g, b))

    high = max(r, g, b)
    low = min(r, g, b)
    h = s = 0.0
    lightness = (high + low) / 2

    if high != low:
        d = high - low
        s = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            h = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            h = ((b - r) / d + 2) / 6
        else:
            h = ((r - g) / d + 4) / 6

    return HslColor(
        h=_round_half_up(h * 360),
        s=_round_half_up(s * 100),
        l=_round_half_up(lightness * 100),
    )
