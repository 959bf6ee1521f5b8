"""
Color conversion utilities

Pure functions for color space conversions used by the effect library
and the controller.
"""

import colorsys
import re
from typing import Tuple

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def clamp_channel(value: float) -> int:
    """Clamp a channel value into 0-255 and truncate to int"""
    return max(0, min(255, int(value)))


def hsv_to_rgb(h: float, s: float = 1.0, v: float = 1.0) -> Tuple[int, int, int]:
    """
    Convert HSV to RGB (0-255)

    Args:
        h: Hue in [0, 1] (wraps)
        s: Saturation in [0, 1]
        v: Value/brightness in [0, 1]

    Returns:
        (r, g, b) tuple with values 0-255

    Example:
        hsv_to_rgb(0.0)        # (255, 0, 0) red
        hsv_to_rgb(1 / 3)      # (0, 255, 0) green
        hsv_to_rgb(0.0, v=0.5) # (127, 0, 0)
    """
    s = max(0.0, min(1.0, s))
    v = max(0.0, min(1.0, v))
    r, g, b = colorsys.hsv_to_rgb(h % 1.0, s, v)
    return clamp_channel(round(r * 255, 6)), clamp_channel(round(g * 255, 6)), clamp_channel(round(b * 255, 6))


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    """
    Parse '#rrggbb' or 'rrggbb' into an RGB tuple

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Invalid hex color: {value!r}")
    return tuple(int(part, 16) for part in match.groups())  # type: ignore[return-value]


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format RGB as 6 lowercase hex digits without '#'"""
    return f"{clamp_channel(r):02x}{clamp_channel(g):02x}{clamp_channel(b):02x}"
