"""
Color model - RGB color and the 25-cell matrix buffer

Color is immutable; effects build new instances per frame. A ColorBuffer is a
plain list so effects can fill it by index, with None meaning "off".
"""

from dataclasses import dataclass
from typing import List, Optional

from utils.colors import hex_to_rgb, hsv_to_rgb, rgb_to_hex

MATRIX_SIZE = 5
MATRIX_CELLS = MATRIX_SIZE * MATRIX_SIZE


@dataclass(frozen=True)
class Color:
    """
    RGB color (0-255 per channel)

    Examples:
        color = Color.from_hex("#ff8800")
        color.to_hex()              # "ff8800"
        Color.from_hsv(0.5)         # cyan
        color.scaled(0.5)           # half brightness
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"RGB channel out of range: {(self.r, self.g, self.b)}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Parse '#rrggbb' (color picker format) or bare 'rrggbb'"""
        return cls(*hex_to_rgb(value))

    @classmethod
    def from_hsv(cls, h: float, s: float = 1.0, v: float = 1.0) -> 'Color':
        """Build from HSV with every component in [0, 1]"""
        return cls(*hsv_to_rgb(h, s, v))

    # === CONVERSIONS ===

    def to_hex(self) -> str:
        """Wire format: 6 lowercase hex digits, no '#'"""
        return rgb_to_hex(self.r, self.g, self.b)

    def scaled(self, factor: float) -> 'Color':
        """Return the color with every channel multiplied by factor (clamped to 0-1)"""
        factor = max(0.0, min(1.0, factor))
        # same rounding as hsv_to_rgb
        return Color(*(int(round(c * factor, 6)) for c in (self.r, self.g, self.b)))

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    @staticmethod
    def blue() -> 'Color':
        return Color(0, 0, 255)

    def __str__(self) -> str:
        return f"#{self.to_hex()}"


# Logical row-major buffer: index = row * 5 + col, row 0 = top
ColorBuffer = List[Optional[Color]]


def new_buffer(fill: Optional[Color] = None) -> ColorBuffer:
    """Build a 25-cell buffer, all cells set to fill (default: off)"""
    return [fill] * MATRIX_CELLS


def validate_buffer(buffer: ColorBuffer) -> ColorBuffer:
    """Raise ValueError unless buffer has exactly 25 cells"""
    if len(buffer) != MATRIX_CELLS:
        raise ValueError(f"ColorBuffer must have {MATRIX_CELLS} cells, got {len(buffer)}")
    return buffer
