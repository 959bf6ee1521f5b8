"""
Utility functions for the matrix controller
"""

from .colors import (
    hsv_to_rgb,
    hex_to_rgb,
    rgb_to_hex,
)

__all__ = [
    'hsv_to_rgb',
    'hex_to_rgb',
    'rgb_to_hex',
]
