"""
Hue Effects

Continuous-hue effects driven by a phase in [0, 1). Every cell is lit at
full saturation and brightness.
"""

import math

from models.color import MATRIX_SIZE, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of

CENTER = (MATRIX_SIZE - 1) / 2  # row/col 2


class GradientEffect(BaseEffect):
    """
    Diagonal hue gradient drifting across the matrix

    hue(row, col) = (phase + (row + col) / 8) mod 1
    """

    EFFECT_ID = EffectID.GRADIENT
    DISPLAY_NAME = "Gradient"
    INTERVAL_MS = 100
    INITIAL_PHASE = 0.0
    STEP = 0.05
    MODULUS = 1.0

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        span = 2 * (MATRIX_SIZE - 1)
        for row in range(MATRIX_SIZE):
            for col in range(MATRIX_SIZE):
                frame[index_of(row, col)] = Color.from_hsv((phase + (row + col) / span) % 1.0)
        return frame


class RainbowEffect(BaseEffect):
    """Horizontal rainbow bands scrolling through the hue circle"""

    EFFECT_ID = EffectID.RAINBOW
    DISPLAY_NAME = "Rainbow"
    INTERVAL_MS = 80
    INITIAL_PHASE = 0.0
    STEP = 0.02
    MODULUS = 1.0

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        for row in range(MATRIX_SIZE):
            color = Color.from_hsv((phase + row / MATRIX_SIZE) % 1.0)
            for col in range(MATRIX_SIZE):
                frame[index_of(row, col)] = color
        return frame


class ColorWheelEffect(BaseEffect):
    """
    Hue follows the angle around the center cell and rotates with the phase.
    The center itself has no angle and shows hue = phase.
    """

    EFFECT_ID = EffectID.COLOR_WHEEL
    DISPLAY_NAME = "Color wheel"
    INTERVAL_MS = 100
    INITIAL_PHASE = 0.0
    STEP = 0.05
    MODULUS = 1.0

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        for row in range(MATRIX_SIZE):
            for col in range(MATRIX_SIZE):
                angle = math.atan2(row - CENTER, col - CENTER) / (2 * math.pi)
                frame[index_of(row, col)] = Color.from_hsv((angle + phase) % 1.0)
        return frame
