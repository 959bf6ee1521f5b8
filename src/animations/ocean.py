"""
Ocean Waves Effect

Circular swell rolling outward from the center in blue and cyan.
"""

import math

from models.color import MATRIX_SIZE, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of

CENTER = (MATRIX_SIZE - 1) / 2
MAX_DISTANCE = math.hypot(CENTER, CENTER)

CYAN_HUE = 0.5
BLUE_HUE = 0.67


class OceanWavesEffect(BaseEffect):
    """
    brightness = (sin(1.5 * d - 2pi * phase) + 1) / 2, d = distance to (2, 2)
    hue goes from cyan at the center to deep blue at the corners
    """

    EFFECT_ID = EffectID.OCEAN_WAVES
    DISPLAY_NAME = "Ocean waves"
    INTERVAL_MS = 100
    INITIAL_PHASE = 0.0
    STEP = 0.05
    MODULUS = 1.0

    WAVE_NUMBER = 1.5
    MIN_LEVEL = 0.1

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        for row in range(MATRIX_SIZE):
            for col in range(MATRIX_SIZE):
                distance = math.hypot(row - CENTER, col - CENTER)
                swell = (math.sin(self.WAVE_NUMBER * distance - 2 * math.pi * phase) + 1) / 2
                hue = CYAN_HUE + (BLUE_HUE - CYAN_HUE) * (distance / MAX_DISTANCE)
                level = self.MIN_LEVEL + (1 - self.MIN_LEVEL) * swell
                frame[index_of(row, col)] = Color.from_hsv(hue, 1.0, level)
        return frame
