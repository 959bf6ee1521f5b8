"""
Breathe Effect

Smooth fade in/out of the selected color on the whole matrix.
"""

import math

from models.color import ColorBuffer, new_buffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase


class BreatheEffect(BaseEffect):
    """
    Breathe effect: cosine brightness modulation of the selected color.

    One breath = MODULUS ticks (40 x 50 ms = 2 s). Brightness never drops
    below MIN_LEVEL so the matrix does not go fully dark.
    """

    EFFECT_ID = EffectID.BREATHE
    DISPLAY_NAME = "Breathe"
    INTERVAL_MS = 50
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 40

    MIN_LEVEL = 0.05

    def level(self, phase: Phase) -> float:
        """Brightness factor in [MIN_LEVEL, 1.0]; minimum at phase 0, peak at MODULUS / 2"""
        wave = (1 - math.cos(2 * math.pi * phase / self.MODULUS)) / 2
        return min(1.0, self.MIN_LEVEL + (1 - self.MIN_LEVEL) * wave)

    def render(self, phase: Phase) -> ColorBuffer:
        return new_buffer(self.color.scaled(self.level(phase)))
