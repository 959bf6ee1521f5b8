"""
Fire Effect

Flickering flames: every cell draws a fresh random heat each tick, hotter
toward the bottom row. Non-reproducible by design.
"""

from models.color import MATRIX_SIZE, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of


class FireEffect(BaseEffect):
    """
    heat = row_base * (0.5 + 0.5 * flicker), row_base = (row + 1) / 5
    red = 255 * heat
    green = red * glow, glow in [0, MAX_GLOW] (0 = deep red, higher = orange/yellow)
    """

    EFFECT_ID = EffectID.FIRE
    DISPLAY_NAME = "Fire"
    INTERVAL_MS = 100
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 100
    RANDOMIZED = True

    MAX_GLOW = 0.6

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        for row in range(MATRIX_SIZE):
            row_base = (row + 1) / MATRIX_SIZE
            for col in range(MATRIX_SIZE):
                heat = row_base * (0.5 + 0.5 * self.rng.random())
                glow = self.rng.uniform(0.0, self.MAX_GLOW) * heat
                red = int(255 * heat)
                frame[index_of(row, col)] = Color(red, int(red * glow), 0)
        return frame
