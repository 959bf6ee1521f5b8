"""
Sparkle and Disco Effects

Random twinkles. Both draw from the random source on every tick.
"""

from models.color import MATRIX_CELLS, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase


class SparkleEffect(BaseEffect):
    """A handful (3-5) of random cells flash in random hues; the rest stay off"""

    EFFECT_ID = EffectID.SPARKLE
    DISPLAY_NAME = "Sparkle"
    INTERVAL_MS = 150
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 100
    RANDOMIZED = True

    MIN_SPARKS = 3
    MAX_SPARKS = 5

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        count = self.rng.randint(self.MIN_SPARKS, self.MAX_SPARKS)
        for index in self.rng.sample(range(MATRIX_CELLS), count):
            frame[index] = Color.from_hsv(self.rng.random())
        return frame


class DiscoEffect(BaseEffect):
    """Every cell gets a random hue every tick"""

    EFFECT_ID = EffectID.DISCO
    DISPLAY_NAME = "Disco"
    INTERVAL_MS = 150
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 100
    RANDOMIZED = True

    def render(self, phase: Phase) -> ColorBuffer:
        return [Color.from_hsv(self.rng.random()) for _ in range(MATRIX_CELLS)]
