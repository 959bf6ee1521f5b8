"""
Matrix Rain Effect

Green drops fall down the columns with a fading tail.
"""

from typing import Dict

from models.color import MATRIX_SIZE, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of

# Brightness of the head and each trailing cell
TRAIL_LEVELS = (1.0, 0.5, 0.2)


class MatrixRainEffect(BaseEffect):
    """
    Each column holds at most one drop. Idle columns spawn a new drop at the
    top with probability SPAWN_CHANCE per tick; a drop is removed once its
    whole tail has left the bottom row.
    """

    EFFECT_ID = EffectID.MATRIX_RAIN
    DISPLAY_NAME = "Matrix rain"
    INTERVAL_MS = 120
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 100
    RANDOMIZED = True

    SPAWN_CHANCE = 0.3

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # column -> row of the drop's head
        self.drops: Dict[int, int] = {}

    def _update_drops(self) -> None:
        for col in list(self.drops):
            self.drops[col] += 1
            if self.drops[col] - len(TRAIL_LEVELS) >= MATRIX_SIZE - 1:
                del self.drops[col]

        for col in range(MATRIX_SIZE):
            if col not in self.drops and self.rng.random() < self.SPAWN_CHANCE:
                self.drops[col] = 0

    def render(self, phase: Phase) -> ColorBuffer:
        self._update_drops()

        frame = self.blank()
        for col, head in self.drops.items():
            for offset, level in enumerate(TRAIL_LEVELS):
                row = head - offset
                if 0 <= row < MATRIX_SIZE:
                    frame[index_of(row, col)] = Color(0, int(255 * level), 0)
        return frame
