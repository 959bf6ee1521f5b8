"""
Wave Effects

A single lit row, column or ring sweeps across the matrix in the selected
color. Everything else is off.
"""

from models.color import MATRIX_SIZE, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of


class WaveTopBottomEffect(BaseEffect):
    """Row sweep downwards: tick 0 lights row 0"""

    EFFECT_ID = EffectID.WAVE_TOP_BOTTOM
    DISPLAY_NAME = "Wave: top to bottom"
    INTERVAL_MS = 200
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = MATRIX_SIZE

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        row = int(phase)
        for col in range(MATRIX_SIZE):
            frame[index_of(row, col)] = self.color
        return frame


class WaveBottomTopEffect(WaveTopBottomEffect):
    """Row sweep upwards: tick 0 lights row 4"""

    EFFECT_ID = EffectID.WAVE_BOTTOM_TOP
    DISPLAY_NAME = "Wave: bottom to top"
    INITIAL_PHASE = MATRIX_SIZE - 1
    STEP = -1


class WaveLeftRightEffect(BaseEffect):
    """Column sweep to the right: tick 0 lights column 0"""

    EFFECT_ID = EffectID.WAVE_LEFT_RIGHT
    DISPLAY_NAME = "Wave: left to right"
    INTERVAL_MS = 200
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = MATRIX_SIZE

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        col = int(phase)
        for row in range(MATRIX_SIZE):
            frame[index_of(row, col)] = self.color
        return frame


class WaveRightLeftEffect(WaveLeftRightEffect):
    """Column sweep to the left: tick 0 lights column 4"""

    EFFECT_ID = EffectID.WAVE_RIGHT_LEFT
    DISPLAY_NAME = "Wave: right to left"
    INITIAL_PHASE = MATRIX_SIZE - 1
    STEP = -1


# Concentric rings around the center cell, innermost first
RINGS = (
    (12,),
    (6, 7, 8, 11, 13, 16, 17, 18),
    (0, 1, 2, 3, 4, 5, 9, 10, 14, 15, 19, 20, 21, 22, 23, 24),
)


class WaveExpandEffect(BaseEffect):
    """Ring expanding from the center outwards, then restarting"""

    EFFECT_ID = EffectID.WAVE_EXPAND
    DISPLAY_NAME = "Wave: expand from center"
    INTERVAL_MS = 300
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = len(RINGS)

    def render(self, phase: Phase) -> ColorBuffer:
        frame = self.blank()
        for index in RINGS[int(phase)]:
            frame[index] = self.color
        return frame
