"""
Lava Lamp Effect

Soft blobs drift around the matrix and bounce off its edges. Each cell glows
with the hue of the strongest nearby blob; brightness falls off linearly with
distance.
"""

import math
from dataclasses import dataclass
from typing import List

from models.color import MATRIX_SIZE, Color, ColorBuffer
from models.enums import EffectID
from animations.base import BaseEffect, Phase
from engine.matrix_mapper import index_of

BOUND = float(MATRIX_SIZE - 1)


@dataclass
class Blob:
    x: float
    y: float
    vx: float
    vy: float
    hue: float

    def move(self) -> None:
        """Advance one tick, reflecting off the [0, 4] x [0, 4] box"""
        self.x += self.vx
        self.y += self.vy
        if self.x < 0 or self.x > BOUND:
            self.vx = -self.vx
            self.x = max(0.0, min(BOUND, self.x))
        if self.y < 0 or self.y > BOUND:
            self.vy = -self.vy
            self.y = max(0.0, min(BOUND, self.y))


class LavaLampEffect(BaseEffect):
    """
    Parameters (class attributes):
        BLOB_COUNT: number of blobs
        RADIUS: distance at which a blob's glow reaches zero
        MAX_SPEED: cells per tick on each axis

    The phase slowly rotates every blob's hue (full turn over 360 ticks).
    """

    EFFECT_ID = EffectID.LAVA_LAMP
    DISPLAY_NAME = "Lava lamp"
    INTERVAL_MS = 100
    INITIAL_PHASE = 0
    STEP = 1
    MODULUS = 360
    RANDOMIZED = True

    BLOB_COUNT = 3
    RADIUS = 2.0
    MAX_SPEED = 0.25

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.blobs: List[Blob] = [self._spawn(i) for i in range(self.BLOB_COUNT)]

    def _spawn(self, i: int) -> Blob:
        return Blob(
            x=self.rng.uniform(0, BOUND),
            y=self.rng.uniform(0, BOUND),
            vx=self.rng.uniform(0.05, self.MAX_SPEED) * self.rng.choice((-1, 1)),
            vy=self.rng.uniform(0.05, self.MAX_SPEED) * self.rng.choice((-1, 1)),
            hue=i / self.BLOB_COUNT,
        )

    def intensity(self, blob: Blob, row: int, col: int) -> float:
        distance = math.hypot(col - blob.x, row - blob.y)
        return max(0.0, 1.0 - distance / self.RADIUS)

    def render(self, phase: Phase) -> ColorBuffer:
        for blob in self.blobs:
            blob.move()

        frame = self.blank()
        drift = phase / self.MODULUS
        for row in range(MATRIX_SIZE):
            for col in range(MATRIX_SIZE):
                contributions = [(self.intensity(b, row, col), b) for b in self.blobs]
                total = min(1.0, sum(value for value, _ in contributions))
                if total <= 0:
                    continue
                _, strongest = max(contributions, key=lambda item: item[0])
                frame[index_of(row, col)] = Color.from_hsv((strongest.hue + drift) % 1.0, 1.0, total)
        return frame
