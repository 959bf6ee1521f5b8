"""
Base Effect Class

All matrix effects inherit from BaseEffect and implement render().
"""

import random
from typing import Callable, ClassVar, Optional, Union

from models.color import Color, ColorBuffer, new_buffer
from models.enums import EffectID

Phase = Union[int, float]


class BaseEffect:
    """
    Base class for all LED matrix effects

    An effect turns a phase value into one 25-cell logical frame. The
    AnimationScheduler owns the phase: it calls render(phase), then
    advance(phase) once per tick.

    IMPORTANT:
    - One effect instance = one run. The scheduler builds a fresh instance on
      every start, so any private state (blob positions, rain drops) resets.
    - render() must always return exactly 25 cells.

    Class attributes describe the timing contract:
        INTERVAL_MS:   default tick interval
        INITIAL_PHASE: phase of the first tick
        STEP:          added to the phase every tick (may be negative)
        MODULUS:       phase wraps modulo this value
        RANDOMIZED:    True when frames draw from the random source
    """

    EFFECT_ID: ClassVar[EffectID]
    DISPLAY_NAME: ClassVar[str] = ""
    INTERVAL_MS: ClassVar[int] = 200
    INITIAL_PHASE: ClassVar[Phase] = 0
    STEP: ClassVar[Phase] = 1
    MODULUS: ClassVar[Phase] = 5
    RANDOMIZED: ClassVar[bool] = False

    def __init__(
        self,
        color: Optional[Color] = None,
        rng: Optional[random.Random] = None,
        color_source: Optional[Callable[[], Color]] = None,
    ):
        """
        Args:
            color: Fixed base color (default red)
            rng: Random source for randomized effects
            color_source: Called on every render to fetch the base color;
                takes precedence over color. The controller passes the
                shared selected color here so picks apply to a running effect.
        """
        fixed = color or Color.red()
        self._color_source = color_source or (lambda: fixed)
        self.rng = rng or random.Random()

    @property
    def color(self) -> Color:
        """Current base color for effects that follow the user's picker"""
        return self._color_source()

    # ------------------------------------------------------------
    # Runtime
    # ------------------------------------------------------------

    def render(self, phase: Phase) -> ColorBuffer:
        raise NotImplementedError

    def advance(self, phase: Phase) -> Phase:
        """Next phase: fixed step, wrapped modulo MODULUS"""
        next_phase = (phase + self.STEP) % self.MODULUS
        if isinstance(self.MODULUS, float):
            # keep float phases from accumulating representation error
            next_phase = round(next_phase, 9) % self.MODULUS
        return next_phase

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    @staticmethod
    def blank() -> ColorBuffer:
        return new_buffer()

    @property
    def effect_id(self) -> EffectID:
        return self.EFFECT_ID

    def __repr__(self) -> str:
        return f"{type(self).__name__}(color={self.color})"
