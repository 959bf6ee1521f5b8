"""
Effect registry: EffectID -> effect class
"""

import random
from typing import Callable, Dict, Optional, Type

from animations.base import BaseEffect
from animations.breathe import BreatheEffect
from animations.fire import FireEffect
from animations.gradient import ColorWheelEffect, GradientEffect, RainbowEffect
from animations.lava_lamp import LavaLampEffect
from animations.matrix_rain import MatrixRainEffect
from animations.ocean import OceanWavesEffect
from animations.sparkle import DiscoEffect, SparkleEffect
from animations.waves import (
    WaveBottomTopEffect,
    WaveExpandEffect,
    WaveLeftRightEffect,
    WaveRightLeftEffect,
    WaveTopBottomEffect,
)
from models.color import Color
from models.enums import EffectID
from models.errors import EffectNotFoundError


def _build_effect_registry() -> Dict[EffectID, Type[BaseEffect]]:
    """Build effect registry keyed by each class's EFFECT_ID"""
    classes = (
        WaveTopBottomEffect,
        WaveBottomTopEffect,
        WaveLeftRightEffect,
        WaveRightLeftEffect,
        WaveExpandEffect,
        GradientEffect,
        RainbowEffect,
        ColorWheelEffect,
        BreatheEffect,
        LavaLampEffect,
        OceanWavesEffect,
        FireEffect,
        SparkleEffect,
        DiscoEffect,
        MatrixRainEffect,
    )
    return {cls.EFFECT_ID: cls for cls in classes}


EFFECTS: Dict[EffectID, Type[BaseEffect]] = _build_effect_registry()


def get_effect_class(effect_id: EffectID) -> Type[BaseEffect]:
    effect_class = EFFECTS.get(effect_id)
    if effect_class is None:
        raise EffectNotFoundError(str(effect_id))
    return effect_class


def create_effect(
    effect_id: EffectID,
    color: Optional[Color] = None,
    rng: Optional[random.Random] = None,
    color_source: Optional[Callable[[], Color]] = None,
) -> BaseEffect:
    """Fresh effect instance (new run, reset private state)"""
    return get_effect_class(effect_id)(color=color, rng=rng, color_source=color_source)
