"""
Effect system for the 5x5 LED matrix

- base: BaseEffect (phase -> 25-cell frame)
- waves, gradient, breathe, lava_lamp, ocean, fire, sparkle, matrix_rain: effects
- presets: static one-shot patterns
- registry: EffectID -> effect class
- engine: AnimationScheduler (single repeating timer)
"""

__all__ = [
    "base",
    "registry",
    "presets",
    "engine",
]
