"""
Models package - Data models for the matrix controller
"""

from .enums import EffectID, PresetID, SchedulerState, ButtonID, TemperatureBand, LogLevel, LogCategory
from .color import Color, ColorBuffer

__all__ = [
    'EffectID',
    'PresetID',
    'SchedulerState',
    'ButtonID',
    'TemperatureBand',
    'LogLevel',
    'LogCategory',
    'Color',
    'ColorBuffer',
]
