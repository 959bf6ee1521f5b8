"""
Enums for the BitDogLab matrix controller
"""

from enum import Enum, auto


class EffectID(Enum):
    """Animated matrix effects (one active at a time)"""
    WAVE_TOP_BOTTOM = auto()
    WAVE_BOTTOM_TOP = auto()
    WAVE_LEFT_RIGHT = auto()
    WAVE_RIGHT_LEFT = auto()
    WAVE_EXPAND = auto()
    GRADIENT = auto()
    RAINBOW = auto()
    COLOR_WHEEL = auto()
    BREATHE = auto()
    LAVA_LAMP = auto()
    OCEAN_WAVES = auto()
    FIRE = auto()
    SPARKLE = auto()
    DISCO = auto()
    MATRIX_RAIN = auto()


class PresetID(Enum):
    """Static matrix patterns (sent once, no timer)"""
    HEART = auto()
    SMILE = auto()
    X = auto()
    CHECK = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    SQUARE = auto()
    DIAMOND = auto()
    PLUS = auto()


class SchedulerState(Enum):
    """Animation scheduler state machine"""
    IDLE = auto()       # No timer installed
    RUNNING = auto()    # Exactly one timer driving the matrix


class ButtonID(Enum):
    """Board push buttons reported by the state document"""
    A = auto()
    B = auto()


class TemperatureBand(Enum):
    """Gauge fill buckets (raw, unclamped temperature)"""
    COOL = auto()       # < 30
    WARM = auto()       # < 50
    HOT = auto()        # < 70
    VERY_HOT = auto()   # >= 70


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # Effect start/stop, scheduler ticks
    MATRIX = auto()      # Matrix controller operations (presets, fill, clear)
    TRANSMIT = auto()    # Matrix frames sent to the device
    DEVICE = auto()      # Device HTTP client, OLED/buzzer/RGB commands
    POLLER = auto()      # State polling and parsing
    DISPLAY = auto()     # Display bindings
    SYSTEM = auto()      # Startup, shutdown, errors

    API = auto()

    SHUTDOWN = auto()
    TASK = auto()

    GENERAL = auto()    # Default general category
