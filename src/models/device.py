"""
Device state models - last parsed poll result
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

# Joystick ADC is 12-bit; the stick rests near mid-scale
JOYSTICK_CENTER = 2048


@dataclass(frozen=True)
class JoystickState:
    """Joystick axes in raw ADC units (0-4095) plus its push button"""
    x: int = JOYSTICK_CENTER
    y: int = JOYSTICK_CENTER
    button_pressed: bool = False


@dataclass(frozen=True)
class DeviceSnapshot:
    """
    Most recently parsed /state.shtml document

    Replaced wholesale on every successful poll. Optional fields stay None when
    the device did not report them; display bindings skip those.
    """
    button_a_pressed: bool = False
    button_b_pressed: bool = False
    joystick: JoystickState = field(default_factory=JoystickState)
    uptime: Optional[str] = None
    temperature: Optional[float] = None
    rgb: Optional[Tuple[int, int, int]] = None
