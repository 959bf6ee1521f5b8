"""
Controller state - the single owned state object

Constructed once at startup and passed by reference to the matrix controller,
the animation scheduler and the state poller. Everything runs on one event
loop, so no locking is needed.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.color import Color, ColorBuffer, new_buffer
from models.device import DeviceSnapshot


@dataclass
class ControllerState:
    """
    Shared mutable state

    Attributes:
        matrix: Current logical ColorBuffer (what was last rendered or edited)
        selected_color: Foreground color used by presets, fill and base-hue effects
        snapshot: Last successfully parsed device state (None until first poll)
    """
    matrix: ColorBuffer = field(default_factory=new_buffer)
    selected_color: Color = field(default_factory=Color.red)
    snapshot: Optional[DeviceSnapshot] = None
