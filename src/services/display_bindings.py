"""
Display bindings - the "apply to display" side of polling

The poller only parses; these bindings receive the reconciled values.
DisplayBindings is the no-op base; DisplayState keeps an in-memory view model
that the API serves.
"""

from typing import Any, Dict, Optional, Tuple

from models.device import JOYSTICK_CENTER
from models.enums import ButtonID
from services.temperature_gauge import GaugeReading, read_gauge
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.DISPLAY)

# Max stick offset from center in the joystick widget
JOYSTICK_TRAVEL_PX = 35.0

PRESSED_LABEL = "Pressed"
RELEASED_LABEL = "Released"


def joystick_offset(value: int) -> float:
    """Raw ADC value -> widget offset in px ((v - 2048) / 2048 * 35)"""
    return (value - JOYSTICK_CENTER) / JOYSTICK_CENTER * JOYSTICK_TRAVEL_PX


def pressed_label(pressed: bool) -> str:
    return PRESSED_LABEL if pressed else RELEASED_LABEL


class DisplayBindings:
    """Binding interface; every update is a no-op here"""

    def update_button(self, button: ButtonID, pressed: bool) -> None:
        pass

    def update_joystick(self, x: int, y: int, button_pressed: bool) -> None:
        pass

    def update_uptime(self, text: str) -> None:
        pass

    def update_temperature(self, value: float) -> None:
        pass

    def update_rgb(self, r: int, g: int, b: int) -> None:
        pass


class DisplayState(DisplayBindings):
    """
    View model of the board's indicators

    Fields that were never reported stay None (the widget keeps its
    placeholder), matching the "only update when present" rule.
    """

    def __init__(self):
        self.buttons: Dict[ButtonID, bool] = {ButtonID.A: False, ButtonID.B: False}
        self.joystick: Tuple[int, int, bool] = (JOYSTICK_CENTER, JOYSTICK_CENTER, False)
        self.uptime: Optional[str] = None
        self.gauge: Optional[GaugeReading] = None
        self.rgb: Optional[Tuple[int, int, int]] = None

    def update_button(self, button: ButtonID, pressed: bool) -> None:
        if self.buttons.get(button) != pressed:
            log.debug(f"Button {button.name}: {pressed_label(pressed)}")
        self.buttons[button] = pressed

    def update_joystick(self, x: int, y: int, button_pressed: bool) -> None:
        self.joystick = (x, y, button_pressed)

    def update_uptime(self, text: str) -> None:
        self.uptime = text

    def update_temperature(self, value: float) -> None:
        self.gauge = read_gauge(value)

    def update_rgb(self, r: int, g: int, b: int) -> None:
        self.rgb = (r, g, b)

    def to_dict(self) -> Dict[str, Any]:
        x, y, joy_pressed = self.joystick
        return {
            "buttons": {
                button.name.lower(): {"pressed": pressed, "label": pressed_label(pressed)}
                for button, pressed in self.buttons.items()
            },
            "joystick": {
                "x": x,
                "y": y,
                "button_pressed": joy_pressed,
                "button_label": pressed_label(joy_pressed),
                "offset_x": joystick_offset(x),
                "offset_y": joystick_offset(y),
            },
            "uptime": self.uptime,
            "temperature": None if self.gauge is None else {
                "value": self.gauge.temperature,
                "angle": self.gauge.angle,
                "band": self.gauge.band.name,
                "color": self.gauge.color,
            },
            "rgb": None if self.rgb is None else {"r": self.rgb[0], "g": self.rgb[1], "b": self.rgb[2]},
        }
