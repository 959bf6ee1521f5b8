"""Services layer"""

from .device_client import DeviceClient
from .transmitter import Transmitter
from .device_commands import DeviceCommandService
from .oled_buffer import OledBuffer
from .state_parser import StateParser
from .state_poller import StatePoller
from .display_bindings import DisplayBindings, DisplayState

__all__ = [
    "DeviceClient",
    "Transmitter",
    "DeviceCommandService",
    "OledBuffer",
    "StateParser",
    "StatePoller",
    "DisplayBindings",
    "DisplayState",
]
