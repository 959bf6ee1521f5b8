"""
Device command service - one-shot OLED, buzzer and RGB LED commands

All commands are fire-and-forget form POSTs; transport failures are logged by
the DeviceClient and never raised here.
"""

import asyncio
from typing import List, Optional
from urllib.parse import urlencode

from services.device_client import DeviceClient
from services.oled_buffer import OledBuffer
from utils.colors import clamp_channel
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.DEVICE)

OLED_PATH = "/oled.cgi"
BUZZER_PATH = "/buzzer.cgi"
RGB_PATH = "/rgb.cgi"


class DeviceCommandService:
    """Sends display/sound/LED commands and keeps the OLED preview"""

    def __init__(self, client: DeviceClient, oled: Optional[OledBuffer] = None):
        self.client = client
        self.oled = oled or OledBuffer()

    def send_oled_text(self, text: str) -> Optional[asyncio.Task]:
        """
        Show a line on the OLED.

        Blank text is ignored (no request). Returns the scheduled task or None.
        """
        line = self.oled.push(text)
        if line is None:
            log.debug("Ignoring blank OLED text")
            return None

        log.info("OLED text", text=line)
        return self.client.post_form(OLED_PATH, urlencode({"text": line}))

    def oled_lines(self) -> List[str]:
        return self.oled.lines

    def play_buzzer(self, freq: int, dur: int, channel: str) -> asyncio.Task:
        """Play a tone: freq in Hz, dur in ms, channel = buzzer id on the board"""
        log.info("Buzzer", freq=freq, dur=dur, channel=channel)
        body = urlencode({"freq": int(freq), "dur": int(dur), "ch": channel})
        return self.client.post_form(BUZZER_PATH, body)

    def set_rgb(self, r: int, g: int, b: int) -> asyncio.Task:
        """Set the on-board RGB LED; channels are clamped to 0-255"""
        r, g, b = clamp_channel(r), clamp_channel(g), clamp_channel(b)
        log.info("RGB LED", r=r, g=g, b=b)
        return self.client.post_form(RGB_PATH, urlencode({"r": r, "g": g, "b": b}))
