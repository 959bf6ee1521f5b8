"""
Transmitter - pushes matrix frames to the board

Frames are reordered into physical (flipped) order and serialized as 25
comma-separated 6-digit hex triples.
"""

import asyncio

from engine.matrix_mapper import to_wire_order
from models.color import ColorBuffer, validate_buffer
from services.device_client import DeviceClient
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.TRANSMIT)

MATRIX_PATH = "/matrix.cgi"
OFF_HEX = "000000"


def serialize(buffer: ColorBuffer) -> str:
    """
    Wire payload for one frame: physical order, None -> "000000".

    Example (logical row 0 red):
        "000000,...,000000,ff0000,ff0000,ff0000,ff0000,ff0000"
    """
    validate_buffer(buffer)
    return ",".join(
        color.to_hex() if color is not None else OFF_HEX
        for color in to_wire_order(buffer)
    )


class Transmitter:
    """Fire-and-forget frame sender. No retry, no backoff."""

    def __init__(self, client: DeviceClient):
        self.client = client
        self.frames_sent = 0

    def serialize(self, buffer: ColorBuffer) -> str:
        return serialize(buffer)

    def send(self, buffer: ColorBuffer) -> asyncio.Task:
        """
        Schedule a POST of `buffer` and return immediately.

        The firmware splits the value on raw ',' into a fixed-size buffer, so
        the payload goes out without percent-encoding.
        """
        payload = serialize(buffer)
        self.frames_sent += 1
        log.debug("Sending frame", frame=self.frames_sent)
        return self.client.post_form(MATRIX_PATH, f"data={payload}")
