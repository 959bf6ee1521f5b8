from __future__ import annotations
from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from services.device_client import DeviceClient

log = get_logger().for_category(LogCategory.SHUTDOWN)


class DeviceClientShutdownHandler(IShutdownHandler):
    """
    Drains pending fire-and-forget requests and closes the HTTP client.

    Priority: 10 (last: everything that could send has stopped)
    """

    def __init__(self, client: "DeviceClient"):
        self.client = client

    @property
    def shutdown_priority(self) -> int:
        return 10

    async def shutdown(self) -> None:
        log.info("Closing device client...", pending=self.client.pending_count)
        await self.client.close()
