from __future__ import annotations

from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from lifecycle.api_server_wrapper import APIServerWrapper

log = get_logger().for_category(LogCategory.SHUTDOWN)


class APIServerShutdownHandler(IShutdownHandler):
    """Stops uvicorn after the effect loop and the poller"""

    shutdown_priority = 90

    def __init__(self, api_wrapper: "APIServerWrapper"):
        self.api_wrapper = api_wrapper

    async def shutdown(self) -> None:
        if self.api_wrapper.is_running:
            await self.api_wrapper.stop()
        else:
            log.debug("API server already stopped")
