from __future__ import annotations
from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from services.state_poller import StatePoller

log = get_logger().for_category(LogCategory.SHUTDOWN)


class PollerShutdownHandler(IShutdownHandler):
    """
    Stops the state poller and its in-flight fetches.

    Priority: 110 (after animations, before the API server)
    """

    def __init__(self, poller: "StatePoller"):
        self.poller = poller

    @property
    def shutdown_priority(self) -> int:
        return 110

    async def shutdown(self) -> None:
        log.info("Stopping state poller...")
        await self.poller.stop()
