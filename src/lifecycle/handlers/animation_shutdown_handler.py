from __future__ import annotations
from typing import TYPE_CHECKING

from lifecycle.shutdown_protocol import IShutdownHandler
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from animations.engine import AnimationScheduler

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AnimationShutdownHandler(IShutdownHandler):
    """
    Stops the running effect before anything else, so no frame is sent
    while the rest of the controller winds down.

    Priority: 130 (first)
    """

    def __init__(self, scheduler: "AnimationScheduler"):
        self.scheduler = scheduler

    @property
    def shutdown_priority(self) -> int:
        return 130

    async def shutdown(self) -> None:
        log.info("Stopping animations...")
        await self.scheduler.shutdown()
        log.debug("AnimationScheduler stopped")
