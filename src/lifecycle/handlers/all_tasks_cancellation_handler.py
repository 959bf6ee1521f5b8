import asyncio
from typing import List, Optional

from utils.logger import get_logger, LogCategory
from lifecycle.shutdown_protocol import IShutdownHandler
from lifecycle.task_registry import TaskRegistry

log = get_logger().for_category(LogCategory.SHUTDOWN)


class AllTasksCancellationHandler(IShutdownHandler):
    """
    Cancels every tracked task still running, except the current task and
    any explicitly excluded ones.

    Priority: 30
    """

    shutdown_priority = 30

    def __init__(self, exclude_tasks: Optional[List[asyncio.Task]] = None):
        self.exclude_tasks = exclude_tasks or []

    async def shutdown(self) -> None:
        current = asyncio.current_task()
        exclude = [current, *self.exclude_tasks] if current else list(self.exclude_tasks)

        tasks = TaskRegistry.instance().get_tasks_for_shutdown(exclude=exclude)
        if not tasks:
            log.debug("No tracked tasks left to cancel")
            return

        log.info(f"Cancelling {len(tasks)} remaining task(s)")
        for task in tasks:
            task.cancel(msg="shutdown")

        await asyncio.gather(*tasks, return_exceptions=True)
        log.debug("Remaining tasks cancelled")
