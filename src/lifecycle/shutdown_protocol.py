from typing import Protocol


class IShutdownHandler(Protocol):
    """
    One step of the shutdown sequence run by ShutdownCoordinator.

    Handlers run once each, highest shutdown_priority first. A plain class
    attribute is enough for the priority:

        class PollerShutdownHandler(IShutdownHandler):
            shutdown_priority = 110

            async def shutdown(self) -> None:
                await self.poller.stop()
    """

    @property
    def shutdown_priority(self) -> int: ...

    async def shutdown(self) -> None: ...
