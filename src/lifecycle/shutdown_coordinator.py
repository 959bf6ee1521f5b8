"""
Graceful shutdown

The controller runs until one of two things happens: SIGINT/SIGTERM (or an
explicit request_shutdown()), or a task in a critical category dies. Then
every registered handler runs once, highest shutdown_priority first:

    130 AnimationShutdownHandler      stop the effect loop
    110 PollerShutdownHandler         stop state polling
     90 APIServerShutdownHandler      stop uvicorn
     30 AllTasksCancellationHandler   cancel whatever is left
     10 DeviceClientShutdownHandler   close the HTTP client
"""

import asyncio
import signal
from typing import List, Optional

from lifecycle.task_registry import TaskRegistry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SHUTDOWN)

# TaskCategory names whose failure takes the controller down
CRITICAL_CATEGORIES = frozenset({"API"})

FAILURE_CHECK_INTERVAL = 0.5


class ShutdownCoordinator:

    def __init__(self, timeout_per_handler: float = 5.0, total_timeout: float = 15.0):
        self._handlers: List = []
        self._shutdown_event: Optional[asyncio.Event] = None
        self._timeout_per_handler = timeout_per_handler
        self._total_timeout = total_timeout
        self._reason: Optional[str] = None

    @property
    def reason(self) -> Optional[str]:
        """What triggered shutdown: signal name, request reason or task failure"""
        return self._reason

    def register(self, handler) -> None:
        """Add a handler (shutdown_priority: int, async shutdown())"""
        for attr in ("shutdown_priority", "shutdown"):
            if not hasattr(handler, attr):
                raise ValueError(f"{handler!r} is not a shutdown handler (missing {attr})")
        self._handlers.append(handler)
        log.debug("Shutdown handler registered", handler=type(handler).__name__)

    def get_handler(self, handler_type: type):
        return next((h for h in self._handlers if isinstance(h, handler_type)), None)

    # --- triggers ---

    def _trigger(self, reason: str) -> None:
        if self._shutdown_event is None:
            self._shutdown_event = asyncio.Event()
        self._reason = reason
        self._shutdown_event.set()

    def setup_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        self._shutdown_event = asyncio.Event()

        def on_signal(sig: signal.Signals) -> None:
            log.info("Signal received", signal=sig.name)
            self._trigger(sig.name)

        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, on_signal, sig)
        log.debug("Signal handlers installed", signals="SIGINT, SIGTERM")

    def request_shutdown(self, reason: str) -> None:
        self._trigger(reason)

    def _failed_critical_task(self):
        return next(
            (r for r in TaskRegistry.instance().failed() if r.info.category.name in CRITICAL_CATEGORIES),
            None,
        )

    async def wait_for_shutdown(self) -> None:
        """
        Block until shutdown is triggered or a critical task has failed.

        Raises:
            RuntimeError: neither setup_signal_handlers() nor request_shutdown()
                was called first
        """
        if self._shutdown_event is None:
            raise RuntimeError("Call setup_signal_handlers() first")

        while not self._shutdown_event.is_set():
            failed = self._failed_critical_task()
            if failed is not None:
                log.error(
                    "Critical task failed",
                    task=failed.info.description,
                    error=repr(failed.finished_with_error),
                )
                self._reason = f"Task failure: {failed.info.description}"
                return

            critical = [
                r.task for r in TaskRegistry.instance().active()
                if r.info.category.name in CRITICAL_CATEGORIES
            ]
            event_wait = asyncio.create_task(self._shutdown_event.wait())
            try:
                await asyncio.wait(
                    {event_wait, *critical},
                    timeout=FAILURE_CHECK_INTERVAL,
                    return_when=asyncio.FIRST_COMPLETED,
                )
            finally:
                event_wait.cancel()

    # --- sequence ---

    async def shutdown_all(self) -> None:
        """
        Run the handlers by descending priority. A handler that raises or
        overruns timeout_per_handler is logged and skipped; once total_timeout
        has elapsed the remaining handlers are not started.
        """
        log.info("Shutting down", reason=self._reason or "unknown")

        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._total_timeout

        for handler in sorted(self._handlers, key=lambda h: h.shutdown_priority, reverse=True):
            name = type(handler).__name__
            if loop.time() > deadline:
                log.error("Shutdown timeout exceeded, skipping remaining handlers", next=name)
                break

            try:
                await asyncio.wait_for(handler.shutdown(), timeout=self._timeout_per_handler)
                log.debug("Handler done", handler=name, priority=handler.shutdown_priority)
            except asyncio.TimeoutError:
                log.error("Handler timed out", handler=name, timeout_s=self._timeout_per_handler)
            except asyncio.CancelledError:
                log.warn("Shutdown sequence cancelled", handler=name)
                raise
            except Exception as e:
                log.error("Handler failed", handler=name, error=repr(e))

        log.info("Shutdown complete")
