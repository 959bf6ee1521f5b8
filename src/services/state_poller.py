"""
State Poller - keeps the local view of the board fresh

A second, independent repeating timer: every interval it fetches
/state.shtml, parses it, stores the snapshot in ControllerState and
dispatches the values to the display bindings.
"""

import asyncio
from typing import Optional, Set

import httpx

from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.controller_state import ControllerState
from models.device import DeviceSnapshot
from models.enums import ButtonID
from services.device_client import DeviceClient
from services.display_bindings import DisplayBindings
from services.state_parser import StateParser
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.POLLER)

STATE_PATH = "/state.shtml"


class StatePoller:
    """
    Fixed-interval poller

    • A tick never waits for the previous fetch: each fetch is its own task,
      so a slow board cannot stall the cadence
    • Responses are applied in arrival order
    • Any failure (network, non-2xx, parse) is logged at DEBUG and the last
      good snapshot is kept
    """

    def __init__(
        self,
        client: DeviceClient,
        controller_state: ControllerState,
        bindings: DisplayBindings,
        parser: Optional[StateParser] = None,
        interval_ms: int = 200,
    ):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        self.client = client
        self.controller_state = controller_state
        self.bindings = bindings
        self.parser = parser or StateParser()
        self.interval_ms = interval_ms

        self._task: Optional[asyncio.Task] = None
        self._fetches: Set[asyncio.Task] = set()
        self.polls = 0
        self.failures = 0

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    def start(self) -> asyncio.Task:
        if self._task is not None and not self._task.done():
            return self._task

        self._task = create_tracked_task(
            self._run_loop(),
            category=TaskCategory.BACKGROUND,
            description=f"State poller @ {self.interval_ms}ms",
        )
        log.info("State poller started", interval_ms=self.interval_ms)
        return self._task

    async def stop(self) -> None:
        """Cancel the timer and any in-flight fetches"""
        task, self._task = self._task, None
        tasks = [t for t in (task, *self._fetches) if t is not None and not t.done()]
        for t in tasks:
            t.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        log.info("State poller stopped", polls=self.polls, failures=self.failures)

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    # ------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------

    async def _run_loop(self) -> None:
        loop = asyncio.get_running_loop()
        interval = self.interval_ms / 1000.0
        deadline = loop.time()
        try:
            while True:
                self._spawn_fetch()
                deadline += interval
                await asyncio.sleep(max(0.0, deadline - loop.time()))
        except asyncio.CancelledError:
            log.debug("Poll loop cancelled")

    def _spawn_fetch(self) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self.poll_once())
        self._fetches.add(task)
        task.add_done_callback(self._fetches.discard)
        return task

    async def poll_once(self) -> Optional[DeviceSnapshot]:
        """Fetch, parse and apply one state document. Never raises."""
        self.polls += 1
        try:
            document = await self.client.get_text(STATE_PATH)
            snapshot = self.parser.parse(document)
        except (httpx.HTTPError, ValueError) as e:
            self.failures += 1
            log.debug("State poll failed", error=f"{type(e).__name__}: {e}")
            return None

        self.apply(snapshot)
        return snapshot

    def apply(self, snapshot: DeviceSnapshot) -> None:
        """Store the snapshot and push its values to the bindings"""
        self.controller_state.snapshot = snapshot

        bindings = self.bindings
        bindings.update_button(ButtonID.A, snapshot.button_a_pressed)
        bindings.update_button(ButtonID.B, snapshot.button_b_pressed)

        joystick = snapshot.joystick
        bindings.update_joystick(joystick.x, joystick.y, joystick.button_pressed)

        if snapshot.uptime is not None:
            bindings.update_uptime(snapshot.uptime)
        if snapshot.temperature is not None:
            bindings.update_temperature(snapshot.temperature)
        if snapshot.rgb is not None:
            bindings.update_rgb(*snapshot.rgb)
