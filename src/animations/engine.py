"""
Animation Scheduler

Owns the single repeating timer that drives the matrix. On every tick the
active effect renders a frame, the frame is stored into ControllerState and
handed to the Transmitter, and the phase advances.
"""

import asyncio
from typing import Dict, Optional

from animations.base import BaseEffect, Phase
from lifecycle.task_registry import TaskCategory, create_tracked_task
from models.color import ColorBuffer, validate_buffer
from models.controller_state import ControllerState
from models.enums import EffectID, SchedulerState
from services.transmitter import Transmitter
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)


class AnimationScheduler:
    """
    Single-timer state machine

        IDLE --start--> RUNNING --stop--> IDLE
        RUNNING --start--> (cancel old) --> RUNNING

    • At most one loop task exists at any instant
    • tick() is synchronous, so a cancelled loop can never tick again
    • The loop fires first after one interval and keeps a fixed cadence
      (deadline scheduling), so ticks over elapsed time == elapsed // interval
    """

    def __init__(
        self,
        controller_state: ControllerState,
        transmitter: Transmitter,
        interval_overrides: Optional[Dict[EffectID, int]] = None,
    ):
        self.controller_state = controller_state
        self.transmitter = transmitter
        # Per-effect interval from config, used when start() gets no interval
        self.interval_overrides = dict(interval_overrides or {})

        self._task: Optional[asyncio.Task] = None
        self._effect: Optional[BaseEffect] = None
        self._phase: Phase = 0
        self._interval_ms: Optional[int] = None
        self._tick_count = 0

    # ============================================================
    # Core control methods
    # ============================================================

    def start(self, effect: BaseEffect, interval_ms: Optional[int] = None) -> None:
        """
        Install `effect` as the active animation.

        Any running animation is cancelled first. interval_ms falls back to
        the configured override, then to the effect's own INTERVAL_MS.
        """
        if interval_ms is None:
            interval_ms = self.interval_overrides.get(effect.EFFECT_ID, effect.INTERVAL_MS)
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")

        if self.is_running:
            log.debug("Replacing running effect", previous=self.active_effect_id.name)
            self.stop()

        self._effect = effect
        self._phase = effect.INITIAL_PHASE
        self._interval_ms = interval_ms
        self._tick_count = 0

        self._task = create_tracked_task(
            self._run_loop(interval_ms / 1000.0),
            category=TaskCategory.ANIMATION,
            description=f"Effect {effect.EFFECT_ID.name} @ {interval_ms}ms",
        )

        log.info("Started effect", effect=effect.EFFECT_ID.name, interval_ms=interval_ms)

    def stop(self) -> None:
        """Cancel the running loop. The matrix keeps its last rendered frame."""
        task, self._task = self._task, None
        if task is None:
            return

        task.cancel()
        effect_name = self._effect.EFFECT_ID.name if self._effect else "?"
        self._effect = None
        self._interval_ms = None

        log.info("Stopped effect", effect=effect_name, ticks=self._tick_count)

    async def shutdown(self) -> None:
        """Stop and wait for the loop task to finish"""
        task = self._task
        self.stop()
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            pass

    # ============================================================
    # Tick
    # ============================================================

    def tick(self) -> Optional[ColorBuffer]:
        """
        Render one frame, publish it and advance the phase.

        Render failures skip the tick; send failures are logged. Neither
        stops the loop.
        """
        effect = self._effect
        if effect is None:
            return None

        self._tick_count += 1

        try:
            frame = validate_buffer(effect.render(self._phase))
        except Exception as e:
            log.error(
                "Effect render failed, tick skipped",
                effect=effect.EFFECT_ID.name,
                phase=self._phase,
                error=str(e),
            )
            return None

        self.controller_state.matrix = frame
        self._phase = effect.advance(self._phase)

        try:
            self.transmitter.send(frame)
        except Exception as e:
            log.error("Frame send failed", effect=effect.EFFECT_ID.name, error=str(e))

        return frame

    # ------------------------------------------------------------
    # Internal loop
    # ------------------------------------------------------------

    async def _run_loop(self, interval: float) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time()
        try:
            while True:
                deadline += interval
                await asyncio.sleep(max(0.0, deadline - loop.time()))
                self.tick()
        except asyncio.CancelledError:
            log.debug("Effect loop cancelled")

    # ------------------------------------------------------------
    # Runtime helpers
    # ------------------------------------------------------------

    @property
    def state(self) -> SchedulerState:
        return SchedulerState.RUNNING if self.is_running else SchedulerState.IDLE

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def active_effect(self) -> Optional[BaseEffect]:
        return self._effect if self.is_running else None

    @property
    def active_effect_id(self) -> Optional[EffectID]:
        effect = self.active_effect
        return effect.EFFECT_ID if effect else None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms if self.is_running else None

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def phase(self) -> Phase:
        return self._phase
