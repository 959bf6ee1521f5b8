"""
MatrixController - user-facing operations on the 5x5 matrix

Owns no state of its own: everything lives in ControllerState, shared with
the AnimationScheduler and the StatePoller.
"""

from __future__ import annotations

import asyncio
import random
from typing import Optional, Union

from animations.engine import AnimationScheduler
from animations.presets import render_preset
from animations.registry import create_effect
from models.color import MATRIX_CELLS, Color, ColorBuffer, new_buffer
from models.controller_state import ControllerState
from models.enums import EffectID, PresetID
from models.errors import EffectNotFoundError, InvalidLedIndexError, PresetNotFoundError
from services.transmitter import Transmitter
from utils.enum_helper import EnumHelper
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.MATRIX)


class MatrixController:
    """
    Handles matrix editing, presets and effect selection.

    Responsibilities:
    - edit the logical buffer (toggle, clear, fill)
    - one-shot presets (stop effect, paint, send once)
    - start/stop effects through the scheduler

    Does NOT:
    - run timers (AnimationScheduler does)
    - talk HTTP (Transmitter does)
    """

    def __init__(
        self,
        state: ControllerState,
        scheduler: AnimationScheduler,
        transmitter: Transmitter,
        rng: Optional[random.Random] = None,
    ):
        self.state = state
        self.scheduler = scheduler
        self.transmitter = transmitter
        # Handed to effects; None = fresh module-seeded Random per effect
        self.rng = rng

    # ------------------------------------------------------------------
    # Color
    # ------------------------------------------------------------------

    def select_color(self, color: Union[Color, str]) -> Color:
        """Set the foreground color ('#rrggbb' accepted). A running effect picks it up on its next tick."""
        if isinstance(color, str):
            color = Color.from_hex(color)
        self.state.selected_color = color
        log.debug(f"Selected color {color}")
        return color

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def toggle_led(self, index: int) -> Optional[Color]:
        """Lit -> off, off -> selected color. Local only, nothing is sent."""
        if not 0 <= index < MATRIX_CELLS:
            raise InvalidLedIndexError(index)

        matrix = list(self.state.matrix)
        matrix[index] = None if matrix[index] is not None else self.state.selected_color
        self.state.matrix = matrix
        return matrix[index]

    def clear(self, keep_animation: bool = False) -> None:
        """All cells off (local only). Stops the running effect unless keep_animation."""
        if not keep_animation:
            self.scheduler.stop()
        self.state.matrix = new_buffer()

    def fill(self) -> None:
        """Stop any effect, then paint every cell in the selected color (local only)"""
        self.scheduler.stop()
        self.state.matrix = new_buffer(self.state.selected_color)

    def send(self) -> asyncio.Task:
        """Push the current buffer to the board"""
        return self.transmitter.send(self.state.matrix)

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------

    def set_preset(self, preset: Union[PresetID, str]) -> ColorBuffer:
        """Stop any effect, paint the pattern in the selected color, send once"""
        preset_id = self._resolve(PresetID, preset, PresetNotFoundError)

        self.scheduler.stop()
        self.state.matrix = render_preset(preset_id, self.state.selected_color)
        self.send()

        log.info(f"Preset {preset_id.name}", color=str(self.state.selected_color))
        return self.state.matrix

    # ------------------------------------------------------------------
    # Effects
    # ------------------------------------------------------------------

    def start_effect(self, effect: Union[EffectID, str], interval_ms: Optional[int] = None) -> EffectID:
        """Replace whatever is running with a fresh run of `effect`"""
        effect_id = self._resolve(EffectID, effect, EffectNotFoundError)
        instance = create_effect(effect_id, rng=self.rng, color_source=self._selected_color)
        self.scheduler.start(instance, interval_ms)
        return effect_id

    def stop_effect(self) -> None:
        self.scheduler.stop()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _selected_color(self) -> Color:
        return self.state.selected_color

    @staticmethod
    def _resolve(enum_class, value, error_class):
        try:
            return EnumHelper.to_enum(enum_class, value)
        except (ValueError, TypeError):
            raise error_class(str(value)) from None
