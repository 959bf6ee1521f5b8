"""
Matrix endpoints - editing, presets and effects

Every endpoint is a thin facade over MatrixController. Editing endpoints
(color, toggle, clear, fill) only change the local buffer; call /send (or use
a preset or effect) to push it to the board.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from animations.presets import PRESETS
from animations.registry import EFFECTS
from api.dependencies import get_service_container
from api.schemas.matrix import (
    ColorSelectRequest,
    EffectInfo,
    EffectListResponse,
    EffectStartRequest,
    LedToggleResponse,
    MatrixResponse,
    PresetInfo,
    PresetListResponse,
    SendResponse,
)
from services.service_container import ServiceContainer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)

router = APIRouter(prefix="/matrix", tags=["Matrix"])


def _matrix_response(services: ServiceContainer) -> MatrixResponse:
    scheduler = services.scheduler
    active = scheduler.active_effect_id
    return MatrixResponse(
        cells=[str(color) if color is not None else None for color in services.state.matrix],
        selected_color=str(services.state.selected_color),
        scheduler_state=scheduler.state.name,
        active_effect=active.name if active else None,
        interval_ms=scheduler.interval_ms,
    )


@router.get(
    "",
    response_model=MatrixResponse,
    summary="Get matrix state",
    description="Current logical buffer, selected color and scheduler state"
)
async def get_matrix(services: ServiceContainer = Depends(get_service_container)) -> MatrixResponse:
    return _matrix_response(services)


@router.post(
    "/color",
    response_model=MatrixResponse,
    summary="Select color",
    description="Set the foreground color used by presets, fill, toggles and new effects"
)
async def select_color(
    request: ColorSelectRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> MatrixResponse:
    services.matrix_controller.select_color(request.color)
    return _matrix_response(services)


@router.post(
    "/leds/{index}/toggle",
    response_model=LedToggleResponse,
    summary="Toggle one LED",
    description="Lit LED goes off, unlit LED takes the selected color. Not sent."
)
async def toggle_led(
    index: int,
    services: ServiceContainer = Depends(get_service_container)
) -> LedToggleResponse:
    color = services.matrix_controller.toggle_led(index)
    return LedToggleResponse(index=index, color=str(color) if color else None)


@router.post(
    "/clear",
    response_model=MatrixResponse,
    summary="Clear matrix",
    description="Stop any effect (unless keep_animation) and switch every cell off. Not sent."
)
async def clear_matrix(
    keep_animation: bool = False,
    services: ServiceContainer = Depends(get_service_container)
) -> MatrixResponse:
    services.matrix_controller.clear(keep_animation=keep_animation)
    return _matrix_response(services)


@router.post(
    "/fill",
    response_model=MatrixResponse,
    summary="Fill matrix",
    description="Stop any effect and paint every cell in the selected color. Not sent."
)
async def fill_matrix(services: ServiceContainer = Depends(get_service_container)) -> MatrixResponse:
    services.matrix_controller.fill()
    return _matrix_response(services)


@router.post(
    "/send",
    response_model=SendResponse,
    summary="Send matrix",
    description="Push the current buffer to the board (fire-and-forget)"
)
async def send_matrix(services: ServiceContainer = Depends(get_service_container)) -> SendResponse:
    services.matrix_controller.send()
    return SendResponse(queued=True)


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------

@router.get(
    "/effects",
    response_model=EffectListResponse,
    summary="List effects"
)
async def list_effects(services: ServiceContainer = Depends(get_service_container)) -> EffectListResponse:
    overrides = services.scheduler.interval_overrides
    effects = [
        EffectInfo(
            id=effect_id.name,
            display_name=effect_class.DISPLAY_NAME,
            interval_ms=overrides.get(effect_id, effect_class.INTERVAL_MS),
            randomized=effect_class.RANDOMIZED,
        )
        for effect_id, effect_class in EFFECTS.items()
    ]
    active = services.scheduler.active_effect_id
    return EffectListResponse(effects=effects, count=len(effects), active=active.name if active else None)


@router.post(
    "/effects/stop",
    response_model=MatrixResponse,
    summary="Stop effect",
    description="Cancel the running effect; the matrix keeps its last frame"
)
async def stop_effect(services: ServiceContainer = Depends(get_service_container)) -> MatrixResponse:
    services.matrix_controller.stop_effect()
    return _matrix_response(services)


@router.post(
    "/effects/{effect_id}/start",
    response_model=MatrixResponse,
    summary="Start effect",
    description="Replace the running effect (if any) with a fresh run of effect_id"
)
async def start_effect(
    effect_id: str,
    request: Optional[EffectStartRequest] = Body(None),
    services: ServiceContainer = Depends(get_service_container)
) -> MatrixResponse:
    """
    **Errors:**
    - 404: Effect not found
    """
    interval_ms = request.interval_ms if request else None
    services.matrix_controller.start_effect(effect_id, interval_ms)
    return _matrix_response(services)


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

@router.get(
    "/presets",
    response_model=PresetListResponse,
    summary="List presets"
)
async def list_presets() -> PresetListResponse:
    presets = [PresetInfo(id=preset_id.name, cells=list(cells)) for preset_id, cells in PRESETS.items()]
    return PresetListResponse(presets=presets, count=len(presets))


@router.post(
    "/presets/{preset_id}",
    response_model=MatrixResponse,
    summary="Show preset",
    description="Stop any effect, paint the pattern in the selected color and send it once"
)
async def show_preset(
    preset_id: str,
    services: ServiceContainer = Depends(get_service_container)
) -> MatrixResponse:
    """
    **Errors:**
    - 404: Preset not found
    """
    services.matrix_controller.set_preset(preset_id)
    return _matrix_response(services)
