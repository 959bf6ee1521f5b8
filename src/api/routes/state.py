"""
State endpoint - latest polled board state as display values
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_service_container
from api.schemas.device import DisplayStateResponse
from services.service_container import ServiceContainer

router = APIRouter(prefix="/state", tags=["State"])


@router.get(
    "",
    response_model=DisplayStateResponse,
    summary="Display state",
    description="Buttons, joystick, uptime, temperature gauge and RGB readback from the last good poll"
)
async def get_state(services: ServiceContainer = Depends(get_service_container)) -> DisplayStateResponse:
    return DisplayStateResponse(
        **services.display_state.to_dict(),
        poller_running=services.poller.is_running,
    )
