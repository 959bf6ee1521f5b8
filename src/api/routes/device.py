"""
Device endpoints - OLED, buzzer and RGB LED commands

Commands are fire-and-forget; a 200 means the request was queued, not that
the board accepted it.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_service_container
from api.schemas.device import BuzzerRequest, CommandResponse, OledResponse, OledTextRequest, RGBRequest
from services.service_container import ServiceContainer

router = APIRouter(prefix="/device", tags=["Device"])


@router.post(
    "/oled",
    response_model=OledResponse,
    summary="Show text on the OLED",
    description="Blank text is ignored; the response carries the 8-line local preview"
)
async def send_oled_text(
    request: OledTextRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> OledResponse:
    commands = services.device_commands
    task = commands.send_oled_text(request.text)
    return OledResponse(sent=task is not None, lines=commands.oled_lines())


@router.get(
    "/oled",
    response_model=OledResponse,
    summary="OLED preview"
)
async def get_oled(services: ServiceContainer = Depends(get_service_container)) -> OledResponse:
    return OledResponse(sent=False, lines=services.device_commands.oled_lines())


@router.post(
    "/buzzer",
    response_model=CommandResponse,
    summary="Play a tone"
)
async def play_buzzer(
    request: BuzzerRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> CommandResponse:
    services.device_commands.play_buzzer(request.freq, request.dur, request.channel)
    return CommandResponse(queued=True)


@router.post(
    "/rgb",
    response_model=CommandResponse,
    summary="Set the RGB LED"
)
async def set_rgb(
    request: RGBRequest,
    services: ServiceContainer = Depends(get_service_container)
) -> CommandResponse:
    services.device_commands.set_rgb(request.r, request.g, request.b)
    return CommandResponse(queued=True)
