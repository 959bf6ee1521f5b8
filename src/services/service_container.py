"""Service Container - Dependency injection container for all core services"""

from dataclasses import dataclass

from animations.engine import AnimationScheduler
from controllers.matrix_controller import MatrixController
from managers.config_manager import ConfigManager
from models.config import AppConfig
from models.controller_state import ControllerState
from services.device_client import DeviceClient
from services.device_commands import DeviceCommandService
from services.display_bindings import DisplayState
from services.state_poller import StatePoller
from services.transmitter import Transmitter


@dataclass
class ServiceContainer:
    """
    Centralized dependency injection container for core services.

    Built once in main_asyncio.py and handed to the API through
    api.dependencies.set_service_container().

    Usage:
        @router.get("/matrix")
        async def get_matrix(services: ServiceContainer = Depends(get_service_container)):
            return services.state.matrix
    """

    config: AppConfig
    state: ControllerState
    device_client: DeviceClient
    transmitter: Transmitter
    scheduler: AnimationScheduler
    matrix_controller: MatrixController
    device_commands: DeviceCommandService
    display_state: DisplayState
    poller: StatePoller
    config_manager: ConfigManager
