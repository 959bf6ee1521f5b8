"""
BitDogLab matrix controller - entry point

    python src/main_asyncio.py

Loads config, wires the services, then runs the state poller and the control
API until SIGINT/SIGTERM or until the API server dies.
"""

import sys

# log symbols are Unicode; Windows consoles default to cp1252
for _stream in (sys.stdout, sys.stderr):
    if hasattr(_stream, "reconfigure") and _stream.encoding.lower() != "utf-8":
        _stream.reconfigure(encoding="utf-8")  # type: ignore[union-attr]

import asyncio

from animations.engine import AnimationScheduler
from api.dependencies import set_service_container
from api.main import create_app
from controllers import MatrixController
from lifecycle import ShutdownCoordinator
from lifecycle.api_server_wrapper import APIServerWrapper
from lifecycle.handlers import (
    AllTasksCancellationHandler,
    AnimationShutdownHandler,
    APIServerShutdownHandler,
    DeviceClientShutdownHandler,
    PollerShutdownHandler,
)
from lifecycle.task_registry import create_tracked_task, TaskCategory, TaskRegistry
from managers import ConfigManager
from models.color import Color
from models.controller_state import ControllerState
from models.enums import LogCategory
from services import (
    DeviceClient,
    DeviceCommandService,
    DisplayState,
    StateParser,
    StatePoller,
    Transmitter,
)
from services.service_container import ServiceContainer
from utils.logger import get_logger, configure_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def build_services(config_manager: ConfigManager) -> ServiceContainer:
    """Construct every long-lived object; nothing is started here"""
    config = config_manager.config

    state = ControllerState(selected_color=Color.from_hex(config.matrix.default_color))
    device_client = DeviceClient(config.device)
    transmitter = Transmitter(device_client)
    scheduler = AnimationScheduler(state, transmitter, config.matrix.effect_intervals)
    display_state = DisplayState()

    return ServiceContainer(
        config=config,
        state=state,
        device_client=device_client,
        transmitter=transmitter,
        scheduler=scheduler,
        matrix_controller=MatrixController(state, scheduler, transmitter),
        device_commands=DeviceCommandService(device_client),
        display_state=display_state,
        poller=StatePoller(
            device_client,
            state,
            display_state,
            parser=StateParser(config.poller.pressed_labels),
            interval_ms=config.poller.interval_ms,
        ),
        config_manager=config_manager,
    )


async def main():
    config_manager = ConfigManager()
    config = config_manager.load()
    configure_logger(config.logging.level, config.logging.use_colors)

    log.info("Starting BitDogLab matrix controller", device=config.device.base_url)

    services = build_services(config_manager)
    set_service_container(services)
    services.poller.start()

    api_wrapper = APIServerWrapper(
        create_app(cors_origins=config.api.cors_origins),
        host=config.api.host,
        port=config.api.port,
    )
    api_task = create_tracked_task(
        api_wrapper.start(),
        category=TaskCategory.API,
        description="Control API (uvicorn)",
    )

    coordinator = ShutdownCoordinator()
    for handler in (
        AnimationShutdownHandler(services.scheduler),
        PollerShutdownHandler(services.poller),
        APIServerShutdownHandler(api_wrapper),
        # api_task ends through APIServerShutdownHandler
        AllTasksCancellationHandler(exclude_tasks=[api_task]),
        DeviceClientShutdownHandler(services.device_client),
    ):
        coordinator.register(handler)
    coordinator.setup_signal_handlers(asyncio.get_running_loop())

    log.info("Controller running, Ctrl+C to stop", api=api_wrapper.url)
    await coordinator.wait_for_shutdown()
    await coordinator.shutdown_all()

    set_service_container(None)
    log.debug(TaskRegistry.instance().summary())
    log.info("Controller stopped")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
