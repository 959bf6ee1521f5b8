from .all_tasks_cancellation_handler import AllTasksCancellationHandler
from .animation_shutdown_handler import AnimationShutdownHandler
from .api_server_shutdown_handler import APIServerShutdownHandler
from .device_client_shutdown_handler import DeviceClientShutdownHandler
from .poller_shutdown_handler import PollerShutdownHandler

__all__ = [
    "AllTasksCancellationHandler",
    "AnimationShutdownHandler",
    "APIServerShutdownHandler",
    "DeviceClientShutdownHandler",
    "PollerShutdownHandler",
]
