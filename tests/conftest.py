import sys
from pathlib import Path
from typing import List, Optional

import httpx
import pytest
import pytest_asyncio

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lifecycle.task_registry import TaskRegistry
from models.config import DeviceConfig
from models.controller_state import ControllerState
from services.device_client import DeviceClient

DEVICE_URL = "http://bitdoglab.test"


class FakeDevice:
    """
    In-memory stand-in for the board, served through httpx.MockTransport.

    Records every request; /state.shtml returns `state_document`, every
    other path returns "OK". Set `status_code` or `fail_with` to simulate
    errors.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.state_document = ""
        self.status_code = 200
        self.fail_with: Optional[Exception] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if request.url.path == "/state.shtml":
            return httpx.Response(self.status_code, text=self.state_document)
        return httpx.Response(self.status_code, text="OK")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def bodies(self, path: str) -> List[str]:
        return [r.content.decode() for r in self.requests if r.url.path == path]


@pytest.fixture(autouse=True)
def fresh_task_registry():
    TaskRegistry.reset()
    yield
    TaskRegistry.reset()


@pytest.fixture
def fake_device():
    return FakeDevice()


@pytest_asyncio.fixture
async def device_client(fake_device):
    client = DeviceClient(DeviceConfig(base_url=DEVICE_URL, timeout=1.0), transport=fake_device.transport)
    yield client
    await client.close()


@pytest.fixture
def controller_state():
    return ControllerState()
