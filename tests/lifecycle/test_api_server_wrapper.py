import asyncio
import socket

import pytest
from fastapi import FastAPI

from lifecycle.api_server_wrapper import APIServerWrapper


def free_port() -> int:
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def assert_port_released(port: int):
    with socket.socket() as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        s.bind(("127.0.0.1", port))


async def wait_until_running(wrapper: APIServerWrapper, timeout: float = 2.0):
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not (wrapper.is_running and wrapper._server.started):
        assert loop.time() < deadline, "server did not start"
        await asyncio.sleep(0.02)


@pytest.fixture
def wrapper():
    return APIServerWrapper(FastAPI(), host="127.0.0.1", port=free_port())


@pytest.mark.asyncio
async def test_start_returns_after_stop(wrapper):
    serving = asyncio.create_task(wrapper.start())
    await wait_until_running(wrapper)

    await wrapper.stop()
    await asyncio.wait_for(serving, timeout=1.0)

    assert not wrapper.is_running
    assert wrapper.task is None
    assert_port_released(wrapper.port)


@pytest.mark.asyncio
async def test_stop_before_start_is_noop(wrapper):
    await wrapper.stop()
    assert not wrapper.is_running


@pytest.mark.asyncio
async def test_second_start_rejected(wrapper):
    serving = asyncio.create_task(wrapper.start())
    await wait_until_running(wrapper)
    try:
        with pytest.raises(RuntimeError):
            await wrapper.start()
    finally:
        await wrapper.stop()
        await serving


@pytest.mark.asyncio
async def test_cancelling_start_stops_server(wrapper):
    serving = asyncio.create_task(wrapper.start())
    await wait_until_running(wrapper)

    serving.cancel()
    with pytest.raises(asyncio.CancelledError):
        await serving

    assert not wrapper.is_running
    assert_port_released(wrapper.port)
