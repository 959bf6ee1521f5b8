import asyncio

import httpx
import pytest

from models.color import Color, new_buffer
from services.transmitter import MATRIX_PATH, Transmitter, serialize


def test_serialize_all_off():
    payload = serialize(new_buffer())
    assert payload == ",".join(["000000"] * 25)


def test_serialize_flips_rows():
    buffer = new_buffer()
    buffer[0] = Color(255, 0, 0)     # logical top-left
    buffer[24] = Color(0, 0, 255)    # logical bottom-right

    parts = serialize(buffer).split(",")
    assert len(parts) == 25
    assert parts[20] == "ff0000"
    assert parts[4] == "0000ff"
    assert parts[0] == "000000"


def test_serialize_lowercase_hex():
    buffer = new_buffer(Color(171, 205, 239))
    assert set(serialize(buffer).split(",")) == {"abcdef"}


def test_serialize_fits_firmware_buffer():
    # 25 * 6 hex digits + 24 commas
    assert len(serialize(new_buffer(Color(1, 2, 3)))) == 174


def test_serialize_rejects_wrong_length():
    with pytest.raises(ValueError):
        serialize([None] * 10)


@pytest.mark.asyncio
async def test_send_posts_form_body(device_client, fake_device):
    transmitter = Transmitter(device_client)
    buffer = new_buffer()
    buffer[12] = Color(0, 255, 0)

    task = transmitter.send(buffer)
    assert isinstance(task, asyncio.Task)
    assert await task is True

    request = fake_device.requests[0]
    assert request.method == "POST"
    assert request.url.path == MATRIX_PATH
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"
    # raw commas, no percent-encoding
    assert request.content.decode() == "data=" + serialize(buffer)
    assert "%2C" not in request.content.decode()
    assert transmitter.frames_sent == 1


@pytest.mark.asyncio
async def test_send_failure_is_swallowed(device_client, fake_device):
    fake_device.fail_with = httpx.ConnectError("board offline")
    transmitter = Transmitter(device_client)

    assert await transmitter.send(new_buffer()) is False
    assert transmitter.frames_sent == 1


@pytest.mark.asyncio
async def test_send_http_error_status_is_swallowed(device_client, fake_device):
    fake_device.status_code = 500
    assert await Transmitter(device_client).send(new_buffer()) is False


@pytest.mark.asyncio
async def test_send_does_not_wait_for_response(device_client, fake_device):
    transmitter = Transmitter(device_client)
    transmitter.send(new_buffer())
    transmitter.send(new_buffer())

    assert device_client.pending_count == 2
    assert fake_device.requests == []

    await device_client.drain()
    assert device_client.pending_count == 0
    assert len(fake_device.requests) == 2
