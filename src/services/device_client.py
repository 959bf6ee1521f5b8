"""
Device Client - HTTP access to the BitDogLab board

Thin wrapper around httpx.AsyncClient. POSTs are fire-and-forget: each one
runs as its own task, held in a set until it finishes so it is not garbage
collected, and drained on shutdown.
"""

import asyncio
from typing import Mapping, Optional, Set

import httpx

from models.config import DeviceConfig
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.DEVICE)


class DeviceClient:
    """
    HTTP client for the board's CGI endpoints

    Usage:
        client = DeviceClient(DeviceConfig(base_url="http://192.168.4.1"))
        client.post_form("/rgb.cgi", "r=255&g=0&b=0")      # scheduled, not awaited
        text = await client.get_text("/state.shtml")        # raises on failure
        await client.close()
    """

    def __init__(
        self,
        config: DeviceConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )
        self._pending: Set[asyncio.Task] = set()

    # ------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------

    async def post(self, path: str, body: str) -> httpx.Response:
        """
        POST an already-encoded form body and return the response.

        Raises:
            httpx.HTTPError: Network failure or non-2xx status
        """
        response = await self._client.post(
            path,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        response.raise_for_status()
        return response

    def post_form(self, path: str, body: str) -> asyncio.Task:
        """
        Schedule a POST without waiting for it.

        Failures are logged at WARN and swallowed. Returns the scheduled task
        (callers normally ignore it).
        """
        task = asyncio.get_running_loop().create_task(self._post_quietly(path, body))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _post_quietly(self, path: str, body: str) -> bool:
        try:
            await self.post(path, body)
            return True
        except httpx.HTTPError as e:
            log.warn(f"POST {path} failed", error=f"{type(e).__name__}: {e}")
            return False

    async def get_text(self, path: str, params: Optional[Mapping[str, str]] = None) -> str:
        """
        GET a resource as text.

        Raises:
            httpx.HTTPError: Network failure or non-2xx status
        """
        response = await self._client.get(path, params=params)
        response.raise_for_status()
        return response.text

    # ------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self, timeout: float = 2.0) -> None:
        """Wait for in-flight fire-and-forget requests, cancelling stragglers"""
        if not self._pending:
            return

        pending = list(self._pending)
        log.debug(f"Draining {len(pending)} pending request(s)")
        done, not_done = await asyncio.wait(pending, timeout=timeout)
        for task in not_done:
            task.cancel()
        if not_done:
            await asyncio.gather(*not_done, return_exceptions=True)
            log.warn(f"Cancelled {len(not_done)} request(s) still in flight")

    async def close(self) -> None:
        await self.drain()
        await self._client.aclose()
        log.info("Device client closed")
