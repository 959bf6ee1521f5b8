from __future__ import annotations

import asyncio
from typing import Optional

import uvicorn
from fastapi import FastAPI

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.API)


class APIServerWrapper:
    """
    Uvicorn embedded in the controller's event loop.

    uvicorn would normally install its own SIGINT/SIGTERM handlers and exit
    the process; here those are disabled and the ShutdownCoordinator decides
    when the server goes away (through APIServerShutdownHandler -> stop()).

    start() blocks for the server's lifetime, so it is meant to run as a
    tracked task. It returns normally after stop(), raises if uvicorn dies on
    its own (port in use, startup failure), and on cancellation stops the
    server before re-raising.
    """

    def __init__(self, app: FastAPI, host: str = "0.0.0.0", port: int = 8000):
        self.app = app
        self.host = host
        self.port = port
        self._server: Optional[uvicorn.Server] = None
        self._serve_task: Optional[asyncio.Task] = None
        self._stopped = asyncio.Event()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def is_running(self) -> bool:
        return self._serve_task is not None and not self._serve_task.done()

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._serve_task

    def _build_server(self) -> uvicorn.Server:
        server = uvicorn.Server(uvicorn.Config(
            app=self.app,
            host=self.host,
            port=self.port,
            loop="asyncio",
            log_level="warning",
            access_log=False,
            server_header=False,
        ))
        server.install_signal_handlers = lambda: None  # type: ignore[method-assign]
        return server

    async def start(self) -> None:
        if self.is_running:
            raise RuntimeError("API server already started")

        self._stopped.clear()
        self._server = self._build_server()
        self._serve_task = asyncio.create_task(self._server.serve(), name="uvicorn-serve")
        log.info("API server listening", url=self.url)

        stop_wait = asyncio.create_task(self._stopped.wait())
        try:
            await asyncio.wait({self._serve_task, stop_wait}, return_when=asyncio.FIRST_COMPLETED)
        except asyncio.CancelledError:
            await self.stop()
            raise
        finally:
            stop_wait.cancel()

        if not self._stopped.is_set():
            serve_task = self._serve_task
            self._server = self._serve_task = None
            # re-raises uvicorn's own error if it has one
            serve_task.result()
            raise RuntimeError(f"API server on port {self.port} exited unexpectedly")

    async def stop(self, *, shutdown_timeout: float = 2.0) -> None:
        """Ask uvicorn to exit, force it after shutdown_timeout, release the port"""
        self._stopped.set()

        server, serve_task = self._server, self._serve_task
        if server is None or serve_task is None:
            return

        server.should_exit = True
        try:
            await asyncio.wait_for(asyncio.shield(serve_task), timeout=shutdown_timeout)
        except asyncio.TimeoutError:
            log.warn("API server did not stop in time, forcing exit", timeout_s=shutdown_timeout)
            server.force_exit = True
        except Exception as e:
            log.error("API server failed while stopping", error=repr(e))

        if not serve_task.done():
            serve_task.cancel()
            await asyncio.gather(serve_task, return_exceptions=True)

        self._server = self._serve_task = None
        log.info("API server stopped", url=self.url)
