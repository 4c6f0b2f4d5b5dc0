"""
pytest configuration and fixtures.

Client tests run against real HTTP servers listening on Unix sockets: uvicorn
in a background thread, serving either the real app or a one-route fake.
"""

import asyncio
import os
import tempfile
import threading
import time
from dataclasses import dataclass
from typing import Callable, Generator

import pytest
from fastapi import FastAPI, Request, Response

from udshttp import endpoint
from udshttp.server import uds


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def sock_path() -> Generator[str, None, None]:
    """A socket path in a fresh directory, short enough for AF_UNIX."""
    with tempfile.TemporaryDirectory(prefix="uds") as d:
        yield os.path.join(d, "test.sock")


class UdsTestServer:
    """Serve *app* on a Unix socket from a background thread."""

    def __init__(self, app: FastAPI, path: str, timeout_keep_alive: int = uds.DEFAULT_KEEP_ALIVE):
        self.path = path
        endpoint.prepare(path)
        self._listener = endpoint.bind(path)
        self.server = uds.make_server(
            self._listener, app, log_level="warning", timeout_keep_alive=timeout_keep_alive,
        )
        self._thread: threading.Thread | None = None

    def start(self):
        self._thread = threading.Thread(
            target=uds.serve,
            args=(self._listener,),
            kwargs={"server": self.server},
            daemon=True,
        )
        self._thread.start()

        for _ in range(500):  # 5 seconds max
            if self.server.started:
                return
            time.sleep(0.01)

        raise RuntimeError("Server failed to start")

    def stop(self):
        self.server.should_exit = True
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._listener.close()
        endpoint.teardown(self.path)


@pytest.fixture
def uds_server(sock_path: str) -> Generator[Callable[..., UdsTestServer], None, None]:
    """Start an app on ``sock_path``; stopped and unlinked at teardown."""
    servers = []

    def start(app: FastAPI, **kwargs) -> UdsTestServer:
        server = UdsTestServer(app, sock_path, **kwargs)
        server.start()
        servers.append(server)
        return server

    yield start

    for server in servers:
        server.stop()


@dataclass
class RecordedRequest:
    method: str
    headers: dict
    body: bytes


@pytest.fixture
def fake_server(uds_server):
    """Start a server with a single route that answers with a canned response.

    Returns ``(socket_path, recorded_requests)``.
    """

    def start(
        method: str,
        path: str,
        status: int,
        body: bytes,
        delay: float = 0.0,
        headers: dict | None = None,
    ):
        seen: list[RecordedRequest] = []
        app = FastAPI()

        async def handler(request: Request) -> Response:
            seen.append(RecordedRequest(
                method=request.method,
                headers=dict(request.headers),
                body=await request.body(),
            ))
            if delay:
                await asyncio.sleep(delay)
            return Response(
                content=body,
                status_code=status,
                media_type="application/json",
                headers=headers,
            )

        app.add_api_route(path, handler, methods=[method])
        server = uds_server(app)
        return server.path, seen

    return start
