"""Serve an ASGI app over a Unix domain socket with uvicorn."""

from __future__ import annotations

import logging
import os
import socket

import uvicorn
from fastapi import FastAPI

from udshttp import endpoint

log = logging.getLogger(__name__)

DEFAULT_KEEP_ALIVE = 5


def make_server(
    listener: socket.socket,
    app: FastAPI,
    *,
    log_level: str = "info",
    timeout_keep_alive: int = DEFAULT_KEEP_ALIVE,
) -> uvicorn.Server:
    """Build a uvicorn server for an already-bound *listener*."""
    config = uvicorn.Config(
        app,
        uds=listener.getsockname(),
        log_level=log_level,
        timeout_keep_alive=timeout_keep_alive,
    )
    return uvicorn.Server(config)


def serve(
    listener: socket.socket,
    app: FastAPI | None = None,
    *,
    log_level: str = "info",
    timeout_keep_alive: int = DEFAULT_KEEP_ALIVE,
    server: uvicorn.Server | None = None,
) -> None:
    """Block serving HTTP on *listener* until uvicorn is told to exit.

    Pass a *server* from ``make_server`` instead of *app* to keep a handle
    for stopping it (``server.should_exit = True``) from another thread.
    """
    if server is None:
        if app is None:
            raise ValueError("serve() needs an app or a server")
        server = make_server(
            listener, app, log_level=log_level, timeout_keep_alive=timeout_keep_alive,
        )
    server.run(sockets=[listener])


def run(
    path: str | os.PathLike,
    app: FastAPI,
    *,
    log_level: str = "info",
    timeout_keep_alive: int = DEFAULT_KEEP_ALIVE,
) -> None:
    """prepare → bind → serve → teardown. BindError propagates."""
    endpoint.prepare(path)
    listener = endpoint.bind(path)
    try:
        serve(listener, app, log_level=log_level, timeout_keep_alive=timeout_keep_alive)
    finally:
        listener.close()
        endpoint.teardown(path)
