"""Run the server with an in-memory store instead of the fixed demo data."""

import logging

from udshttp.server.app import create_app
from udshttp.server.store import MemoryUserStore
from udshttp.server.uds import run

logging.basicConfig(level=logging.INFO)

run("mysock.sock", create_app(MemoryUserStore(("Jack", "Marry", "Sandy"))))
