"""python -m udshttp.server"""

import logging
import os
import sys

from udshttp.errors import BindError
from udshttp.protocol import DEFAULT_SOCKET
from udshttp.server.app import create_app
from udshttp.server.store import store_from_name
from udshttp.server.uds import DEFAULT_KEEP_ALIVE, run

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)

log = logging.getLogger("udshttp.server")

sock = os.environ.get("UDSHTTP_SOCKET", DEFAULT_SOCKET)
try:
    store = store_from_name(os.environ.get("UDSHTTP_STORE", "static"))
    keep_alive = int(os.environ.get("UDSHTTP_KEEP_ALIVE", DEFAULT_KEEP_ALIVE))
except ValueError as exc:
    log.error("bad configuration: %s", exc)
    sys.exit(1)

try:
    run(
        sock,
        create_app(store),
        log_level=os.environ.get("UDSHTTP_LOG_LEVEL", "info"),
        timeout_keep_alive=keep_alive,
    )
except BindError as exc:
    log.error("%s", exc)
    sys.exit(1)
