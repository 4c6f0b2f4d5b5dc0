"""python -m udshttp.client [NAME]

Lists the users, then creates NAME (default "Jack").
"""

import logging
import os
import sys

from udshttp.client.client import DEFAULT_TIMEOUT, UsersClient
from udshttp.errors import UdsHttpError
from udshttp.protocol import DEFAULT_SOCKET

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
log = logging.getLogger("udshttp.client")

client = UsersClient(
    os.environ.get("UDSHTTP_SOCKET", DEFAULT_SOCKET),
    timeout=float(os.environ.get("UDSHTTP_TIMEOUT", DEFAULT_TIMEOUT)),
)
name = sys.argv[1] if len(sys.argv) > 1 else "Jack"

try:
    log.info("users: %s", ", ".join(client.get_users()))
    user = client.create_user(name)
    log.info("created user %s (id=%s)", user.name, user.id)
except UdsHttpError as exc:
    log.error("%s: %s", type(exc).__name__, exc)
    sys.exit(1)
