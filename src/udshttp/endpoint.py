"""Lifecycle of the filesystem path backing the listening socket.

``prepare`` clears a stale path before ``bind``; ``teardown`` unlinks it on
shutdown.  Two servers starting on the same path at the same moment can still
race between the liveness probe in ``prepare`` and ``bind``.
"""

from __future__ import annotations

import logging
import os
import socket
import stat

from udshttp.errors import BindError

log = logging.getLogger(__name__)

DEFAULT_BACKLOG = 128


def _is_live(path: str) -> bool:
    """Return True unless the socket at *path* is certainly dead.

    A timeout means a server with a full backlog, so it counts as live.
    """
    probe = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    probe.settimeout(0.5)
    try:
        probe.connect(path)
    except (ConnectionRefusedError, FileNotFoundError):
        return False
    except OSError:
        return True
    finally:
        probe.close()
    return True


def prepare(path: str | os.PathLike) -> None:
    """Remove whatever is left at *path*; a missing path is fine."""
    path = os.fspath(path)
    try:
        mode = os.lstat(path).st_mode
    except FileNotFoundError:
        return
    except OSError as exc:
        raise BindError(f"cannot inspect {path}: {exc}") from exc

    if stat.S_ISSOCK(mode) and _is_live(path):
        raise BindError(f"{path} is in use by a running server")

    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise BindError(f"cannot remove stale {path}: {exc}") from exc
    log.info("removed stale socket file %s", path)


def bind(path: str | os.PathLike, backlog: int = DEFAULT_BACKLOG) -> socket.socket:
    """Create a listening stream socket bound to *path*."""
    path = os.fspath(path)
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(path)
        sock.listen(backlog)
    except OSError as exc:
        sock.close()
        raise BindError(f"cannot bind {path}: {exc}") from exc
    log.info("listening on unix socket %s", path)
    return sock


def teardown(path: str | os.PathLike) -> None:
    """Unlink the socket file, ignoring failures."""
    path = os.fspath(path)
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError as exc:
        log.warning("could not remove socket file %s: %s", path, exc)
        return
    log.info("removed socket file %s", path)
