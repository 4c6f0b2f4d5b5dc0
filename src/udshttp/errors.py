"""Exception taxonomy shared by the server and the client."""

from __future__ import annotations


class UdsHttpError(Exception):
    """Base class for every error raised by udshttp."""


class BindError(UdsHttpError):
    """The socket path could not be prepared or bound."""


class TransportError(UdsHttpError):
    """Dial, read, write or timeout failure on the socket."""


class DecodeError(UdsHttpError):
    """A body did not parse into the expected JSON shape."""


class RemoteError(UdsHttpError):
    """The peer reported a failure through the ``{"msg": ...}`` envelope."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# --- Server-side classification ---------------------------------------------

class HandlerError(UdsHttpError):
    """A request failure that is rendered to the wire as an error envelope."""

    status_code = 500

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class NotFoundError(HandlerError):
    status_code = 404


class BadRequestError(HandlerError):
    status_code = 400
