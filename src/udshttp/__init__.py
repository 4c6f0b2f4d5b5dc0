"""udshttp — HTTP over a Unix domain socket, client SDK."""

from udshttp.client.aio import AsyncUsersClient
from udshttp.client.client import UsersClient, create_user, get_users
from udshttp.errors import (
    BadRequestError,
    BindError,
    DecodeError,
    NotFoundError,
    RemoteError,
    TransportError,
    UdsHttpError,
)
from udshttp.schemas import User

__all__ = [
    "AsyncUsersClient",
    "UsersClient",
    "create_user",
    "get_users",
    "User",
    "UdsHttpError",
    "BindError",
    "TransportError",
    "DecodeError",
    "RemoteError",
    "NotFoundError",
    "BadRequestError",
]
