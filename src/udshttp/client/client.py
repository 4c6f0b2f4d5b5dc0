"""UsersClient — sync HTTP client for the users service on a Unix socket."""

from __future__ import annotations

import logging
import os

import httpx
from pydantic import ValidationError

from udshttp.errors import DecodeError, RemoteError, TransportError
from udshttp.protocol import BASE_URL, CONTENT_TYPE_JSON, DEFAULT_SOCKET, EP_USER, EP_USERS
from udshttp.schemas import CreateUserRequest, ErrorEnvelope, User, UserNames

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


# --- Body decoding, shared with the async client ----------------------------

def encode_create(name: str) -> bytes:
    """Compact JSON body for POST /api/v1/user."""
    return CreateUserRequest(name=name).model_dump_json().encode()


def remote_error(resp: httpx.Response) -> RemoteError | DecodeError:
    """Turn a non-success response into the exception to raise."""
    try:
        env = ErrorEnvelope.model_validate_json(resp.content)
    except ValidationError as exc:
        return DecodeError(f"status {resp.status_code}: malformed error body: {exc}")
    log.debug("remote error %d: %s", resp.status_code, env.msg)
    return RemoteError(env.msg, status_code=resp.status_code)


def decode_users(resp: httpx.Response) -> list[str]:
    if resp.status_code != httpx.codes.OK:
        raise remote_error(resp)
    try:
        return UserNames.validate_json(resp.content)
    except ValidationError as exc:
        raise DecodeError(f"malformed user list: {exc}") from exc


def decode_user(resp: httpx.Response) -> User:
    if resp.status_code != httpx.codes.CREATED:
        raise remote_error(resp)
    try:
        return User.model_validate_json(resp.content)
    except ValidationError as exc:
        raise DecodeError(f"malformed user: {exc}") from exc


class UsersClient:
    """Client for the users service listening on *socket_path*.

    The host in *base_url* only ends up in the ``Host`` header; every request
    dials the socket.  Each call opens and closes its own connection.
    """

    def __init__(
        self,
        socket_path: str | os.PathLike = DEFAULT_SOCKET,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = BASE_URL,
    ) -> None:
        self.socket_path = os.fspath(socket_path)
        self.timeout = timeout
        self._base = base_url

    def _transport(self) -> httpx.BaseTransport:
        return httpx.HTTPTransport(uds=self.socket_path)

    def _request(
        self,
        method: str,
        url: str,
        *,
        timeout: float | None = None,
        **kwargs,
    ) -> httpx.Response:
        try:
            with httpx.Client(
                transport=self._transport(),
                base_url=self._base,
                timeout=self.timeout if timeout is None else timeout,
            ) as http:
                return http.request(method, url, **kwargs)
        except httpx.DecodingError as exc:
            raise DecodeError(f"{method} {url}: undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {url} via {self.socket_path}: {exc!r}") from exc

    # --- Users ---------------------------------------------------------------

    def get_users(self, *, timeout: float | None = None) -> list[str]:
        """GET /api/v1/users → list of user names."""
        return decode_users(self._request("GET", EP_USERS, timeout=timeout))

    def create_user(self, name: str, *, timeout: float | None = None) -> User:
        """POST /api/v1/user with ``{"name": name}`` → the created user."""
        resp = self._request(
            "POST",
            EP_USER,
            content=encode_create(name),
            headers={"Content-Type": CONTENT_TYPE_JSON},
            timeout=timeout,
        )
        return decode_user(resp)


def get_users(sock: str | os.PathLike, *, timeout: float | None = None) -> list[str]:
    return UsersClient(sock).get_users(timeout=timeout)


def create_user(sock: str | os.PathLike, name: str, *, timeout: float | None = None) -> User:
    return UsersClient(sock).create_user(name, timeout=timeout)
