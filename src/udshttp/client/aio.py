"""AsyncUsersClient — asyncio/anyio flavour of UsersClient.

Cancelling the awaiting task closes the in-flight connection::

    with anyio.fail_after(1.0):
        names = await AsyncUsersClient("mysock.sock").get_users()
"""

from __future__ import annotations

import os

import httpx

from udshttp.client.client import (
    DEFAULT_TIMEOUT,
    decode_user,
    decode_users,
    encode_create,
)
from udshttp.errors import DecodeError, TransportError
from udshttp.protocol import BASE_URL, CONTENT_TYPE_JSON, DEFAULT_SOCKET, EP_USER, EP_USERS
from udshttp.schemas import User


class AsyncUsersClient:
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

    def _transport(self) -> httpx.AsyncBaseTransport:
        return httpx.AsyncHTTPTransport(uds=self.socket_path)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        timeout: float | None = None,
        **kwargs,
    ) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                transport=self._transport(),
                base_url=self._base,
                timeout=self.timeout if timeout is None else timeout,
            ) as http:
                return await http.request(method, url, **kwargs)
        except httpx.DecodingError as exc:
            raise DecodeError(f"{method} {url}: undecodable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {url} via {self.socket_path}: {exc!r}") from exc

    async def get_users(self, *, timeout: float | None = None) -> list[str]:
        return decode_users(await self._request("GET", EP_USERS, timeout=timeout))

    async def create_user(self, name: str, *, timeout: float | None = None) -> User:
        resp = await self._request(
            "POST",
            EP_USER,
            content=encode_create(name),
            headers={"Content-Type": CONTENT_TYPE_JSON},
            timeout=timeout,
        )
        return decode_user(resp)
