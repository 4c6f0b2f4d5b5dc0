"""Async example with a caller-side deadline."""

import anyio

from udshttp import AsyncUsersClient


async def main() -> None:
    client = AsyncUsersClient("mysock.sock")
    with anyio.fail_after(2.0):
        print("Users:", await client.get_users())
        user = await client.create_user("Marry")
    print(f"Created {user.name} with id {user.id}")


anyio.run(main)
