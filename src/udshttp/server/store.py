"""User storage behind the HTTP handlers.

Two implementations:
  - static : the fixed demo data, nothing is ever stored
  - memory : a process-local list, ids from uuid4
"""

from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod

from udshttp.schemas import User

log = logging.getLogger(__name__)

DEMO_NAMES = ("Jack", "Marry", "Sandy")
DEMO_ID = "ABC-111"


class UserStore(ABC):
    @abstractmethod
    def list_users(self) -> list[User]:
        ...

    @abstractmethod
    def create_user(self, name: str) -> User:
        ...


class StaticUserStore(UserStore):
    """Fixed user list; every created user gets the same id."""

    def __init__(
        self,
        names: tuple[str, ...] = DEMO_NAMES,
        user_id: str = DEMO_ID,
    ) -> None:
        self._users = [User(id=str(i), name=n) for i, n in enumerate(names, 1)]
        self._id = user_id

    def list_users(self) -> list[User]:
        return list(self._users)

    def create_user(self, name: str) -> User:
        return User(id=self._id, name=name)


class MemoryUserStore(UserStore):
    """Thread-safe in-process store."""

    def __init__(self, names: tuple[str, ...] = ()) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = [User(id=uuid.uuid4().hex, name=n) for n in names]

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def create_user(self, name: str) -> User:
        user = User(id=uuid.uuid4().hex, name=name)
        with self._lock:
            self._users.append(user)
        log.info("created user %s (%s)", user.id, user.name)
        return user


STORES: dict[str, type[UserStore]] = {
    "static": StaticUserStore,
    "memory": MemoryUserStore,
}


def store_from_name(kind: str) -> UserStore:
    """Instantiate a store by name. Raises ValueError for unknown kinds."""
    try:
        return STORES[kind]()
    except KeyError:
        raise ValueError(f"unknown store {kind!r}; choose from {sorted(STORES)}")
