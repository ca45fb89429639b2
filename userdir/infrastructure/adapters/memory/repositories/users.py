import asyncio
import dataclasses
from collections.abc import Iterable
from datetime import datetime
from typing import Final

from userdir.domain.entities.user import User
from userdir.domain.exceptions import UserNotFound
from userdir.domain.exceptions import UserStoreIntegrityError
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.user import UserCreate
from userdir.domain.schemas.user import UserUpdate

CREATED_AT_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class UserMemoryRepository(UserRepository):
    """In-memory user store behaving as a monitor.

    Each operation runs as one critical section under an `asyncio.Lock` and
    never awaits anything else while holding it, so no caller can observe a
    partially applied mutation. Entities are immutable: updates swap the value
    stored under the same key, which keeps its position in insertion order.
    """

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[int, User] = {}
        self._lock = asyncio.Lock()

        for user in users:
            if user.id in self._users:
                raise UserStoreIntegrityError(f"Duplicate user ID {user.id}")
            self._users[user.id] = user

    async def list_all(self) -> list[User]:
        async with self._lock:
            return list(self._users.values())

    async def get_by_id(self, user_id: int) -> User:
        async with self._lock:
            return self._get_or_raise(user_id)

    async def create(self, user_data: UserCreate) -> User:
        async with self._lock:
            user_id = max(self._users, default=0) + 1

            user = User(
                id=user_id,
                name=user_data.name,
                email=user_data.email,
                created_at=datetime.now().strftime(CREATED_AT_FORMAT),
                is_active=True,
            )
            self._users[user_id] = user
            return user

    async def update(self, user_id: int, user_data: UserUpdate) -> User:
        async with self._lock:
            user = dataclasses.replace(
                self._get_or_raise(user_id),
                name=user_data.name,
                email=user_data.email,
            )
            self._users[user_id] = user
            return user

    async def delete(self, user_id: int) -> None:
        async with self._lock:
            self._get_or_raise(user_id)
            del self._users[user_id]

    async def count(self) -> int:
        async with self._lock:
            return len(self._users)

    def _get_or_raise(self, user_id: int) -> User:
        try:
            return self._users[user_id]
        except KeyError as e:
            raise UserNotFound(user_id) from e
