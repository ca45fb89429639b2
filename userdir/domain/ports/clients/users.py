from abc import ABC
from abc import abstractmethod

from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.types import Transport


class UserDirectoryClientPort(ABC):
    """Client side view of the user directory.

    Whatever the wire protocol, every call answers with an `OperationResult`
    and never raises for a business failure.
    """

    @property
    @abstractmethod
    def transport(self) -> Transport: ...

    @abstractmethod
    async def list_users(self) -> OperationResult[list[User]]: ...

    @abstractmethod
    async def get_user(self, user_id: int) -> OperationResult[User]: ...

    @abstractmethod
    async def create_user(self, name: str, email: str) -> OperationResult[User]: ...

    @abstractmethod
    async def update_user(self, user_id: int, name: str, email: str) -> OperationResult[None]: ...

    @abstractmethod
    async def delete_user(self, user_id: int) -> OperationResult[None]: ...

    @abstractmethod
    async def close(self) -> None: ...
