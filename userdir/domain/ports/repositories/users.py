from abc import ABC
from abc import abstractmethod

from userdir.domain.entities.user import User
from userdir.domain.schemas.user import UserCreate
from userdir.domain.schemas.user import UserUpdate


class UserRepository(ABC):
    """The authoritative collection of `User` entities.

    Every operation is atomic with respect to every other one: implementations
    must never expose a partially applied create, update or delete.
    """

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Retrieves every user, in insertion order.

        Returns:
            A list of `User` entities, possibly empty.
        """
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """Retrieves a user by their ID.

        Args:
            user_id: The ID of the user to retrieve.

        Returns:
            The `User` entity.

        Raises:
            UserNotFound: If no user has this ID.
        """
        ...

    @abstractmethod
    async def create(self, user_data: UserCreate) -> User:
        """Stores a new user under a freshly assigned ID.

        The ID is `max(existing ids) + 1`, or 1 when the store is empty.

        Args:
            user_data: The already validated user details.

        Returns:
            The newly created `User` entity.
        """
        ...

    @abstractmethod
    async def update(self, user_id: int, user_data: UserUpdate) -> User:
        """Replaces the name and email of an existing user.

        Args:
            user_id: The ID of the user to update.
            user_data: The already validated new values.

        Returns:
            The updated `User` entity.

        Raises:
            UserNotFound: If no user has this ID.
        """
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Removes a user from the store.

        Args:
            user_id: The ID of the user to delete.

        Raises:
            UserNotFound: If no user has this ID.
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Returns how many users the store currently holds."""
        ...
