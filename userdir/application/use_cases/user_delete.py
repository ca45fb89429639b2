import logging

from userdir.domain.ports.repositories.users import UserRepository

logger = logging.getLogger(__name__)


async def user_delete(user_id: int, user_repository: UserRepository) -> None:
    """Deletes a user.

    Raises:
        UserNotFound: If no user has this ID.
    """
    await user_repository.delete(user_id)
    logger.info(f"User {user_id} deleted")
