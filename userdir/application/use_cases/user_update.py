import logging

from userdir.application.validators import ensure_user_fields
from userdir.domain.entities.user import User
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.user import UserUpdate

logger = logging.getLogger(__name__)


async def user_update(user_id: int, user_data: UserUpdate, user_repository: UserRepository) -> User:
    """Replaces the name and email of an existing user.

    Validation happens first, so an invalid payload never touches the store and
    a rejected update never leaves one field changed without the other.

    Args:
        user_id: The ID of the user to update.
        user_data: The new name and email.
        user_repository: The repository for user data.

    Returns:
        The updated `User` entity.

    Raises:
        UserValidationError: If the name or the email is empty.
        UserNotFound: If no user has this ID.
    """
    ensure_user_fields(user_data.name, user_data.email)

    user = await user_repository.update(user_id, user_data)
    logger.info(f"User {user_id} updated")
    return user
