import logging

from userdir.application.validators import ensure_user_fields
from userdir.domain.entities.user import User
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.user import UserCreate

logger = logging.getLogger(__name__)


async def user_create(user_data: UserCreate, user_repository: UserRepository) -> User:
    """Creates a new user.

    This use case validates the required fields before anything reaches the
    store, then lets the store assign the ID and the creation timestamp.

    Args:
        user_data: The data for the new user.
        user_repository: The repository to store the user data.

    Returns:
        The newly created user.

    Raises:
        UserValidationError: If the name or the email is empty.
    """
    ensure_user_fields(user_data.name, user_data.email)

    user = await user_repository.create(user_data)
    logger.info(f"User {user.id} created")
    return user
