from userdir.domain.entities.user import User
from userdir.domain.ports.repositories.users import UserRepository


async def user_list(user_repository: UserRepository) -> list[User]:
    """Lists every user in insertion order."""
    return await user_repository.list_all()
