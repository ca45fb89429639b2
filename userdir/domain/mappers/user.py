from userdir.domain.entities.user import User
from userdir.domain.schemas.user import UserPayload


def user_to_payload(user: User) -> UserPayload:
    return UserPayload.model_validate(user)


def user_from_payload(payload: UserPayload) -> User:
    return User(
        id=payload.id,
        name=payload.name,
        email=payload.email,
        created_at=payload.created_at,
        is_active=payload.is_active,
    )
