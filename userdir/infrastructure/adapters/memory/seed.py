from datetime import datetime

from userdir.domain.entities.user import User
from userdir.infrastructure.adapters.memory.repositories.users import CREATED_AT_FORMAT


def build_seed_users(now: datetime | None = None) -> list[User]:
    """Returns the sample users a fresh directory starts with."""
    created_at = (now or datetime.now()).strftime(CREATED_AT_FORMAT)

    return [
        User(id=1, name="田中太郎", email="tanaka@example.com", created_at=created_at, is_active=True),
        User(id=2, name="佐藤花子", email="sato@example.com", created_at=created_at, is_active=True),
        User(id=3, name="鈴木一郎", email="suzuki@example.com", created_at=created_at, is_active=False),
    ]
