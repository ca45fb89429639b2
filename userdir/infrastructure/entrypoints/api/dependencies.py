from fastapi import Request

from userdir.domain.ports.repositories.users import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository
