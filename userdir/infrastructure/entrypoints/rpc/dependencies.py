from fastapi import Depends
from fastapi import Request

from userdir.domain.ports.repositories.users import UserRepository
from userdir.infrastructure.entrypoints.rpc.service import UserRpcService


def get_user_repository(request: Request) -> UserRepository:
    return request.app.state.user_repository


def get_rpc_service(
    request: Request,
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserRpcService:
    return UserRpcService(user_repository=user_repository, locale=request.app.state.locale)
