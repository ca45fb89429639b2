import logging
from collections.abc import Awaitable
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from userdir.application.use_cases.user_create import user_create
from userdir.application.use_cases.user_delete import user_delete
from userdir.application.use_cases.user_get import user_get
from userdir.application.use_cases.user_list import user_list
from userdir.application.use_cases.user_update import user_update
from userdir.domain.exceptions import UserDirectoryError
from userdir.domain.mappers.user import user_to_payload
from userdir.domain.messages import MessageCode
from userdir.domain.messages import render_message
from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.schemas.user import UserCreate
from userdir.domain.schemas.user import UserUpdate
from userdir.domain.types import Locale
from userdir.infrastructure.adapters.rpc.schemas import CreateUserRequest
from userdir.infrastructure.adapters.rpc.schemas import CreateUserResponse
from userdir.infrastructure.adapters.rpc.schemas import DeleteUserRequest
from userdir.infrastructure.adapters.rpc.schemas import DeleteUserResponse
from userdir.infrastructure.adapters.rpc.schemas import GetUserRequest
from userdir.infrastructure.adapters.rpc.schemas import GetUserResponse
from userdir.infrastructure.adapters.rpc.schemas import GetUsersRequest
from userdir.infrastructure.adapters.rpc.schemas import GetUsersResponse
from userdir.infrastructure.adapters.rpc.schemas import RpcResponse
from userdir.infrastructure.adapters.rpc.schemas import UpdateUserRequest
from userdir.infrastructure.adapters.rpc.schemas import UpdateUserResponse
from userdir.infrastructure.adapters.rpc.types import RpcMethod

logger = logging.getLogger(__name__)

type RpcHandler = Callable[[Any], Awaitable[RpcResponse]]


class UserRpcService:
    """RPC side of the user directory.

    A thin shim over the use cases: every method answers with a response
    message, business failures included (`success=False` plus a message and
    the kind of error). Only unexpected errors escape.
    """

    def __init__(self, user_repository: UserRepository, locale: str = Locale.EN_US) -> None:
        self.user_repository = user_repository
        self.locale = locale

    @property
    def handlers(self) -> dict[RpcMethod, tuple[type[BaseModel], RpcHandler]]:
        return {
            RpcMethod.GET_USERS: (GetUsersRequest, self.get_users),
            RpcMethod.GET_USER: (GetUserRequest, self.get_user),
            RpcMethod.CREATE_USER: (CreateUserRequest, self.create_user),
            RpcMethod.UPDATE_USER: (UpdateUserRequest, self.update_user),
            RpcMethod.DELETE_USER: (DeleteUserRequest, self.delete_user),
        }

    async def get_users(self, request: GetUsersRequest) -> GetUsersResponse:
        users = await user_list(self.user_repository)

        return GetUsersResponse(
            users=[user_to_payload(user) for user in users],
            success=True,
            message=self._message(MessageCode.USERS_LISTED),
        )

    async def get_user(self, request: GetUserRequest) -> GetUserResponse:
        try:
            user = await user_get(request.id, self.user_repository)
        except UserDirectoryError as e:
            return self._failure(GetUserResponse, e)

        return GetUserResponse(
            user=user_to_payload(user),
            success=True,
            message=self._message(MessageCode.USER_FOUND),
        )

    async def create_user(self, request: CreateUserRequest) -> CreateUserResponse:
        try:
            user = await user_create(
                user_data=UserCreate(name=request.name, email=request.email),
                user_repository=self.user_repository,
            )
        except UserDirectoryError as e:
            return self._failure(CreateUserResponse, e)

        return CreateUserResponse(
            user=user_to_payload(user),
            success=True,
            message=self._message(MessageCode.USER_CREATED),
        )

    async def update_user(self, request: UpdateUserRequest) -> UpdateUserResponse:
        try:
            user = await user_update(
                user_id=request.id,
                user_data=UserUpdate(name=request.name, email=request.email),
                user_repository=self.user_repository,
            )
        except UserDirectoryError as e:
            return self._failure(UpdateUserResponse, e)

        return UpdateUserResponse(
            user=user_to_payload(user),
            success=True,
            message=self._message(MessageCode.USER_UPDATED),
        )

    async def delete_user(self, request: DeleteUserRequest) -> DeleteUserResponse:
        try:
            await user_delete(request.id, self.user_repository)
        except UserDirectoryError as e:
            return self._failure(DeleteUserResponse, e)

        return DeleteUserResponse(success=True, message=self._message(MessageCode.USER_DELETED))

    def _message(self, code: MessageCode) -> str:
        return render_message(code, self.locale)

    def _failure[R: RpcResponse](self, response_cls: type[R], error: UserDirectoryError) -> R:
        logger.debug(f"{response_cls.__name__} rejected: {error}")
        return response_cls(success=False, message=error.render(self.locale), error_kind=error.error_kind)
