from typing import Any
from urllib.parse import unquote

from httpx import codes

from pydantic import BaseModel

from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.mappers.user import user_from_payload
from userdir.domain.types import Locale
from userdir.domain.types import Transport
from userdir.infrastructure.adapters.clients.base import TRANSPORT_ERRORS
from userdir.infrastructure.adapters.clients.base import HttpUserClientAdapter
from userdir.infrastructure.adapters.rpc.codec import get_codec
from userdir.infrastructure.adapters.rpc.exceptions import RpcCallError
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
from userdir.infrastructure.adapters.rpc.types import RPC_MESSAGE_HEADER
from userdir.infrastructure.adapters.rpc.types import RPC_STATUS_HEADER
from userdir.infrastructure.adapters.rpc.types import RpcMethod
from userdir.infrastructure.adapters.rpc.types import RpcStatus
from userdir.infrastructure.types import RpcEncoding


class RpcUserClientAdapter(HttpUserClientAdapter):
    """Client of the RPC listener.

    RPC reports business failures inside the response envelope, so a result is
    built straight from `success`, `message` and `errorKind`.
    """

    def __init__(self, base_url: str, encoding: RpcEncoding = "msgpack", locale: str = Locale.EN_US, **kwargs) -> None:
        super().__init__(base_url, locale=locale, **kwargs)
        self.codec = get_codec(encoding)

    @property
    def transport(self) -> Transport:
        return Transport.RPC

    async def list_users(self) -> OperationResult[list[User]]:
        try:
            response = await self._call(RpcMethod.GET_USERS, GetUsersRequest(), GetUsersResponse)
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return self._to_result(response, [user_from_payload(user) for user in response.users])

    async def get_user(self, user_id: int) -> OperationResult[User]:
        try:
            response = await self._call(RpcMethod.GET_USER, GetUserRequest(id=user_id), GetUserResponse)
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return self._to_result(response, user_from_payload(response.user) if response.user else None)

    async def create_user(self, name: str, email: str) -> OperationResult[User]:
        try:
            response = await self._call(
                RpcMethod.CREATE_USER,
                CreateUserRequest(name=name, email=email),
                CreateUserResponse,
            )
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return self._to_result(response, user_from_payload(response.user) if response.user else None)

    async def update_user(self, user_id: int, name: str, email: str) -> OperationResult[None]:
        try:
            response = await self._call(
                RpcMethod.UPDATE_USER,
                UpdateUserRequest(id=user_id, name=name, email=email),
                UpdateUserResponse,
            )
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        # REST answers 204 without a body: drop the record to keep both transports alike.
        return self._to_result(response, None)

    async def delete_user(self, user_id: int) -> OperationResult[None]:
        try:
            response = await self._call(RpcMethod.DELETE_USER, DeleteUserRequest(id=user_id), DeleteUserResponse)
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return self._to_result(response, None)

    async def _call[R: RpcResponse](self, method: RpcMethod, request: BaseModel, response_cls: type[R]) -> R:
        response = await self._send(
            "POST",
            method.path,
            content=self.codec.encode(request.model_dump(by_alias=True, mode="json")),
            headers={"Content-Type": self.codec.content_type, "Accept": self.codec.content_type},
        )

        rpc_status = response.headers.get(RPC_STATUS_HEADER, str(RpcStatus.OK.value))
        if response.status_code != codes.OK or rpc_status != str(RpcStatus.OK.value):
            raise RpcCallError(rpc_status, unquote(response.headers.get(RPC_MESSAGE_HEADER, response.reason_phrase)))

        return response_cls.model_validate(self.codec.decode(response.content))

    @staticmethod
    def _to_result(response: RpcResponse, data: Any) -> OperationResult[Any]:
        if not response.success:
            return OperationResult.fail(response.message, response.error_kind)

        return OperationResult.ok(response.message, data)
