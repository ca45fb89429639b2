from typing import Any

from pydantic import Field
from pydantic import model_validator

from userdir.domain.schemas.base import WireModel
from userdir.domain.schemas.user import UserPayload
from userdir.domain.types import ErrorKind


class RpcRequest(WireModel):
    """Missing fields take their zero value (0, ""), as a proto3 peer would send them.

    An explicit null is read as a missing field, so `{"name": null}` reaches the
    business rules as an empty name and is refused as `validation`, like on REST.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class GetUsersRequest(RpcRequest):
    pass


class GetUserRequest(RpcRequest):
    id: int = 0


class CreateUserRequest(RpcRequest):
    name: str = ""
    email: str = ""


class UpdateUserRequest(RpcRequest):
    id: int = 0
    name: str = ""
    email: str = ""


class DeleteUserRequest(RpcRequest):
    id: int = 0


class RpcResponse(WireModel):
    """Envelope shared by every response: failures never leave it."""

    success: bool
    message: str
    error_kind: ErrorKind | None = None


class GetUsersResponse(RpcResponse):
    users: list[UserPayload] = Field(default_factory=list)


class GetUserResponse(RpcResponse):
    user: UserPayload | None = None


class CreateUserResponse(RpcResponse):
    user: UserPayload | None = None


class UpdateUserResponse(RpcResponse):
    user: UserPayload | None = None


class DeleteUserResponse(RpcResponse):
    pass
