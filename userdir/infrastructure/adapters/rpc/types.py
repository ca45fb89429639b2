from enum import IntEnum
from enum import StrEnum
from typing import Final

SERVICE_NAME: Final[str] = "UserService"

RPC_STATUS_HEADER: Final[str] = "Rpc-Status"
RPC_MESSAGE_HEADER: Final[str] = "Rpc-Message"

MSGPACK_CONTENT_TYPE: Final[str] = "application/x-msgpack"
JSON_CONTENT_TYPE: Final[str] = "application/json"


class RpcMethod(StrEnum):
    GET_USERS = "GetUsers"
    GET_USER = "GetUser"
    CREATE_USER = "CreateUser"
    UPDATE_USER = "UpdateUser"
    DELETE_USER = "DeleteUser"

    @property
    def path(self) -> str:
        return f"/{SERVICE_NAME}/{self.value}"


class RpcStatus(IntEnum):
    """Transport level status, carried in the `Rpc-Status` header.

    Business failures are NOT reported here: they travel as `success=false`
    inside an `OK` response.
    """

    OK = 0
    INVALID_ARGUMENT = 3
    UNIMPLEMENTED = 12
    INTERNAL = 13
