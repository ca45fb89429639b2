from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.types import Transport
from userdir.infrastructure.entrypoints.cli.dependencies import get_user_client


async def user_list_logic(transport: Transport | None = None) -> OperationResult[list[User]]:
    async with get_user_client(transport) as client:
        return await client.list_users()
