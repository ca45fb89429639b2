from userdir.domain.entities.result import OperationResult
from userdir.domain.types import Transport
from userdir.infrastructure.entrypoints.cli.dependencies import get_user_client


async def user_delete_logic(user_id: int, transport: Transport | None = None) -> OperationResult[None]:
    async with get_user_client(transport) as client:
        return await client.delete_user(user_id)
