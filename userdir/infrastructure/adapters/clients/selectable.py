import logging
from collections.abc import Mapping

from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.ports.clients.users import UserDirectoryClientPort
from userdir.domain.types import Transport

logger = logging.getLogger(__name__)


class TransportSelectableUserClient(UserDirectoryClientPort):
    """One logical user directory client over several transports.

    Presentation code talks to this object only; which wire protocol carries
    each call is a configuration choice that can change between two calls.
    Both transports address the same store, so switching never changes which
    records are visible.
    """

    def __init__(self, clients: Mapping[Transport, UserDirectoryClientPort], transport: Transport) -> None:
        if not clients:
            raise ValueError("At least one transport client is required")

        self._clients = dict(clients)
        self._transport = self._check(transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    @transport.setter
    def transport(self, transport: Transport) -> None:
        self._transport = self._check(transport)
        logger.debug(f"Switched user directory client to {transport}")

    @property
    def available_transports(self) -> list[Transport]:
        return list(self._clients)

    def use(self, transport: Transport) -> "TransportSelectableUserClient":
        self.transport = transport
        return self

    @property
    def active(self) -> UserDirectoryClientPort:
        return self._clients[self._transport]

    async def list_users(self) -> OperationResult[list[User]]:
        return await self.active.list_users()

    async def get_user(self, user_id: int) -> OperationResult[User]:
        return await self.active.get_user(user_id)

    async def create_user(self, name: str, email: str) -> OperationResult[User]:
        return await self.active.create_user(name, email)

    async def update_user(self, user_id: int, name: str, email: str) -> OperationResult[None]:
        return await self.active.update_user(user_id, name, email)

    async def delete_user(self, user_id: int) -> OperationResult[None]:
        return await self.active.delete_user(user_id)

    async def close(self) -> None:
        for client in self._clients.values():
            await client.close()

    async def __aenter__(self) -> "TransportSelectableUserClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _check(self, transport: Transport) -> Transport:
        transport = Transport(transport)
        if transport not in self._clients:
            raise ValueError(f"No client configured for transport: {transport}")
        return transport
