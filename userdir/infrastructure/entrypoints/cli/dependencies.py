from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from userdir.domain.ports.repositories.users import UserRepository
from userdir.domain.types import Transport
from userdir.infrastructure.adapters.clients.rest import RestUserClientAdapter
from userdir.infrastructure.adapters.clients.rpc import RpcUserClientAdapter
from userdir.infrastructure.adapters.clients.selectable import TransportSelectableUserClient
from userdir.infrastructure.adapters.memory.repositories.users import UserMemoryRepository
from userdir.infrastructure.adapters.memory.seed import build_seed_users
from userdir.infrastructure.config.settings.client import client_settings


def get_user_repository(seed: bool = True) -> UserRepository:
    return UserMemoryRepository(build_seed_users() if seed else ())


@asynccontextmanager
async def get_user_client(transport: Transport | None = None) -> AsyncGenerator[TransportSelectableUserClient]:
    options = {
        "locale": client_settings.LOCALE,
        "timeout": client_settings.HTTP_TIMEOUT,
        "connect_retries": client_settings.CONNECT_RETRIES,
    }
    clients = {
        Transport.REST: RestUserClientAdapter(base_url=str(client_settings.REST_URL), **options),
        Transport.RPC: RpcUserClientAdapter(
            base_url=str(client_settings.RPC_URL),
            encoding=client_settings.RPC_ENCODING,
            **options,
        ),
    }

    async with TransportSelectableUserClient(
        clients=clients,
        transport=transport or client_settings.TRANSPORT,
    ) as client:
        yield client
