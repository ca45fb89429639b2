from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport
from httpx import AsyncClient

from userdir.domain.types import Transport
from userdir.infrastructure.adapters.clients.rest import RestUserClientAdapter
from userdir.infrastructure.adapters.clients.rpc import RpcUserClientAdapter
from userdir.infrastructure.adapters.clients.selectable import TransportSelectableUserClient
from userdir.infrastructure.adapters.memory.repositories.users import UserMemoryRepository
from userdir.infrastructure.adapters.memory.seed import build_seed_users
from userdir.infrastructure.config.settings.app import AppSettings
from userdir.infrastructure.entrypoints.api.main import create_app as create_api_app
from userdir.infrastructure.entrypoints.rpc.main import create_app as create_rpc_app

REST_BASE_URL = "http://rest.test"
RPC_BASE_URL = "http://rpc.test"


@pytest.fixture
def settings(request: pytest.FixtureRequest) -> AppSettings:
    return AppSettings(**getattr(request, "param", {}))


@pytest.fixture
def user_repository() -> UserMemoryRepository:
    return UserMemoryRepository(build_seed_users())


@pytest.fixture
def api_app(user_repository: UserMemoryRepository, settings: AppSettings) -> FastAPI:
    return create_api_app(user_repository, settings)


@pytest.fixture
def rpc_app(user_repository: UserMemoryRepository, settings: AppSettings) -> FastAPI:
    return create_rpc_app(user_repository, settings)


@pytest.fixture
async def async_client(api_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=api_app), base_url=REST_BASE_URL) as client:
        yield client


@pytest.fixture
async def rpc_async_client(rpc_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=rpc_app), base_url=RPC_BASE_URL) as client:
        yield client


@pytest.fixture
async def user_client(
    request: pytest.FixtureRequest,
    api_app: FastAPI,
    rpc_app: FastAPI,
    settings: AppSettings,
) -> AsyncGenerator[TransportSelectableUserClient]:
    params = getattr(request, "param", {})
    clients = {
        Transport.REST: RestUserClientAdapter(
            base_url=f"{REST_BASE_URL}{settings.API_PREFIX}",
            http_transport=ASGITransport(app=api_app),
            locale=settings.LOCALE,
        ),
        Transport.RPC: RpcUserClientAdapter(
            base_url=RPC_BASE_URL,
            encoding=params.get("encoding", "msgpack"),
            http_transport=ASGITransport(app=rpc_app),
            locale=settings.LOCALE,
        ),
    }

    async with TransportSelectableUserClient(clients, params.get("transport", Transport.REST)) as client:
        yield client
