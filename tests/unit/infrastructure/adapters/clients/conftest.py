from collections.abc import AsyncGenerator
from typing import Any

import pytest

from userdir.domain.entities.user import User
from userdir.domain.mappers.user import user_to_payload
from userdir.infrastructure.adapters.clients.rest import RestUserClientAdapter
from userdir.infrastructure.adapters.clients.rpc import RpcUserClientAdapter

REST_BASE_URL = "http://rest.test/api"
RPC_BASE_URL = "http://rpc.test"


@pytest.fixture
def user_wire(user: User) -> dict[str, Any]:
    return user_to_payload(user).model_dump(by_alias=True, mode="json")


@pytest.fixture
async def rest_client(request: pytest.FixtureRequest) -> AsyncGenerator[RestUserClientAdapter]:
    params = getattr(request, "param", {})
    async with RestUserClientAdapter(REST_BASE_URL, connect_retries=2, retry_wait_max=0, **params) as client:
        yield client


@pytest.fixture
async def rpc_client(request: pytest.FixtureRequest) -> AsyncGenerator[RpcUserClientAdapter]:
    params = getattr(request, "param", {})
    async with RpcUserClientAdapter(RPC_BASE_URL, connect_retries=2, retry_wait_max=0, **params) as client:
        yield client
