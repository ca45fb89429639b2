from typing import Any

import httpx
import pytest
from httpx import codes
from pytest_httpx import HTTPXMock

from userdir.domain.entities.user import User
from userdir.domain.types import ErrorKind
from userdir.domain.types import Locale
from userdir.domain.types import Transport
from userdir.infrastructure.adapters.clients.rest import RestUserClientAdapter

from tests.unit.infrastructure.adapters.clients.conftest import REST_BASE_URL


class TestRestUserClientAdapter:
    def test__transport(self, rest_client: RestUserClientAdapter) -> None:
        assert rest_client.transport == Transport.REST

    async def test__list_users(
        self,
        rest_client: RestUserClientAdapter,
        user: User,
        user_wire: dict[str, Any],
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users", method="GET", json=[user_wire])

        result = await rest_client.list_users()

        assert result.success is True
        assert result.message == "Users retrieved"
        assert result.data == [user]

    async def test__get_user(
        self,
        rest_client: RestUserClientAdapter,
        user: User,
        user_wire: dict[str, Any],
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users/{user.id}", method="GET", json=user_wire)

        result = await rest_client.get_user(user.id)

        assert result.success is True
        assert result.data == user

    async def test__get_user__not_found(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{REST_BASE_URL}/users/99",
            method="GET",
            status_code=codes.NOT_FOUND,
            json={"detail": "User not found with ID 99", "errorKind": "not_found"},
        )

        result = await rest_client.get_user(99)

        assert result.success is False
        assert result.message == "User not found with ID 99"
        assert result.error_kind == ErrorKind.NOT_FOUND
        assert result.data is None

    @pytest.mark.parametrize(
        ("method", "path", "status_code", "body"),
        [
            pytest.param("GET", "/users/7", codes.NOT_FOUND, None, id="get_404_no_body"),
            pytest.param("POST", "/users", codes.NOT_FOUND, {"detail": "Not Found"}, id="create_404_routing"),
            pytest.param("POST", "/users", codes.NOT_FOUND, None, id="create_404_no_body"),
            pytest.param("PUT", "/users/7", codes.BAD_REQUEST, {"detail": "Bad Request"}, id="update_400_bare"),
        ],
    )
    async def test__rejection__without_error_kind(
        self,
        rest_client: RestUserClientAdapter,
        method: str,
        path: str,
        status_code: int,
        body: dict[str, Any] | None,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}{path}", method=method, status_code=status_code, json=body)

        if method == "GET":
            result = await rest_client.get_user(7)
        elif method == "POST":
            result = await rest_client.create_user("Alice", "alice@example.com")
        else:
            result = await rest_client.update_user(7, "Alice", "alice@example.com")

        assert result.success is False
        assert result.error_kind == ErrorKind.TRANSPORT
        assert result.message.startswith("REST transport failure:")
        assert "not found with ID" not in result.message

    async def test__create_user__not_found__wrong_base_url(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="http://rest.test/users",
            method="POST",
            status_code=codes.NOT_FOUND,
            json={"detail": "Not Found"},
        )

        async with RestUserClientAdapter(base_url="http://rest.test", connect_retries=1) as rest_client:
            result = await rest_client.create_user("Alice", "alice@example.com")

        assert result.error_kind == ErrorKind.TRANSPORT

    @pytest.mark.parametrize("rest_client", [{"locale": Locale.JA_JP}], indirect=True)
    async def test__get_user__not_found__detail_from_body(
        self,
        rest_client: RestUserClientAdapter,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url=f"{REST_BASE_URL}/users/7",
            method="GET",
            status_code=codes.NOT_FOUND,
            json={"detail": "ID:7のユーザーが見つかりません", "errorKind": "not_found"},
        )

        result = await rest_client.get_user(7)

        assert result.message == "ID:7のユーザーが見つかりません"
        assert result.error_kind == ErrorKind.NOT_FOUND

    async def test__create_user(
        self,
        rest_client: RestUserClientAdapter,
        user: User,
        user_wire: dict[str, Any],
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url=f"{REST_BASE_URL}/users",
            method="POST",
            status_code=codes.CREATED,
            json=user_wire,
            match_json={"name": user.name, "email": user.email},
        )

        result = await rest_client.create_user(user.name, user.email)

        assert result.success is True
        assert result.message == "User created"
        assert result.data == user

    @pytest.mark.parametrize(
        ("status_code", "body", "expected_message"),
        [
            pytest.param(
                codes.BAD_REQUEST,
                {"detail": "Name and email are required", "errorKind": "validation"},
                "Name and email are required",
                id="business",
            ),
            pytest.param(
                codes.UNPROCESSABLE_ENTITY,
                {"detail": [{"loc": ["body"], "msg": "Field required"}]},
                "Name and email are required",
                id="unparsable",
            ),
        ],
    )
    async def test__create_user__invalid(
        self,
        rest_client: RestUserClientAdapter,
        status_code: int,
        body: dict[str, Any],
        expected_message: str,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users", method="POST", status_code=status_code, json=body)

        result = await rest_client.create_user("", "")

        assert result.success is False
        assert result.message == expected_message
        assert result.error_kind == ErrorKind.VALIDATION

    async def test__update_user(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{REST_BASE_URL}/users/1",
            method="PUT",
            status_code=codes.NO_CONTENT,
            match_json={"name": "Tanaka", "email": "t@example.com"},
        )

        result = await rest_client.update_user(1, "Tanaka", "t@example.com")

        assert result.success is True
        assert result.message == "User updated"
        assert result.data is None

    async def test__delete_user(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users/2", method="DELETE", status_code=codes.NO_CONTENT)

        result = await rest_client.delete_user(2)

        assert result.success is True
        assert result.message == "User deleted"

    async def test__server_error(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url=f"{REST_BASE_URL}/users",
            method="GET",
            status_code=codes.INTERNAL_SERVER_ERROR,
        )

        result = await rest_client.list_users()

        assert result.success is False
        assert result.error_kind == ErrorKind.TRANSPORT
        assert result.message.startswith("REST transport failure:")

    async def test__malformed_body(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users/1", method="GET", json={"unexpected": True})

        result = await rest_client.get_user(1)

        assert result.success is False
        assert result.error_kind == ErrorKind.TRANSPORT

    async def test__connect_error__retried(
        self,
        rest_client: RestUserClientAdapter,
        user_wire: dict[str, Any],
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=f"{REST_BASE_URL}/users")
        httpx_mock.add_response(url=f"{REST_BASE_URL}/users", method="GET", json=[user_wire])

        result = await rest_client.list_users()

        assert result.success is True
        assert len(httpx_mock.get_requests()) == 2

    async def test__connect_error__exhausted(self, rest_client: RestUserClientAdapter, httpx_mock: HTTPXMock) -> None:
        for _ in range(rest_client.connect_retries):
            httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=f"{REST_BASE_URL}/users/1")

        result = await rest_client.get_user(1)

        assert result.success is False
        assert result.error_kind == ErrorKind.TRANSPORT
        assert "Connection refused" in result.message

    async def test__read_timeout__not_retried(
        self,
        rest_client: RestUserClientAdapter,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_exception(httpx.ReadTimeout("Timed out"), url=f"{REST_BASE_URL}/users", method="POST")

        result = await rest_client.create_user("Alice", "alice@example.com")

        assert result.success is False
        assert result.error_kind == ErrorKind.TRANSPORT
        assert len(httpx_mock.get_requests()) == 1
