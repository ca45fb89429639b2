import json
import logging
from typing import Any

import httpx

from pydantic import ValidationError

from tenacity import AsyncRetrying
from tenacity import retry_if_exception_type
from tenacity import stop_after_attempt
from tenacity import wait_exponential

from userdir.domain.entities.result import OperationResult
from userdir.domain.messages import MessageCode
from userdir.domain.messages import render_message
from userdir.domain.ports.clients.users import UserDirectoryClientPort
from userdir.domain.types import ErrorKind
from userdir.domain.types import Locale
from userdir.infrastructure.adapters.rpc.exceptions import RpcCallError
from userdir.infrastructure.adapters.rpc.exceptions import RpcDecodeError

logger = logging.getLogger(__name__)

# Anything that means "the call did not go through", as opposed to a business refusal.
TRANSPORT_ERRORS: tuple[type[Exception], ...] = (
    httpx.HTTPError,
    RpcCallError,
    RpcDecodeError,
    ValidationError,
    json.JSONDecodeError,
)


class HttpUserClientAdapter(UserDirectoryClientPort):
    """Shared plumbing of the HTTP based clients.

    Only connection failures are retried: the request never reached the
    listener, so replaying a create or a delete cannot apply it twice.
    """

    def __init__(
        self,
        base_url: str,
        locale: str = Locale.EN_US,
        timeout: float = 10.0,
        connect_retries: int = 3,
        retry_wait_max: float = 8.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.locale = locale
        self.connect_retries = connect_retries
        self.retry_wait_max = retry_wait_max

        self._client: httpx.AsyncClient = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=http_transport,
        )

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(httpx.ConnectError),
            wait=wait_exponential(multiplier=0.5, max=self.retry_wait_max),
            stop=stop_after_attempt(self.connect_retries),
            reraise=True,
        ):
            with attempt:
                return await self._client.request(method, path, **kwargs)

        raise AssertionError("unreachable")  # pragma: no cover

    def _message(self, code: MessageCode, **params: Any) -> str:
        return render_message(code, self.locale, **params)

    def _transport_failure[T](self, error: Exception) -> OperationResult[T]:
        logger.warning(f"{self.transport.upper()} call to {self.base_url} failed: {error}")
        return OperationResult.fail(f"{self.transport.upper()} transport failure: {error}", ErrorKind.TRANSPORT)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpUserClientAdapter":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
