from typing import Any

import httpx
from httpx import codes

from pydantic import ValidationError

from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.mappers.user import user_from_payload
from userdir.domain.messages import MessageCode
from userdir.domain.schemas.error import ErrorResponse
from userdir.domain.schemas.user import UserPayload
from userdir.domain.types import ErrorKind
from userdir.domain.types import Transport
from userdir.infrastructure.adapters.clients.base import TRANSPORT_ERRORS
from userdir.infrastructure.adapters.clients.base import HttpUserClientAdapter


class RestUserClientAdapter(HttpUserClientAdapter):
    """Client of the REST listener.

    Business refusals come back as 400 or 404 with an `errorKind` in the body;
    a 422 means the payload could not be parsed at all and counts as a
    `validation` failure. Any other status is a transport failure.
    """

    @property
    def transport(self) -> Transport:
        return Transport.REST

    async def list_users(self) -> OperationResult[list[User]]:
        try:
            response = await self._send("GET", "/users")
            response.raise_for_status()
            users = [user_from_payload(UserPayload.model_validate(item)) for item in response.json()]
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return OperationResult.ok(self._message(MessageCode.USERS_LISTED), users)

    async def get_user(self, user_id: int) -> OperationResult[User]:
        try:
            response = await self._send("GET", f"/users/{user_id}")
            if rejection := self._rejection(response):
                return rejection
            response.raise_for_status()
            user = user_from_payload(UserPayload.model_validate(response.json()))
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return OperationResult.ok(self._message(MessageCode.USER_FOUND), user)

    async def create_user(self, name: str, email: str) -> OperationResult[User]:
        try:
            response = await self._send("POST", "/users", json={"name": name, "email": email})
            if rejection := self._rejection(response):
                return rejection
            response.raise_for_status()
            user = user_from_payload(UserPayload.model_validate(response.json()))
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return OperationResult.ok(self._message(MessageCode.USER_CREATED), user)

    async def update_user(self, user_id: int, name: str, email: str) -> OperationResult[None]:
        try:
            response = await self._send("PUT", f"/users/{user_id}", json={"name": name, "email": email})
            if rejection := self._rejection(response):
                return rejection
            response.raise_for_status()
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return OperationResult.ok(self._message(MessageCode.USER_UPDATED))

    async def delete_user(self, user_id: int) -> OperationResult[None]:
        try:
            response = await self._send("DELETE", f"/users/{user_id}")
            if rejection := self._rejection(response):
                return rejection
            response.raise_for_status()
        except TRANSPORT_ERRORS as e:
            return self._transport_failure(e)

        return OperationResult.ok(self._message(MessageCode.USER_DELETED))

    def _rejection(self, response: httpx.Response) -> OperationResult[Any] | None:
        """Turns a business refusal into a failed result, or returns None.

        Only a 400 or 404 whose body carries an `errorKind` comes from the
        business rules. A bare one (wrong base URL, a proxy in between) is left
        to `raise_for_status` and ends up as a transport failure.
        """
        if response.status_code == codes.UNPROCESSABLE_ENTITY:
            # The listener could not even parse the payload into name and email.
            return OperationResult.fail(self._message(MessageCode.USER_FIELDS_REQUIRED), ErrorKind.VALIDATION)

        if response.status_code not in (codes.BAD_REQUEST, codes.NOT_FOUND):
            return None

        try:
            error = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            return None

        return OperationResult.fail(error.detail, error.error_kind)
