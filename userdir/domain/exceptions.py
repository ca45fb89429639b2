from typing import Any

from userdir.domain.messages import MessageCode
from userdir.domain.messages import render_message
from userdir.domain.types import ErrorKind


class UserDirectoryError(Exception):
    """Base class of the business failures every adapter must render."""

    error_kind: ErrorKind
    code: MessageCode

    def __init__(self, **params: Any) -> None:
        self.params = params
        super().__init__(render_message(self.code, **params))

    def render(self, locale: str) -> str:
        return render_message(self.code, locale, **self.params)


class UserNotFound(UserDirectoryError):
    error_kind = ErrorKind.NOT_FOUND
    code = MessageCode.USER_NOT_FOUND

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(user_id=user_id)


class UserValidationError(UserDirectoryError):
    error_kind = ErrorKind.VALIDATION
    code = MessageCode.USER_FIELDS_REQUIRED

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__()


class UserStoreIntegrityError(Exception):
    """Raised when the store detects a broken invariant (e.g. a duplicate id)."""

    pass
