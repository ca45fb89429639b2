from enum import StrEnum
from typing import Any
from typing import Final

from userdir.domain.types import Locale


class MessageCode(StrEnum):
    USERS_LISTED = "users_listed"
    USER_FOUND = "user_found"
    USER_CREATED = "user_created"
    USER_UPDATED = "user_updated"
    USER_DELETED = "user_deleted"
    USER_NOT_FOUND = "user_not_found"
    USER_FIELDS_REQUIRED = "user_fields_required"


CATALOGS: Final[dict[Locale, dict[MessageCode, str]]] = {
    Locale.EN_US: {
        MessageCode.USERS_LISTED: "Users retrieved",
        MessageCode.USER_FOUND: "User retrieved",
        MessageCode.USER_CREATED: "User created",
        MessageCode.USER_UPDATED: "User updated",
        MessageCode.USER_DELETED: "User deleted",
        MessageCode.USER_NOT_FOUND: "User not found with ID {user_id}",
        MessageCode.USER_FIELDS_REQUIRED: "Name and email are required",
    },
    Locale.JA_JP: {
        MessageCode.USERS_LISTED: "ユーザー一覧を取得しました",
        MessageCode.USER_FOUND: "ユーザーを取得しました",
        MessageCode.USER_CREATED: "ユーザーを作成しました",
        MessageCode.USER_UPDATED: "ユーザーを更新しました",
        MessageCode.USER_DELETED: "ユーザーを削除しました",
        MessageCode.USER_NOT_FOUND: "ID:{user_id}のユーザーが見つかりません",
        MessageCode.USER_FIELDS_REQUIRED: "名前とメールアドレスは必須です",
    },
}


def render_message(code: MessageCode, locale: str = Locale.EN_US, **params: Any) -> str:
    """Renders the human-readable message for `code` in the given locale.

    Unknown locales fall back to en-US, so a misconfigured locale never turns
    into a failed request.
    """
    try:
        catalog = CATALOGS[Locale(locale)]
    except ValueError:
        catalog = CATALOGS[Locale.EN_US]

    return catalog[code].format(**params)
