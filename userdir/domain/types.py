from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of failure a caller may observe, whatever the transport."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"


class Transport(StrEnum):
    REST = "rest"
    RPC = "rpc"


class Locale(StrEnum):
    EN_US = "en-US"
    JA_JP = "ja-JP"
