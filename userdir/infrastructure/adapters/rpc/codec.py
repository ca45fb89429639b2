import json
from abc import ABC
from abc import abstractmethod
from typing import Any

import msgpack

from userdir.infrastructure.adapters.rpc.exceptions import RpcDecodeError
from userdir.infrastructure.adapters.rpc.types import JSON_CONTENT_TYPE
from userdir.infrastructure.adapters.rpc.types import MSGPACK_CONTENT_TYPE
from userdir.infrastructure.types import RpcEncoding


class RpcCodec(ABC):
    """Turns RPC messages (plain mappings) into frames and back."""

    content_type: str

    @abstractmethod
    def encode(self, payload: dict[str, Any]) -> bytes: ...

    @abstractmethod
    def _decode(self, data: bytes) -> Any: ...

    def decode(self, data: bytes) -> dict[str, Any]:
        # An empty body is the zero value of any message.
        if not data:
            return {}

        payload = self._decode(data)
        if not isinstance(payload, dict):
            raise RpcDecodeError(f"Expected a map, got {type(payload).__name__}")

        return payload


class MsgpackCodec(RpcCodec):
    """Binary framing, the default between Python peers."""

    content_type = MSGPACK_CONTENT_TYPE

    def encode(self, payload: dict[str, Any]) -> bytes:
        return msgpack.packb(payload, use_bin_type=True)

    def _decode(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(data, raw=False)
        except ValueError as e:
            raise RpcDecodeError(f"Invalid MessagePack frame: {e}") from e


class JsonCodec(RpcCodec):
    """Text framing, for browser callers that cannot speak the binary one."""

    content_type = JSON_CONTENT_TYPE

    def encode(self, payload: dict[str, Any]) -> bytes:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")

    def _decode(self, data: bytes) -> Any:
        try:
            return json.loads(data)
        except ValueError as e:
            raise RpcDecodeError(f"Invalid JSON frame: {e}") from e


_CODECS: dict[str, RpcCodec] = {
    MSGPACK_CONTENT_TYPE: MsgpackCodec(),
    JSON_CONTENT_TYPE: JsonCodec(),
}


def get_codec_for_content_type(content_type: str | None) -> RpcCodec:
    """Picks the codec matching a `Content-Type` header, MessagePack when absent.

    Raises:
        RpcDecodeError: If the media type is not supported.
    """
    if not content_type:
        return _CODECS[MSGPACK_CONTENT_TYPE]

    media_type = content_type.split(";", 1)[0].strip().lower()
    try:
        return _CODECS[media_type]
    except KeyError as e:
        raise RpcDecodeError(f"Unsupported content type: {media_type}") from e


def get_codec(encoding: RpcEncoding) -> RpcCodec:
    match encoding:
        case "msgpack":
            return _CODECS[MSGPACK_CONTENT_TYPE]
        case "json":
            return _CODECS[JSON_CONTENT_TYPE]
        case _:
            raise ValueError(f"Unknown RPC encoding: {encoding}")
