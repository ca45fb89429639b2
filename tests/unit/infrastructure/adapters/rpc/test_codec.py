import msgpack
import pytest

from userdir.infrastructure.adapters.rpc.codec import JsonCodec
from userdir.infrastructure.adapters.rpc.codec import MsgpackCodec
from userdir.infrastructure.adapters.rpc.codec import get_codec
from userdir.infrastructure.adapters.rpc.codec import get_codec_for_content_type
from userdir.infrastructure.adapters.rpc.exceptions import RpcDecodeError


class TestMsgpackCodec:
    def test__encode__binary(self) -> None:
        data = MsgpackCodec().encode({"name": "田中太郎"})

        assert msgpack.unpackb(data, raw=False) == {"name": "田中太郎"}

    def test__decode__empty(self) -> None:
        assert MsgpackCodec().decode(b"") == {}

    def test__decode__not_a_map(self) -> None:
        with pytest.raises(RpcDecodeError, match="Expected a map, got list"):
            MsgpackCodec().decode(msgpack.packb([1, 2]))

    def test__decode__garbage(self) -> None:
        with pytest.raises(RpcDecodeError, match="Invalid MessagePack frame"):
            MsgpackCodec().decode(b"\xc1")


class TestJsonCodec:
    def test__encode__keeps_unicode(self) -> None:
        assert JsonCodec().encode({"name": "佐藤花子"}) == '{"name": "佐藤花子"}'.encode()

    def test__decode(self) -> None:
        assert JsonCodec().decode(b'{"id": 2}') == {"id": 2}

    def test__decode__garbage(self) -> None:
        with pytest.raises(RpcDecodeError, match="Invalid JSON frame"):
            JsonCodec().decode(b"{not json")

    def test__decode__not_a_map(self) -> None:
        with pytest.raises(RpcDecodeError):
            JsonCodec().decode(b'"text"')


class TestGetCodecForContentType:
    @pytest.mark.parametrize(
        ("content_type", "expected_cls"),
        [
            pytest.param(None, MsgpackCodec, id="absent"),
            pytest.param("application/x-msgpack", MsgpackCodec, id="msgpack"),
            pytest.param("application/json", JsonCodec, id="json"),
            pytest.param("Application/JSON; charset=utf-8", JsonCodec, id="json_with_params"),
        ],
    )
    def test__nominal(self, content_type: str | None, expected_cls: type) -> None:
        assert isinstance(get_codec_for_content_type(content_type), expected_cls)

    def test__unsupported(self) -> None:
        with pytest.raises(RpcDecodeError, match="Unsupported content type: text/plain"):
            get_codec_for_content_type("text/plain")


class TestGetCodec:
    def test__msgpack(self) -> None:
        assert isinstance(get_codec("msgpack"), MsgpackCodec)

    def test__json(self) -> None:
        assert isinstance(get_codec("json"), JsonCodec)

    def test__unknown(self) -> None:
        with pytest.raises(ValueError):
            get_codec("xml")  # type: ignore[arg-type]
