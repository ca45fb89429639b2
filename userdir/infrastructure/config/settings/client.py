from pydantic import Field
from pydantic import HttpUrl
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from userdir import BASE_DIR
from userdir.domain.types import Locale
from userdir.domain.types import Transport
from userdir.infrastructure.types import RpcEncoding


class ClientSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USERDIR_CLIENT_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    REST_URL: HttpUrl = HttpUrl("http://127.0.0.1:5262/api")
    RPC_URL: HttpUrl = HttpUrl("http://127.0.0.1:5181")

    TRANSPORT: Transport = Transport.REST
    RPC_ENCODING: RpcEncoding = "msgpack"

    LOCALE: Locale = Locale.EN_US

    HTTP_TIMEOUT: float = Field(default=10.0, gt=0)
    CONNECT_RETRIES: int = Field(default=3, ge=1, le=10)


client_settings = ClientSettings()
