from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from userdir import BASE_DIR
from userdir.domain.types import Locale
from userdir.infrastructure.types import LogHandler
from userdir.infrastructure.types import LogLevel


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USERDIR_",
        env_file=[BASE_DIR / ".env"],
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    DEBUG: bool = False

    LOCALE: Locale = Locale.EN_US

    API_PREFIX: str = "/api"

    REST_HOST: str = "127.0.0.1"
    REST_PORT: int = Field(default=5262, ge=1, le=65535)

    RPC_HOST: str = "127.0.0.1"
    RPC_PORT: int = Field(default=5181, ge=1, le=65535)

    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    SEED_USERS: bool = True

    LOG_LEVEL_API: LogLevel = "INFO"
    LOG_HANDLERS_API: list[LogHandler] = ["console"]

    LOG_LEVEL_CLI: LogLevel = "INFO"
    LOG_HANDLERS_CLI: list[LogHandler] = ["cli"]


app_settings = AppSettings()
