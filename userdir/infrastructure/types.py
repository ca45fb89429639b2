from typing import Literal

type LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
type LogHandler = Literal["console", "cli", "cli_alert", "rich", "null"]

type RpcEncoding = Literal["msgpack", "json"]
