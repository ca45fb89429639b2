import logging.config
from copy import deepcopy
from typing import Any
from typing import Final

from userdir.infrastructure.types import LogHandler
from userdir.infrastructure.types import LogLevel

LOGGER_USERDIR: Final[str] = "userdir"

# Libraries writing next to our own records, with the floor level each one keeps.
LIBRARY_LOG_LEVELS: Final[dict[str, LogLevel]] = {
    "uvicorn": "INFO",
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

FORMATTERS: Final[dict[str, Any]] = {
    "default": {
        "format": "[%(asctime)s] %(levelname)s [%(name)s:%(lineno)d] %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "message": {
        "format": "%(message)s",
    },
    "rich": {
        "format": "%(message)s",
        "datefmt": "[%X]",
    },
}

HANDLERS: Final[dict[LogHandler, dict[str, Any]]] = {
    "console": {
        "class": "logging.StreamHandler",
        "level": "DEBUG",
        "formatter": "default",
        "stream": "ext://sys.stdout",
    },
    "cli": {
        "class": "logging.StreamHandler",
        "level": "DEBUG",
        "formatter": "message",
        "stream": "ext://sys.stderr",
    },
    "cli_alert": {
        "class": "logging.StreamHandler",
        "level": "WARNING",
        "formatter": "default",
        "stream": "ext://sys.stderr",
    },
    "rich": {
        "class": "rich.logging.RichHandler",
        "formatter": "rich",
        "level": "NOTSET",
        "markup": False,
        "rich_tracebacks": True,
        "show_path": False,
    },
    "null": {
        "class": "logging.NullHandler",
    },
}


def build_logging_config(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> dict[str, Any]:
    """Returns the `dictConfig` mapping for one process.

    Both listeners run in the same process, so their records, uvicorn's and
    the HTTP client's all go through the same handlers.
    """
    loggers: dict[str, dict[str, Any]] = {
        name: {"level": library_level, "handlers": handlers, "propagate": False}
        for name, library_level in LIBRARY_LOG_LEVELS.items()
    }
    loggers[LOGGER_USERDIR] = {"level": level, "handlers": handlers, "propagate": propagate}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": deepcopy(FORMATTERS),
        "handlers": {name: deepcopy(HANDLERS[name]) for name in set(handlers)},
        "loggers": loggers,
        "root": {"level": "WARNING", "handlers": handlers},
    }


def configure_loggers(level: LogLevel, handlers: list[LogHandler], propagate: bool = False) -> None:
    """Configures the application's loggers based on the provided level and handlers.

    Args:
        level: The minimum logging level of the `userdir` loggers (e.g., "INFO", "DEBUG").
        handlers: A list of handler names (e.g., ["console"], ["rich"]) to use.
        propagate: Whether `userdir` records should also reach the root logger.
    """
    logging.config.dictConfig(build_logging_config(level, handlers, propagate))
