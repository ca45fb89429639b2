import asyncio
import logging

import uvicorn

from userdir.domain.ports.repositories.users import UserRepository
from userdir.infrastructure.config.loggers import configure_loggers
from userdir.infrastructure.config.settings.app import AppSettings
from userdir.infrastructure.config.settings.app import app_settings
from userdir.infrastructure.entrypoints.api.main import create_app as create_api_app
from userdir.infrastructure.entrypoints.cli.dependencies import get_user_repository
from userdir.infrastructure.entrypoints.rpc.main import create_app as create_rpc_app

logger = logging.getLogger(__name__)


def build_servers(user_repository: UserRepository, settings: AppSettings = app_settings) -> list[uvicorn.Server]:
    """Builds the REST and RPC listeners, both bound to the same store."""
    listeners = [
        (create_api_app(user_repository, settings), settings.REST_HOST, settings.REST_PORT),
        (create_rpc_app(user_repository, settings), settings.RPC_HOST, settings.RPC_PORT),
    ]

    return [
        uvicorn.Server(
            uvicorn.Config(
                app,
                host=host,
                port=port,
                # Keep our own dictConfig in place.
                log_config=None,
            )
        )
        for app, host, port in listeners
    ]


async def serve_all(servers: list[uvicorn.Server]) -> None:
    """Runs every server on the current loop until one of them stops.

    Each uvicorn server grabs the process signals for itself, so only one of
    them sees Ctrl+C: the others are told to exit once the first one returns.
    """
    tasks = [asyncio.create_task(server.serve()) for server in servers]

    _, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)

    for server in servers:
        server.should_exit = True

    await asyncio.gather(*pending)


async def serve_logic(seed: bool, settings: AppSettings = app_settings) -> None:
    configure_loggers(level=settings.LOG_LEVEL_API, handlers=settings.LOG_HANDLERS_API)

    user_repository = get_user_repository(seed=seed)
    logger.info(
        f"Serving REST on {settings.REST_HOST}:{settings.REST_PORT} "
        f"and RPC on {settings.RPC_HOST}:{settings.RPC_PORT}"
    )

    await serve_all(build_servers(user_repository, settings))
