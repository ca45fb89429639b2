import asyncio
from typing import get_args

import click
import typer

from userdir import __version__
from userdir.infrastructure.config.loggers import configure_loggers
from userdir.infrastructure.config.settings.app import app_settings
from userdir.infrastructure.entrypoints.cli.commands.serve import serve_logic
from userdir.infrastructure.entrypoints.cli.commands.users import app as users_app
from userdir.infrastructure.types import LogHandler
from userdir.infrastructure.types import LogLevel

app = typer.Typer(
    name="userdir",
    help="User directory served over REST and RPC.",
    no_args_is_help=True,
)
app.add_typer(users_app, name="users", help="Manage users through the REST or RPC listener.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Userdir Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option(
        app_settings.LOG_LEVEL_CLI,
        "--log-level",
        help="Logging level.",
        click_type=click.Choice(get_args(LogLevel.__value__)),
    ),
    log_handlers: list[str] = typer.Option(
        app_settings.LOG_HANDLERS_CLI,
        "--log-handler",
        help="Logging handler (repeat the option to use several).",
        click_type=click.Choice(get_args(LogHandler.__value__)),
    ),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers)  # type: ignore[arg-type]


@app.command("serve", help="Run the REST and RPC listeners on one shared store.")
def serve(  # pragma: no cover
    seed: bool = typer.Option(
        app_settings.SEED_USERS,
        "--seed/--no-seed",
        help="Whether to start with the sample users.",
    ),
) -> None:
    asyncio.run(serve_logic(seed=seed))


if __name__ == "__main__":  # pragma: no cover
    app()
