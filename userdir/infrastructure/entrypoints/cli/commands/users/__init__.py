import asyncio

import typer

from userdir.domain.entities.result import OperationResult
from userdir.domain.entities.user import User
from userdir.domain.types import Transport
from userdir.infrastructure.config.settings.client import client_settings
from userdir.infrastructure.entrypoints.cli.commands.users.create import user_create_logic
from userdir.infrastructure.entrypoints.cli.commands.users.delete import user_delete_logic
from userdir.infrastructure.entrypoints.cli.commands.users.get import user_get_logic
from userdir.infrastructure.entrypoints.cli.commands.users.list import user_list_logic
from userdir.infrastructure.entrypoints.cli.commands.users.update import user_update_logic

app = typer.Typer()

TransportOption = typer.Option(
    client_settings.TRANSPORT,
    "--transport",
    "-t",
    help="Wire protocol carrying the call.",
    case_sensitive=False,
)


def format_user(user: User) -> str:
    state = "active" if user.is_active else "inactive"
    return f"{user.id}\t{user.name}\t{user.email}\t{user.created_at}\t{state}"


def _exit_on_failure(result: OperationResult) -> None:
    if not result.success:
        kind = f" [{result.error_kind}]" if result.error_kind else ""
        typer.secho(f"Error{kind}: {result.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("list", help="List every user.")
def list_users(transport: Transport = TransportOption) -> None:
    result = asyncio.run(user_list_logic(transport))
    _exit_on_failure(result)

    typer.secho(result.message, fg=typer.colors.GREEN)
    for user in result.data or []:
        typer.echo(format_user(user))


@app.command("get", help="Show a single user.")
def get_user(
    user_id: int = typer.Argument(..., help="User ID"),
    transport: Transport = TransportOption,
) -> None:
    result = asyncio.run(user_get_logic(user_id, transport))
    _exit_on_failure(result)

    typer.secho(result.message, fg=typer.colors.GREEN)
    if result.data:
        typer.echo(format_user(result.data))


@app.command("create", help="Create a new user.")
def create_user(
    name: str = typer.Option(..., help="User name"),
    email: str = typer.Option(..., help="User email address"),
    transport: Transport = TransportOption,
) -> None:
    result = asyncio.run(user_create_logic(name, email, transport))
    _exit_on_failure(result)

    typer.secho(result.message, fg=typer.colors.GREEN)
    if result.data:
        typer.echo(format_user(result.data))


@app.command("update", help="Replace the name and email of a user.")
def update_user(
    user_id: int = typer.Argument(..., help="User ID"),
    name: str = typer.Option(..., help="New user name"),
    email: str = typer.Option(..., help="New user email address"),
    transport: Transport = TransportOption,
) -> None:
    result = asyncio.run(user_update_logic(user_id, name, email, transport))
    _exit_on_failure(result)

    typer.secho(result.message, fg=typer.colors.GREEN)
    if result.data:
        typer.echo(format_user(result.data))


@app.command("delete", help="Delete a user.")
def delete_user(
    user_id: int = typer.Argument(..., help="User ID"),
    transport: Transport = TransportOption,
) -> None:
    result = asyncio.run(user_delete_logic(user_id, transport))
    _exit_on_failure(result)

    typer.secho(result.message, fg=typer.colors.GREEN)
