"""
User Commands.

Handlers for the user endpoints, used by the interactive menu and by
the `users` command group.
"""

import typer

from productdesk.cli.commands.base import run_handler
from productdesk.cli.console import read_int
from productdesk.cli.context import CLIContext, send, show_list
from productdesk.cli.schemas import UserCreate

CREATE_USER_PATH = "/users/createUser"
READ_ALL_USERS_PATH = "/users/readAllUsers"

app = typer.Typer(help="User management commands")


async def create_user(ctx: CLIContext, name: str, age: int, email: str, password: str) -> bool:
    payload = UserCreate(name=name, age=age, email=email, password=password)
    response = await send(
        ctx,
        "user creation",
        "Failed to create user.",
        "POST",
        CREATE_USER_PATH,
        json=payload.to_payload(),
    )
    if response is None:
        return False
    ctx.io.write("User created successfully!", style="green")
    return True


async def prompt_create_user(ctx: CLIContext) -> bool:
    name = ctx.io.read("Enter Name: ")
    age = read_int(ctx.io, "Enter Age: ")
    email = ctx.io.read("Enter Email: ")
    password = ctx.io.read("Enter Password: ", password=True)
    return await create_user(ctx, name, age, email, password)


async def display_users(ctx: CLIContext) -> bool:
    """Fetch the whole user collection in one call and print it."""
    response = await send(
        ctx,
        "fetching users",
        "Failed to fetch users.",
        "GET",
        READ_ALL_USERS_PATH,
    )
    if response is None:
        return False
    return show_list(ctx, "fetching users", "Users", response)


@app.command("create")
def create(
    typer_ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Full name"),
    age: int = typer.Option(..., "--age", "-a", help="Age in years"),
    email: str = typer.Option(..., "--email", "-e", help="Login email"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Login password"
    ),
) -> None:
    """
    Create a user account.

    Examples:
        productdesk users create -n "Jane Doe" -a 34 -e jane@example.com
    """
    run_handler(typer_ctx, create_user, name, age, email, password)


@app.command("list")
def list_users(typer_ctx: typer.Context) -> None:
    """
    Display all users.
    """
    run_handler(typer_ctx, display_users)
