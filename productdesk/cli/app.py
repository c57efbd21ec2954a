"""
Command-line entry point.

Without a subcommand the interactive menu starts; the command groups run a
single action and exit 0 when the backend answered 200, 1 otherwise.

Usage:
    productdesk                                   # Interactive menu
    productdesk shell                             # Same, explicitly
    productdesk --base-url http://host:8080/api   # Point at another backend

    productdesk users create -n "Jane Doe" -a 34 -e jane@example.com
    productdesk users list

    productdesk products list -e jane@example.com
    productdesk products get 42 -e jane@example.com
    productdesk products add -n Milk --price 2.5 --expires 2025-01-01 -e jane@example.com
    productdesk products update 42 -n Milk --price 2.75 --expires 2025-02-01 -e jane@example.com
    productdesk products delete 42 -e jane@example.com
    productdesk products top -e jane@example.com

    productdesk system info
    productdesk system config logging
    productdesk system version

Options:
    --verbose, -v     Log INFO and above to the console
    --debug, -d       Log DEBUG and above to the console
    --base-url        Backend API base URL (overrides configuration)
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from productdesk.cli.commands import products_app, system_app, users_app
from productdesk.core.logging import setup_logging

app = typer.Typer(
    name="productdesk",
    help="Product Desk CLI - manage users and products on the backend API.",
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(users_app, name="users")
app.add_typer(products_app, name="products")
app.add_typer(system_app, name="system")


def _start_shell(base_url: str | None) -> None:
    from productdesk.cli.shell import run_shell

    try:
        asyncio.run(run_shell(base_url=base_url))
    except KeyboardInterrupt:
        console.print("\n[dim]Goodbye![/dim]")


@app.command()
def shell(typer_ctx: typer.Context) -> None:
    """
    Start the interactive menu.

    Log in, then pick numbered actions for users and products.
    """
    obj = typer_ctx.find_root().obj or {}
    _start_shell(obj.get("base_url"))


@app.callback(invoke_without_command=True)
def main(
    typer_ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="Backend API base URL (default from application.yaml)",
    ),
) -> None:
    """
    Product Desk CLI.

    Interactive menu by default; users, products and system command groups
    for one-shot use. Built with Typer for commands and Rich for output.
    """
    if debug:
        setup_logging(level="DEBUG", format_type="console", enable_console=True)
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console", enable_console=True)
    else:
        setup_logging()

    typer_ctx.obj = {"base_url": base_url}

    if typer_ctx.invoked_subcommand is None:
        _start_shell(base_url)
