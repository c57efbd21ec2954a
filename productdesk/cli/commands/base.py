"""
Shared plumbing for one-shot commands.

Each command builds a fresh context, optionally logs in, runs one
handler and turns its result into the process exit code.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import typer

from productdesk.cli.commands.auth import login
from productdesk.cli.context import CLIContext, create_context

Handler = Callable[..., Awaitable[bool]]


def base_url_option(typer_ctx: typer.Context) -> str | None:
    """The --base-url given to the top-level app, if any."""
    obj = typer_ctx.find_root().obj or {}
    return obj.get("base_url")


async def _run(
    base_url: str | None,
    handler: Handler,
    args: tuple[Any, ...],
    credentials: tuple[str, str] | None,
) -> bool:
    ctx: CLIContext = create_context(base_url=base_url)
    async with ctx.client:
        if credentials is not None and not await login(ctx, *credentials):
            return False
        return await handler(ctx, *args)


def run_handler(
    typer_ctx: typer.Context,
    handler: Handler,
    *args: Any,
    credentials: tuple[str, str] | None = None,
) -> None:
    """Run one handler to completion; exit 1 unless the backend answered 200."""
    ok = asyncio.run(_run(base_url_option(typer_ctx), handler, args, credentials))
    if not ok:
        raise typer.Exit(1)
