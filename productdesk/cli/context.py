"""
Handler Context.

CLIContext bundles what every handler needs: the transport, the session
and the console. It is passed explicitly to each handler call.
"""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from productdesk.cli.client import APIClient, ensure_ok
from productdesk.cli.console import ConsoleIO, RichConsoleIO
from productdesk.cli.session import Session
from productdesk.core.config import get_api_settings
from productdesk.core.exceptions import HttpError, NetworkError

DEFAULT_USER_EMAIL_HEADER = "user-email"


@dataclass
class CLIContext:
    client: APIClient
    io: ConsoleIO
    session: Session = field(default_factory=Session)
    user_email_header: str = DEFAULT_USER_EMAIL_HEADER

    def identity_headers(self) -> dict[str, bytes]:
        """
        Headers identifying the logged-in user to product endpoints.

        The email goes out as UTF-8 bytes; httpx only accepts ASCII str values.
        """
        return {self.user_email_header: self.session.user_email_header().encode("utf-8")}


def create_context(
    base_url: str | None = None,
    io: ConsoleIO | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CLIContext:
    """Build a context from configuration, with an unauthenticated session."""
    try:
        _, _, header = get_api_settings()
    except Exception:
        # APIClient reports the missing configuration unless base_url was given
        header = DEFAULT_USER_EMAIL_HEADER
    return CLIContext(
        client=APIClient(base_url=base_url, transport=transport),
        io=io or RichConsoleIO(),
        user_email_header=header,
    )


async def send(
    ctx: CLIContext,
    action: str,
    failure: str | None,
    method: str,
    path: str,
    **kwargs: Any,
) -> httpx.Response | None:
    """
    Send one request and report failures on the console.

    Args:
        ctx: Handler context
        action: Phrase used in transport error messages ("adding product")
        failure: Prefix printed before a non-200 body; None prints the body alone
        method: HTTP method
        path: API path
        **kwargs: headers / json passed to the transport

    Returns:
        The 200 response, or None after printing the failure
    """
    try:
        return ensure_ok(await ctx.client.request(method, path, **kwargs))
    except NetworkError as e:
        ctx.io.write(f"Error during {action}: {e.message}", style="red")
    except HttpError as e:
        ctx.io.write(f"{failure} Error: {e.body}" if failure else e.body, style="red")
    return None


def show_list(ctx: CLIContext, action: str, title: str, response: httpx.Response) -> bool:
    """Print a JSON array body as a header followed by one line per item."""
    try:
        items = response.json()
    except ValueError as e:
        ctx.io.write(f"Error during {action}: {e}", style="red")
        return False

    if not isinstance(items, list):
        ctx.io.write(f"Error during {action}: expected a JSON array", style="red")
        return False

    ctx.io.write(f"=== {title} ===", style="bold")
    for item in items:
        ctx.io.write(json.dumps(item))
    return True
