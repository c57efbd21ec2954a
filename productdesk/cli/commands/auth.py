"""
Login Handler.

Authenticates the context's session and reports the outcome.
"""

from productdesk.cli.context import CLIContext
from productdesk.cli.session import authenticate
from productdesk.core.exceptions import NetworkError


async def login(ctx: CLIContext, email: str, password: str) -> bool:
    """Authenticate ctx.session. Returns True when the backend accepted the credentials."""
    try:
        accepted = await authenticate(ctx.client, ctx.session, email, password)
    except NetworkError as e:
        ctx.io.write(f"Error during authentication: {e.message}", style="red")
        return False

    if accepted:
        ctx.io.write(f"Login successful! Welcome, {email}", style="green")
    else:
        ctx.io.write("Invalid email or password. Please try again.", style="red")
    return accepted


async def prompt_login(ctx: CLIContext) -> bool:
    ctx.io.write("Please log in to access the system.")
    email = ctx.io.read("Enter your email: ")
    password = ctx.io.read("Enter your password: ", password=True)
    return await login(ctx, email, password)
