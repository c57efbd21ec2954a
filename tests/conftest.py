"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Backend:
    Tests never touch the network. FakeBackend answers requests through
    httpx.MockTransport from a table of canned (status, body) routes and
    records every request it receives.

Console:
    ScriptedIO plays back a list of input lines and records everything
    written, so menu navigation runs without a terminal.
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest

from productdesk.cli.client import APIClient
from productdesk.cli.context import CLIContext

TEST_BASE_URL = "http://backend.test/api"


# =============================================================================
# Console double
# =============================================================================


class ScriptedIO:
    """ConsoleIO that reads from a fixed script and records output."""

    def __init__(self, inputs: list[str] | None = None) -> None:
        self.inputs = list(inputs or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *lines: str) -> None:
        self.inputs.extend(lines)

    def read(self, prompt: str, password: bool = False) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def write(self, text: str = "", style: str | None = None) -> None:
        self.lines.append(text)


# =============================================================================
# Backend double
# =============================================================================


class FakeBackend:
    """Canned backend keyed by (method, path below the /api prefix)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, str]] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        status: int = 200,
        body: str = "",
        json_body: Any = None,
    ) -> None:
        if json_body is not None:
            body = json.dumps(json_body)
        self.routes[(method, path)] = (status, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, text=f"No route for {request.method} {path}")
        status, body = route
        return httpx.Response(status, text=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def _refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def scripted_io() -> ScriptedIO:
    return ScriptedIO()


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
async def ctx(backend: FakeBackend, scripted_io: ScriptedIO) -> AsyncGenerator[CLIContext, None]:
    """
    Handler context wired to the fake backend and scripted console.

    The session starts unauthenticated.
    """
    client = APIClient(base_url=TEST_BASE_URL, transport=backend.transport)
    context = CLIContext(client=client, io=scripted_io)
    yield context
    await client.close()


@pytest.fixture
def logged_in(ctx: CLIContext) -> CLIContext:
    """Context whose session is already authenticated as jane@example.com."""
    ctx.session.authenticated = True
    ctx.session.user_email = "jane@example.com"
    return ctx


@pytest.fixture
async def offline_ctx(scripted_io: ScriptedIO) -> AsyncGenerator[CLIContext, None]:
    """Handler context whose backend refuses every connection."""
    client = APIClient(
        base_url=TEST_BASE_URL,
        transport=httpx.MockTransport(_refuse_connection),
    )
    context = CLIContext(client=client, io=scripted_io)
    yield context
    await client.close()
