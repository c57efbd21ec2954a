"""Unit tests for session state and authentication."""

import pytest

from productdesk.cli.commands.auth import login, prompt_login
from productdesk.cli.session import Session, authenticate, is_true_body
from productdesk.core.exceptions import NetworkError


class TestSession:
    """Tests for the Session value."""

    def test_starts_unauthenticated(self) -> None:
        session = Session()
        assert session.authenticated is False
        assert session.user_email is None

    def test_header_is_empty_when_unauthenticated(self) -> None:
        assert Session().user_email_header() == ""

    def test_header_carries_email(self) -> None:
        session = Session(authenticated=True, user_email="jane@example.com")
        assert session.user_email_header() == "jane@example.com"


class TestIsTrueBody:
    @pytest.mark.parametrize("body", ["true", "TRUE", "True", " true\n"])
    def test_true_bodies(self, body: str) -> None:
        assert is_true_body(body) is True

    @pytest.mark.parametrize("body", ["false", "", "yes", "1", '"true"', "{}"])
    def test_other_bodies(self, body: str) -> None:
        assert is_true_body(body) is False


class TestAuthenticate:
    """Tests for authenticate()."""

    @pytest.mark.asyncio
    async def test_success_sets_session(self, ctx, backend) -> None:
        backend.on("POST", "/users/authenticate", body="true")

        accepted = await authenticate(ctx.client, ctx.session, "jane@example.com", "secret")

        assert accepted is True
        assert ctx.session.authenticated is True
        assert ctx.session.user_email == "jane@example.com"
        assert backend.last_json() == {"email": "jane@example.com", "password": "secret"}
        assert backend.last.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_false_body_leaves_session(self, ctx, backend) -> None:
        backend.on("POST", "/users/authenticate", body="false")

        accepted = await authenticate(ctx.client, ctx.session, "jane@example.com", "wrong")

        assert accepted is False
        assert ctx.session.authenticated is False
        assert ctx.session.user_email is None

    @pytest.mark.asyncio
    async def test_non_200_leaves_session_even_with_true_body(self, ctx, backend) -> None:
        backend.on("POST", "/users/authenticate", status=500, body="true")

        assert await authenticate(ctx.client, ctx.session, "jane@example.com", "secret") is False
        assert ctx.session.authenticated is False

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, offline_ctx) -> None:
        with pytest.raises(NetworkError):
            await authenticate(offline_ctx.client, offline_ctx.session, "jane@example.com", "x")
        assert offline_ctx.session.authenticated is False


class TestLoginHandler:
    """Tests for the login handler output."""

    @pytest.mark.asyncio
    async def test_success_message(self, ctx, backend, scripted_io) -> None:
        backend.on("POST", "/users/authenticate", body="true")

        assert await login(ctx, "jane@example.com", "secret") is True
        assert "Login successful! Welcome, jane@example.com" in scripted_io.lines

    @pytest.mark.asyncio
    async def test_invalid_credentials_message(self, ctx, backend, scripted_io) -> None:
        backend.on("POST", "/users/authenticate", body="false")

        assert await login(ctx, "jane@example.com", "wrong") is False
        assert "Invalid email or password. Please try again." in scripted_io.lines

    @pytest.mark.asyncio
    async def test_network_error_message(self, offline_ctx, scripted_io) -> None:
        assert await login(offline_ctx, "jane@example.com", "secret") is False
        assert scripted_io.lines[-1].startswith("Error during authentication: ")
        assert "Connection refused" in scripted_io.lines[-1]

    @pytest.mark.asyncio
    async def test_prompt_login_reads_email_then_password(self, ctx, backend, scripted_io) -> None:
        backend.on("POST", "/users/authenticate", body="true")
        scripted_io.feed("jane@example.com", "secret")

        assert await prompt_login(ctx) is True
        assert scripted_io.prompts == ["Enter your email: ", "Enter your password: "]
        assert scripted_io.lines[0] == "Please log in to access the system."
