"""
Session State.

The session is an explicit value carried by CLIContext; nothing here is
process-global. It is created unauthenticated and changes only when
authenticate() succeeds.
"""

from dataclasses import dataclass

from productdesk.cli.client import APIClient
from productdesk.cli.schemas import Credentials
from productdesk.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

AUTHENTICATE_PATH = "/users/authenticate"


@dataclass
class Session:
    """Whether a user is logged in and which email identifies them to the backend."""

    authenticated: bool = False
    user_email: str | None = None

    def user_email_header(self) -> str:
        """Value of the user-email header; empty while unauthenticated."""
        return self.user_email or ""


def is_true_body(body: str) -> bool:
    """The authenticate endpoint answers with a bare true/false body."""
    return body.strip().lower() == "true"


async def authenticate(client: APIClient, session: Session, email: str, password: str) -> bool:
    """
    Log in against the backend.

    On HTTP 200 with a true body the session becomes authenticated for
    email. Any other answer leaves the session untouched.

    Raises:
        NetworkError: If the backend cannot be reached
    """
    response = await client.post(
        AUTHENTICATE_PATH,
        json=Credentials(email=email, password=password).to_payload(),
    )

    if response.status_code == 200 and is_true_body(response.text):
        session.authenticated = True
        session.user_email = email
        log_with_source(logger, "session", "info", "User authenticated", email=email)
        return True

    log_with_source(
        logger,
        "session",
        "warning",
        "Authentication rejected",
        email=email,
        status_code=response.status_code,
    )
    return False
