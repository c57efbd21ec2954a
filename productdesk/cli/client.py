"""
HTTP Client for CLI.

Provides async HTTP client for communicating with the backend API.
One attempt per call: no retry, no backoff. Transport failures are
raised as NetworkError; HTTP statuses are returned to the caller as-is.
"""

from types import TracebackType
from typing import Any

import httpx

from productdesk.core.config import get_api_settings
from productdesk.core.exceptions import HttpError, NetworkError
from productdesk.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for backend API communication.

    Features:
    - Base URL and timeout from application.yaml
    - Lazily created, reused httpx.AsyncClient
    - Structured logging of requests/responses
    - Transport failures wrapped in NetworkError

    Usage:
        async with APIClient() as client:
            response = await client.get("/users/readAllUsers")
            response = await client.post("/users/createUser", json={"name": "test"})
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Backend API base URL. If None, reads from configuration.
            timeout: Request timeout in seconds. If None, reads from configuration
                (where null means no timeout).
            transport: Optional httpx transport, used by tests to fake the backend.
        """
        try:
            config_base_url, config_timeout, _ = get_api_settings()
        except Exception as e:
            if base_url is None:
                raise RuntimeError(
                    "Could not determine backend URL from application.yaml"
                ) from e
            config_base_url = base_url
            config_timeout = None

        self.base_url = (base_url or config_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "APIClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(
        self,
        method: str,
        path: str,
        headers: dict[str, str | bytes] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """
        Make an HTTP request to the backend.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path relative to the base URL (e.g., /users/readAllUsers)
            headers: Extra request headers
            json: JSON body; sent with Content-Type: application/json

        Returns:
            httpx.Response with status code and raw body text

        Raises:
            NetworkError: On connection failure, timeout or other transport error
        """
        client = await self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=method,
            path=path,
        )

        try:
            response = await client.request(method, path, headers=headers, json=json)
        except httpx.TransportError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise NetworkError(str(e) or type(e).__name__) from e

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a PUT request."""
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a DELETE request."""
        return await self.request("DELETE", path, **kwargs)


def ensure_ok(response: httpx.Response) -> httpx.Response:
    """Return the response if the backend answered 200, else raise HttpError."""
    if response.status_code != 200:
        raise HttpError(response.status_code, response.text)
    return response
