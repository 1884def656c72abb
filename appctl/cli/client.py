"""
HTTP Client for CLI.

Provides the synchronous transport commands use to reach the application
management API, and the URL builder that resolves API paths against the
configured target.

Commands receive the transport explicitly; tests inject an
httpx.MockTransport instead of patching module state.
"""

from typing import Any, Protocol

import httpx

from appctl.core.config import get_request_timeout, get_target
from appctl.core.exceptions import ConfigurationError
from appctl.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """What a command needs from the network: URLs and request execution."""

    def url(self, path: str) -> str:
        """Resolve an API path to an absolute URL."""
        ...

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return the response with its body unread."""
        ...


class UrlBuilder:
    """Textual resolution of API paths against a target."""

    def __init__(self, target: str) -> None:
        target = target.strip()
        if "://" not in target:
            target = f"http://{target}"
        self.target = target.rstrip("/")

    def resolve(self, path: str) -> str:
        """Concatenate the target and a path. The path is not validated."""
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.target}{path}"


class APIClient:
    """
    HTTP client for the application management API.

    Features:
    - Target URL and timeout from settings unless given explicitly
    - Responses returned in streaming mode; the caller reads and closes them
    - Structured logging of requests/responses

    Usage:
        with APIClient() as client:
            request = httpx.Request("GET", client.url("/apps"))
            response = client.send(request)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Service target. If None, resolved from APPCTL_TARGET or application.yaml.
            timeout: Request timeout in seconds. If None, read from settings.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        if base_url is None:
            try:
                base_url = get_target()
            except (FileNotFoundError, RuntimeError, ValueError) as e:
                raise ConfigurationError(
                    "Could not determine target from config/settings/application.yaml"
                ) from e

        if timeout is None:
            try:
                timeout = get_request_timeout()
            except (FileNotFoundError, RuntimeError, ValueError):
                timeout = DEFAULT_TIMEOUT

        self.urls = UrlBuilder(base_url)
        self.base_url = self.urls.target
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers={"User-Agent": "appctl"},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def url(self, path: str) -> str:
        """Resolve an API path against the target."""
        return self.urls.resolve(path)

    def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a prepared request.

        Args:
            request: Request built by a command

        Returns:
            httpx.Response with the body not yet read

        Raises:
            httpx.HTTPError: On connection or protocol failure
        """
        client = self._get_client()

        log_with_source(
            logger,
            "cli",
            "debug",
            "API request",
            method=request.method,
            url=str(request.url),
        )

        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
        )
        return response
