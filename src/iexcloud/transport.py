"""HTTP transport for the IEX Cloud client.

The request core only needs ``get(url)`` returning a status and a body, so
any object satisfying :class:`Transport` can be substituted. The default
implementation wraps a lazily created ``httpx.AsyncClient``.
"""

import time
from dataclasses import dataclass
from typing import Protocol

import httpx
import structlog

from .metrics import ERROR_STATUS, RequestMetrics

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class TransportResponse:
    """Status code and undecoded body of an HTTP response."""

    status: int
    body: str


class Transport(Protocol):
    """Anything able to perform an HTTP GET."""

    async def get(self, url: str) -> TransportResponse: ...


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    The underlying client is created on first use and reused for later
    requests, so connections are pooled. Can be used as an async context
    manager for automatic cleanup.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        metrics: RequestMetrics | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds (default: 30.0).
            metrics: Optional request metrics to record into.
            http_transport: Optional low-level httpx transport, e.g.
                ``httpx.MockTransport`` in tests.

        Raises:
            ValueError: If timeout is not positive.
        """
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)

        self._timeout = timeout
        self._metrics = metrics
        self._http_transport = http_transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=self._timeout,
                transport=self._http_transport,
            )
        return self._client

    async def __aenter__(self):
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context manager and close the HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if open."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    async def get(self, url: str) -> TransportResponse:
        """Perform a GET request.

        Args:
            url: Fully qualified URL including the query string.

        Returns:
            Status code and text body of the response.

        Raises:
            httpx.HTTPError: If the request could not be completed.
        """
        path = httpx.URL(url).path
        start_time = time.monotonic()
        try:
            response = await self.client.get(url)
        except httpx.HTTPError:
            duration = time.monotonic() - start_time
            self._observe(path, ERROR_STATUS, duration)
            logger.exception(
                "HTTP request failed",
                path=path,
                duration_seconds=round(duration, 3),
            )
            raise

        duration = time.monotonic() - start_time
        self._observe(path, response.status_code, duration)
        logger.debug(
            "HTTP request completed",
            path=path,
            status=response.status_code,
            duration_seconds=round(duration, 3),
        )
        return TransportResponse(status=response.status_code, body=response.text)

    def _observe(self, path: str, status: int | str, duration: float) -> None:
        if self._metrics is not None:
            self._metrics.observe(path, status, duration)
