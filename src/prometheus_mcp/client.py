"""Async client for the Prometheus HTTP API."""

from __future__ import annotations

from typing import Any, Self

import httpx
from fastmcp.utilities.logging import get_logger

from prometheus_mcp.errors import BackendRequestError, ConfigurationError

logger = get_logger(__name__)

METADATA_PATH = "/api/v1/metadata"
QUERY_PATH = "/api/v1/query"


class PrometheusClient:
    """Async client for the Prometheus HTTP API.

    Each call is a single GET with no retries. Non-2xx answers are raised as
    BackendRequestError carrying the HTTP status text.

    Args:
        base_url: Base URL of the Prometheus server (e.g., http://localhost:9090).
        auth: Optional HTTP basic auth tuple (username, password).
        timeout: Request timeout in seconds, or None to wait indefinitely.
        verify: TLS verification flag or CA bundle path.
    """

    def __init__(
        self,
        base_url: str,
        auth: tuple[str, str] | None = None,
        timeout: float | None = None,
        verify: bool | str = True,
    ) -> None:
        """Initialize the Prometheus client."""
        if not base_url:
            raise ConfigurationError("prometheus url is required")
        self._base_url = base_url
        self._auth = auth
        self._timeout = timeout
        self._verify = verify
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> Self:
        """Enter async context and open the underlying httpx client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            verify=self._verify,
            headers={"Accept": "application/json"},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit async context and close httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def base_url(self) -> str:
        """The Prometheus base URL this client talks to."""
        return self._base_url

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body.

        Args:
            path: Endpoint path relative to the base URL.
            params: Optional query parameters; httpx percent-encodes them once.

        Returns:
            The parsed JSON body.

        Raises:
            RuntimeError: If client is not connected.
            BackendRequestError: If Prometheus answers with a non-2xx status.
        """
        if self._client is None:
            raise RuntimeError("Client not connected. Use async with context.")

        logger.debug("GET %s params=%s", path, params)
        resp = await self._client.get(path, params=params)
        if not resp.is_success:
            raise BackendRequestError(resp.status_code, resp.reason_phrase)
        return resp.json()

    async def metadata(self, metric: str | None = None) -> dict:
        """Fetch metric metadata.

        Args:
            metric: Restrict the answer to one metric name. All metrics when None.

        Returns:
            Raw envelope from /api/v1/metadata.
        """
        params = {"metric": metric} if metric is not None else None
        return await self._get(METADATA_PATH, params=params)

    async def query(self, expr: str) -> dict:
        """Evaluate an instant query.

        Args:
            expr: PromQL expression, sent as-is apart from URL encoding.

        Returns:
            Raw envelope from /api/v1/query.
        """
        return await self._get(QUERY_PATH, params={"query": expr})
