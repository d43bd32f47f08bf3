"""Prometheus errors and their mapping to MCP ResourceErrors."""

from __future__ import annotations

import httpx
from fastmcp.exceptions import ResourceError


class PrometheusError(Exception):
    """Base Prometheus MCP error."""


class ConfigurationError(PrometheusError):
    """Required server configuration is missing."""


class BackendRequestError(PrometheusError):
    """Prometheus answered with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Prometheus API error: {reason}")


class CatalogFetchError(PrometheusError):
    """The metadata endpoint returned a non-success envelope."""


def handle_prometheus_error(
    e: Exception,
    operation: str,
    base_url: str | None = None,
) -> ResourceError:
    """Convert Prometheus/httpx exceptions to MCP ResourceErrors.

    Uses isinstance() checks rather than match/case class patterns so the
    mapping survives module reloading.

    Args:
        e: The exception to convert.
        operation: Description of the operation that failed.
        base_url: Prometheus URL the request went to, for connection errors.

    Returns:
        A ResourceError with an appropriate message.
    """
    if isinstance(e, httpx.ConnectError):
        target = f" at {base_url}" if base_url else ""
        return ResourceError(
            f"Cannot connect to Prometheus{target} during {operation}. Is it running?"
        )

    if isinstance(e, httpx.TimeoutException):
        return ResourceError(f"Request timed out during {operation}")

    if isinstance(e, (BackendRequestError, CatalogFetchError)):
        return ResourceError(str(e))

    return ResourceError(f"Error during {operation}: {e}")
