"""FastMCP server setup and lifespan management."""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from fastmcp.server.middleware.logging import StructuredLoggingMiddleware

from prometheus_mcp.client import PrometheusClient
from prometheus_mcp.config import PrometheusMCPSettings


def make_lifespan(
    settings: PrometheusMCPSettings,
) -> Callable[[FastMCP], AbstractAsyncContextManager[dict[str, Any]]]:
    """Build the lifespan that owns the PrometheusClient.

    Args:
        settings: Settings the client is created from.

    Returns:
        Lifespan function for FastMCP.
    """

    @asynccontextmanager
    async def lifespan(mcp: FastMCP) -> AsyncIterator[dict[str, Any]]:
        """Manage PrometheusClient lifecycle.

        Creates a PrometheusClient for the duration of the server's lifetime,
        making it available to the middleware via the context.

        Yields:
            Context dict with the client.
        """
        async with PrometheusClient(
            base_url=settings.require_url(),
            auth=settings.auth,
            timeout=settings.timeout,
            verify=settings.verify,
        ) as client:
            yield {"client": client}

    return lifespan


def create_server(settings: PrometheusMCPSettings | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        settings: Server settings. Loaded from the environment when None.

    Returns:
        Configured FastMCP server instance.

    Raises:
        ConfigurationError: If no Prometheus URL is configured.
    """
    from prometheus_mcp import __version__
    from prometheus_mcp.middleware import MetricCatalogMiddleware

    if settings is None:
        settings = PrometheusMCPSettings()
    resource_base = settings.resource_base_url

    mcp = FastMCP(
        name="prometheus",
        version=__version__,
        instructions=f"""Prometheus MCP Server - metric catalog and summary statistics

Prometheus endpoint: {settings.url}

Every metric known to Prometheus is listed as a resource:
  {resource_base.join("metrics/")}<metric_name>

Reading a metric resource returns JSON with:
- name: the metric name
- metadata: type, help and unit reported by Prometheus ({{}} if unknown)
- statistics: count, min and max across all current series

A statistic is 0 when Prometheus returned no sample for it, which cannot be
told apart from a real zero.

This server defines no tools.
""",
        lifespan=make_lifespan(settings),
    )

    mcp.add_middleware(StructuredLoggingMiddleware(include_payload_length=True))
    mcp.add_middleware(MetricCatalogMiddleware(resource_base))

    return mcp
