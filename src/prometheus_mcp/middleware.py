"""Custom middleware for prometheus-mcp server."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from fastmcp.resources import Resource
from fastmcp.server.middleware import Middleware
from mcp.server.lowlevel.helper_types import ReadResourceContents

from prometheus_mcp.context import get_client
from prometheus_mcp.errors import handle_prometheus_error
from prometheus_mcp.models import JSON_MIME_TYPE
from prometheus_mcp.resources.catalog import fetch_catalog
from prometheus_mcp.resources.metrics import read_metric

if TYPE_CHECKING:
    import httpx
    from fastmcp.server.middleware.middleware import CallNext, MiddlewareContext
    from mcp import types as mt

    from prometheus_mcp.client import PrometheusClient
    from prometheus_mcp.models import MetricResource


def _metric_reader(client: PrometheusClient, uri: str):
    async def read() -> str:
        return await read_metric(client, uri)

    return read


def to_resource(client: PrometheusClient, entry: MetricResource) -> Resource:
    """Wrap a catalog entry as a readable FastMCP resource."""
    return Resource.from_function(
        fn=_metric_reader(client, entry.uri),
        uri=entry.uri,
        name=entry.name,
        description=entry.description,
        mime_type=entry.mime_type,
    )


class MetricCatalogMiddleware(Middleware):
    """Serve the Prometheus metric catalog as MCP resources.

    resources/list appends one resource per metric, fetched from Prometheus on
    every listing. resources/read resolves any URI by its last path segment,
    so it does not depend on the URI's scheme or host. Either operation fails
    as a whole when Prometheus does; nothing partial is returned.
    """

    def __init__(self, resource_base: httpx.URL) -> None:
        """Initialize the catalog middleware.

        Args:
            resource_base: Base URL that metric URIs are resolved against.
        """
        self._resource_base = resource_base

    async def on_list_resources(
        self,
        context: MiddlewareContext[mt.ListResourcesRequest],
        call_next: CallNext[mt.ListResourcesRequest, Sequence[Resource]],
    ) -> Sequence[Resource]:
        """Add the live metric catalog after any statically registered resources."""
        resources = await call_next(context)
        client = get_client(context.fastmcp_context)

        try:
            catalog = await fetch_catalog(client, self._resource_base)
        except Exception as e:
            raise handle_prometheus_error(e, "listing metrics", client.base_url) from e

        return [*resources, *(to_resource(client, entry) for entry in catalog)]

    async def on_read_resource(
        self,
        context: MiddlewareContext[mt.ReadResourceRequestParams],
        call_next: CallNext[mt.ReadResourceRequestParams, Sequence[ReadResourceContents]],
    ) -> Sequence[ReadResourceContents]:
        """Answer every read with the detail document of the named metric."""
        client = get_client(context.fastmcp_context)

        try:
            text = await read_metric(client, str(context.message.uri))
        except Exception as e:
            raise handle_prometheus_error(e, "reading metric", client.base_url) from e

        return [ReadResourceContents(content=text, mime_type=JSON_MIME_TYPE)]
