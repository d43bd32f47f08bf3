"""Metric catalog: Prometheus metadata as a list of MCP resources."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from fastmcp.utilities.logging import get_logger

from prometheus_mcp.errors import CatalogFetchError
from prometheus_mcp.models import MetricResource
from prometheus_mcp.utils.extractors import extract_help_text

if TYPE_CHECKING:
    from prometheus_mcp.client import PrometheusClient

logger = get_logger(__name__)


def metric_uri(resource_base: httpx.URL, metric_name: str) -> str:
    """Build the resource URI for a metric.

    ``metrics/<name>`` is resolved relative to the base, so a base path
    without a trailing slash has its last segment replaced.
    """
    return str(resource_base.join(f"metrics/{metric_name}"))


async def fetch_catalog(
    client: PrometheusClient,
    resource_base: httpx.URL,
) -> list[MetricResource]:
    """List every metric Prometheus has metadata for.

    Args:
        client: Connected Prometheus client.
        resource_base: Base URL that resource URIs are resolved against.

    Returns:
        One MetricResource per metric, in the order Prometheus returned them.

    Raises:
        BackendRequestError: If the metadata request fails.
        CatalogFetchError: If the response status is not "success".
    """
    response = await client.metadata()

    if response.get("status") != "success":
        logger.warning("Metadata request returned status %r", response.get("status"))
        raise CatalogFetchError("Failed to fetch metrics metadata")

    return [
        MetricResource(
            uri=metric_uri(resource_base, name),
            name=name,
            description=extract_help_text(entries),
        )
        for name, entries in (response.get("data") or {}).items()
    ]
