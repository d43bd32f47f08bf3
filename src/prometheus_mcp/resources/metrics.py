"""Metric detail resources: metadata plus count/min/max for one metric."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import httpx
from fastmcp.utilities.logging import get_logger

from prometheus_mcp.models import (
    MetricDetailBody,
    MetricDetails,
    MetricStatistics,
)
from prometheus_mcp.utils.extractors import extract_first_metadata, extract_scalar

if TYPE_CHECKING:
    from prometheus_mcp.client import PrometheusClient

logger = get_logger(__name__)

AGGREGATES = ("count", "min", "max")


async def fetch_metric_details(client: PrometheusClient, metric_name: str) -> MetricDetails:
    """Fetch metadata and aggregate statistics for a metric.

    The metadata request completes first. The three aggregate queries are
    then issued together and all must succeed; the first failure is raised
    and the remaining queries are left to finish on their own.

    The metric name goes into the PromQL expression unescaped.

    Args:
        client: Connected Prometheus client.
        metric_name: Metric to describe.

    Returns:
        The raw metadata envelope and the count/min/max statistics.

    Raises:
        BackendRequestError: If any of the four requests fails.
    """
    metadata = await client.metadata(metric=metric_name)

    logger.debug("Querying %s for %s", ", ".join(AGGREGATES), metric_name)
    responses = await asyncio.gather(
        *(client.query(f"{agg}({metric_name})") for agg in AGGREGATES)
    )

    statistics = MetricStatistics(
        **{agg: extract_scalar(resp) for agg, resp in zip(AGGREGATES, responses)}
    )
    return MetricDetails(metadata=metadata, statistics=statistics)


def metric_name_from_uri(uri: str) -> str:
    """Take the last path segment of a resource URI as the metric name."""
    return httpx.URL(uri).path.split("/")[-1]


async def read_metric(client: PrometheusClient, uri: str) -> str:
    """Build the JSON document for a metric resource.

    Args:
        client: Connected Prometheus client.
        uri: Resource URI whose final path segment names the metric.

    Returns:
        The detail body as JSON with 2-space indentation.
    """
    metric_name = metric_name_from_uri(uri)
    details = await fetch_metric_details(client, metric_name)

    body = MetricDetailBody(
        name=metric_name,
        metadata=extract_first_metadata(details.metadata, metric_name),
        statistics=details.statistics,
    )
    return json.dumps(body.model_dump(), indent=2, ensure_ascii=False)

