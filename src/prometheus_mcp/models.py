"""Pydantic models for catalog entries and metric details."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

JSON_MIME_TYPE = "application/json"
NO_DESCRIPTION = "No description available"

StatValue = int | float | str


class MetricResource(BaseModel):
    """A metric exposed as an MCP resource."""

    uri: str = Field(description="Resource URI, <base>/metrics/<name>")
    name: str = Field(description="Metric name")
    mime_type: str = Field(default=JSON_MIME_TYPE, description="Content type of the resource")
    description: str = Field(default=NO_DESCRIPTION, description="Metric help text")


class MetricStatistics(BaseModel):
    """Aggregates across all series of a metric.

    Missing aggregates are 0, same as a real zero. Present values keep the
    representation Prometheus returned.
    """

    count: StatValue = Field(default=0, description="count(<metric>)")
    min: StatValue = Field(default=0, description="min(<metric>)")
    max: StatValue = Field(default=0, description="max(<metric>)")


class MetricDetails(BaseModel):
    """Merged metadata and statistics for one metric."""

    metadata: dict[str, Any] = Field(description="Raw /api/v1/metadata?metric= envelope")
    statistics: MetricStatistics = Field(description="Aggregate statistics")


class MetricDetailBody(BaseModel):
    """Body returned when reading a metric resource."""

    name: str = Field(description="Metric name")
    metadata: dict[str, Any] = Field(
        default_factory=dict, description="First metadata entry for the metric"
    )
    statistics: MetricStatistics = Field(description="Aggregate statistics")
