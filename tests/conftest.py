"""Pytest fixtures for prometheus-mcp tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from prometheus_mcp.client import PrometheusClient

BASE_URL = "http://localhost:9090"


# =============================================================================
# Prometheus Response Factories
# =============================================================================


@pytest.fixture
def metadata_response() -> Callable[..., dict]:
    """Factory for /api/v1/metadata envelopes."""

    def _make(metrics: dict[str, list[dict]] | None = None, status: str = "success") -> dict:
        if metrics is None:
            metrics = {
                "cpu_usage": [{"type": "gauge", "help": "CPU usage", "unit": ""}],
                "http_requests_total": [
                    {"type": "counter", "help": "Total HTTP requests", "unit": ""}
                ],
            }
        return {"status": status, "data": metrics}

    return _make


@pytest.fixture
def query_response() -> Callable[..., dict]:
    """Factory for /api/v1/query instant vector envelopes."""

    def _make(value: str | None = None, timestamp: float = 1700000000.0) -> dict:
        result = [] if value is None else [{"metric": {}, "value": [timestamp, value]}]
        return {"status": "success", "data": {"resultType": "vector", "result": result}}

    return _make


# =============================================================================
# Mock Context
# =============================================================================


@pytest.fixture
def mock_client() -> AsyncMock:
    """Create a mock PrometheusClient."""
    client = AsyncMock(spec=PrometheusClient)
    client.base_url = BASE_URL
    return client


@pytest.fixture
def mock_lifespan_context(
    mock_client: AsyncMock,
) -> dict[str, Any]:
    """Create mock lifespan context."""
    return {"client": mock_client}


@pytest.fixture
def mock_context(mock_lifespan_context: dict[str, Any]) -> MagicMock:
    """Create a mock MCP Context."""
    from fastmcp import Context

    ctx = MagicMock(spec=Context)
    ctx.request_context = MagicMock()
    ctx.request_context.lifespan_context = mock_lifespan_context
    return ctx

