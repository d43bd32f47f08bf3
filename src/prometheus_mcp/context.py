"""Context helpers for safe lifespan context access."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastmcp.exceptions import ResourceError

if TYPE_CHECKING:
    from fastmcp import Context

    from prometheus_mcp.client import PrometheusClient


def _validate_context(ctx: Context | None) -> None:
    """Validate context has lifespan_context available.

    Args:
        ctx: MCP context.

    Raises:
        ResourceError: If context is not available.
    """
    if (
        ctx is None
        or ctx.request_context is None
        or ctx.request_context.lifespan_context is None
    ):
        raise ResourceError("Server context not available")


def get_client(ctx: Context | None) -> PrometheusClient:
    """Get the PrometheusClient from context.

    Raises:
        ResourceError: If context is not available.
    """
    _validate_context(ctx)
    return ctx.request_context.lifespan_context["client"]

