"""Prometheus MCP Server - Prometheus metric catalog via Model Context Protocol."""

from __future__ import annotations

import argparse
import os
import sys

__version__ = "0.1.0"


def main() -> None:
    """Run the Prometheus MCP server."""
    parser = argparse.ArgumentParser(
        description="Prometheus MCP Server - Prometheus Metric Catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  PROMETHEUS_URL           Prometheus base URL (required)
  PROMETHEUS_USERNAME      HTTP basic auth user (optional)
  PROMETHEUS_PASSWORD      HTTP basic auth password (optional)
                           Basic auth is only used when both are set.
  PROMETHEUS_TIMEOUT       Request timeout in seconds (default: none)
  PROMETHEUS_TLS_VERIFY    Verify TLS certificates (default: true)
  PROMETHEUS_TLS_CA_BUNDLE Path to a custom CA bundle (optional)

Examples:
  # Local Prometheus
  PROMETHEUS_URL=http://localhost:9090 prometheus-mcp

  # Use SSE transport
  prometheus-mcp --url http://prometheus.example.com:9090 --transport sse
""",
    )
    parser.add_argument(
        "--url",
        help="Prometheus base URL (overrides PROMETHEUS_URL)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    args = parser.parse_args()

    if args.url:
        os.environ["PROMETHEUS_URL"] = args.url

    from fastmcp.utilities.logging import get_logger

    from prometheus_mcp.config import PrometheusMCPSettings
    from prometheus_mcp.errors import ConfigurationError
    from prometheus_mcp.server import create_server

    logger = get_logger("prometheus_mcp")

    settings = PrometheusMCPSettings()
    if not settings.url:
        logger.error("PROMETHEUS_URL environment variable is not set")
        sys.exit(1)

    try:
        server = create_server(settings)
    except ConfigurationError as e:
        logger.error("%s", e)
        sys.exit(1)

    logger.info("Prometheus MCP Server running on %s", args.transport)
    server.run(transport=args.transport)


__all__ = ["main"]
