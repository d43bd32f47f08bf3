"""Shared utility modules for prometheus-mcp.

- extractors: Prometheus response extraction helpers
"""

from prometheus_mcp.utils.extractors import (
    extract_first_metadata,
    extract_help_text,
    extract_scalar,
)

__all__ = [
    "extract_help_text",
    "extract_first_metadata",
    "extract_scalar",
]
