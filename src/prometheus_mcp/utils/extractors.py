"""Extraction helpers for Prometheus API responses."""

from __future__ import annotations

from typing import Any

from prometheus_mcp.models import NO_DESCRIPTION


def extract_help_text(entries: list[dict] | None, default: str = NO_DESCRIPTION) -> str:
    """Extract help text from the metadata entries of one metric.

    Only the first entry is considered; Prometheus lists one entry per
    distinct (type, help, unit) combination seen across targets.
    """
    if not entries:
        return default
    return entries[0].get("help") or default


def extract_first_metadata(response: dict, metric: str) -> dict[str, Any]:
    """Get the first metadata entry for a metric, or an empty dict."""
    entries = (response.get("data") or {}).get(metric) or []
    return entries[0] if entries else {}


def extract_scalar(response: dict, default: int = 0) -> Any:
    """Get the sample value of the first result of an instant query.

    Instant vectors carry ``[timestamp, "value"]`` pairs; the value is
    returned unconverted. Returns ``default`` when there are no results.
    """
    result = (response.get("data") or {}).get("result") or []
    if not result:
        return default
    return result[0]["value"][1]


__all__ = [
    "extract_help_text",
    "extract_first_metadata",
    "extract_scalar",
]
