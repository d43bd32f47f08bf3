"""Metric catalog and metric detail resources for the Prometheus MCP server.

Resources are served by MetricCatalogMiddleware rather than registered on the
server, since the set of metrics is only known at request time.
"""
