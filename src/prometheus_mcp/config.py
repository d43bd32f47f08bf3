"""Configuration for the Prometheus MCP server."""

from __future__ import annotations

import httpx
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from prometheus_mcp.errors import ConfigurationError


class PrometheusMCPSettings(BaseSettings):
    """Configuration for the Prometheus MCP server.

    Settings are frozen once loaded; a server instance owns its settings for
    its whole lifetime.

    Attributes:
        url: Base URL of the Prometheus server (e.g., http://localhost:9090).
        username: HTTP basic auth user.
        password: HTTP basic auth password.
        timeout: Request timeout in seconds, or None to wait indefinitely.
        tls_verify: Verify TLS certificates for https URLs.
        tls_ca_bundle: Path to a custom CA bundle.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PROMETHEUS_",
        extra="ignore",
        frozen=True,
    )

    url: str = Field(default="", description="Prometheus base URL")
    username: str | None = Field(default=None, description="HTTP basic auth user")
    password: str | None = Field(default=None, description="HTTP basic auth password")
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (None disables the client timeout)",
    )
    tls_verify: bool = Field(default=True, description="Verify TLS certificates")
    tls_ca_bundle: str | None = Field(
        default=None,
        description="Path to custom CA bundle for TLS verification",
    )

    def require_url(self) -> str:
        """Return the configured base URL.

        Raises:
            ConfigurationError: If no URL is configured or it is not absolute.
        """
        if not self.url:
            raise ConfigurationError("prometheus url is required")
        if not httpx.URL(self.url).is_absolute_url:
            raise ConfigurationError(f"prometheus url must be absolute: {self.url}")
        return self.url

    @property
    def auth(self) -> tuple[str, str] | None:
        """Auth tuple for httpx, or None unless both username and password are set."""
        if self.username and self.password:
            return (self.username, self.password)
        return None

    @property
    def verify(self) -> bool | str:
        """TLS verification setting for httpx.

        Returns:
            False if verification disabled, path to CA bundle if specified,
            or True for default system verification.
        """
        if not self.tls_verify:
            return False
        if self.tls_ca_bundle:
            return self.tls_ca_bundle
        return True

    @property
    def resource_base_url(self) -> httpx.URL:
        """Base URL that metric resource URIs are resolved against."""
        return httpx.URL(self.require_url())
