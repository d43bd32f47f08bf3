"""End-to-end tests through FastMCP's in-memory client.

Prometheus is mocked with respx; the MCP session itself is real.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest
import respx
from fastmcp import Client
from httpx import Response

from prometheus_mcp.config import PrometheusMCPSettings
from prometheus_mcp.errors import ConfigurationError
from prometheus_mcp.server import create_server

BASE_URL = "http://localhost:9090"


@pytest.fixture
def settings() -> PrometheusMCPSettings:
    return PrometheusMCPSettings(_env_file=None, url=BASE_URL)


class TestCreateServer:
    def test_server_creates_successfully(self, settings: PrometheusMCPSettings) -> None:
        server = create_server(settings)
        assert server.name == "prometheus"

    @pytest.mark.parametrize("url", ["", None])
    def test_requires_url(self, url: str | None, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PROMETHEUS_URL", raising=False)
        kwargs = {} if url is None else {"url": url}
        settings = PrometheusMCPSettings(_env_file=None, **kwargs)

        with respx.mock(assert_all_called=False) as router:
            with pytest.raises(ConfigurationError):
                create_server(settings)

        assert not router.calls

    def test_loads_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PROMETHEUS_URL", BASE_URL)
        assert create_server().name == "prometheus"


class TestListTools:
    async def test_no_tools_with_unreachable_backend(
        self, settings: PrometheusMCPSettings
    ) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.route().mock(side_effect=httpx.ConnectError("Connection refused"))

            async with Client(create_server(settings)) as client:
                tools = await client.list_tools()

        assert tools == []


class TestListResources:
    @respx.mock
    async def test_lists_metrics_as_resources(
        self,
        settings: PrometheusMCPSettings,
        metadata_response: Callable[..., dict],
    ) -> None:
        respx.get(f"{BASE_URL}/api/v1/metadata").mock(
            return_value=Response(
                200,
                json=metadata_response(
                    {
                        "cpu_usage": [{"type": "gauge", "help": "CPU usage", "unit": ""}],
                        "up": [],
                    }
                ),
            )
        )

        async with Client(create_server(settings)) as client:
            resources = await client.list_resources()

        assert [str(r.uri) for r in resources] == [
            "http://localhost:9090/metrics/cpu_usage",
            "http://localhost:9090/metrics/up",
        ]
        assert [r.name for r in resources] == ["cpu_usage", "up"]
        assert {r.mimeType for r in resources} == {"application/json"}
        assert [r.description for r in resources] == ["CPU usage", "No description available"]

    @respx.mock
    async def test_non_success_status_fails(
        self,
        settings: PrometheusMCPSettings,
        metadata_response: Callable[..., dict],
    ) -> None:
        respx.get(f"{BASE_URL}/api/v1/metadata").mock(
            return_value=Response(200, json=metadata_response(status="error"))
        )

        async with Client(create_server(settings)) as client:
            with pytest.raises(Exception, match="Failed to fetch metrics metadata"):
                await client.list_resources()

    @respx.mock
    async def test_sends_no_auth_without_password(
        self, metadata_response: Callable[..., dict]
    ) -> None:
        route = respx.get(f"{BASE_URL}/api/v1/metadata").mock(
            return_value=Response(200, json=metadata_response())
        )
        settings = PrometheusMCPSettings(_env_file=None, url=BASE_URL, username="admin")

        async with Client(create_server(settings)) as client:
            await client.list_resources()

        assert "Authorization" not in route.calls.last.request.headers


class TestReadResource:
    @respx.mock
    async def test_reads_metric_details(
        self,
        settings: PrometheusMCPSettings,
        query_response: Callable[..., dict],
    ) -> None:
        respx.get(f"{BASE_URL}/api/v1/metadata", params={"metric": "cpu_usage"}).mock(
            return_value=Response(
                200,
                json={
                    "status": "success",
                    "data": {"cpu_usage": [{"type": "gauge", "help": "CPU usage", "unit": ""}]},
                },
            )
        )
        for agg in ("count", "min", "max"):
            respx.get(f"{BASE_URL}/api/v1/query", params={"query": f"{agg}(cpu_usage)"}).mock(
                return_value=Response(200, json=query_response())
            )
        uri = f"{BASE_URL}/metrics/cpu_usage"

        async with Client(create_server(settings)) as client:
            contents = await client.read_resource(uri)

        assert len(contents) == 1
        assert str(contents[0].uri) == uri
        assert contents[0].mimeType == "application/json"
        assert json.loads(contents[0].text) == {
            "name": "cpu_usage",
            "metadata": {"type": "gauge", "help": "CPU usage", "unit": ""},
            "statistics": {"count": 0, "min": 0, "max": 0},
        }

    async def test_failed_statistic_fails_read(
        self,
        settings: PrometheusMCPSettings,
        query_response: Callable[..., dict],
    ) -> None:
        with respx.mock(assert_all_called=False) as router:
            router.get(f"{BASE_URL}/api/v1/metadata").mock(
                return_value=Response(200, json={"status": "success", "data": {}})
            )
            router.get(f"{BASE_URL}/api/v1/query", params={"query": "min(cpu_usage)"}).mock(
                return_value=Response(500)
            )
            router.get(f"{BASE_URL}/api/v1/query").mock(
                return_value=Response(200, json=query_response("1"))
            )

            async with Client(create_server(settings)) as client:
                with pytest.raises(Exception, match="Prometheus API error: Internal Server Error"):
                    await client.read_resource(f"{BASE_URL}/metrics/cpu_usage")

    @pytest.mark.parametrize(
        "uri",
        [
            "http://other-host/metrics/cpu_usage",
            "http://localhost:9090/metrics/cpu_usage?x=1",
        ],
    )
    async def test_reads_any_uri_by_last_segment(
        self,
        uri: str,
        settings: PrometheusMCPSettings,
        query_response: Callable[..., dict],
    ) -> None:
        with respx.mock(assert_all_called=False) as router:
            metadata = router.get(f"{BASE_URL}/api/v1/metadata").mock(
                return_value=Response(200, json={"status": "success", "data": {}})
            )
            router.get(f"{BASE_URL}/api/v1/query").mock(
                return_value=Response(200, json=query_response("7"))
            )

            async with Client(create_server(settings)) as client:
                contents = await client.read_resource(uri)

        assert len(contents) == 1
        assert str(contents[0].uri) == uri
        assert contents[0].mimeType == "application/json"
        assert json.loads(contents[0].text)["name"] == "cpu_usage"
        assert metadata.calls.last.request.url.params["metric"] == "cpu_usage"
