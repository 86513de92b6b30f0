"""Tests for the MCP transport adapter: result wrapping and protocol handlers."""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from osint_mcp import server
from osint_mcp.prompts import PROMPTS
from osint_mcp.resources import RESOURCES
from osint_mcp.tools import TOOL_DEFINITIONS

from tests.conftest import RecordingTransport


def _text(result) -> str:
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    return result.content[0].text


# ═══════════════════════════════════════════════════════════════════════════
# run_tool
# ═══════════════════════════════════════════════════════════════════════════


class TestRunTool:
    @pytest.mark.asyncio
    async def test_success_is_indented_json(self, make_client):
        body = {"status": "healthy", "version": "2.1", "text": "Київ"}
        client = make_client(RecordingTransport(lambda r: httpx.Response(200, json=body)))
        result = await server.run_tool("get_system_health", {}, client)
        assert result.isError is False
        text = _text(result)
        assert json.loads(text) == body
        assert text == json.dumps(body, indent=2, ensure_ascii=False)

    @pytest.mark.asyncio
    async def test_http_404_becomes_in_band_error(self, make_client):
        client = make_client(RecordingTransport(lambda r: httpx.Response(404, text="not found")))
        result = await server.run_tool("get_message", {"message_id": 999}, client)
        assert result.isError is True
        assert _text(result) == "Error: API Error 404: not found"

    @pytest.mark.asyncio
    async def test_unknown_tool_becomes_in_band_error(self, recorder, api_client):
        result = await server.run_tool("frobnicate", {}, api_client)
        assert result.isError is True
        assert _text(result) == "Error: Unknown tool: frobnicate"
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_invalid_arguments_become_in_band_error(self, api_client):
        result = await server.run_tool("get_entity", {"source": "curated"}, api_client)
        assert result.isError is True
        assert _text(result).startswith("Error: Invalid arguments for get_entity: entity_id:")

    @pytest.mark.asyncio
    async def test_network_failure_becomes_in_band_error(self, make_client):
        def _refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        client = make_client(RecordingTransport(_refuse))
        result = await server.run_tool("get_system_health", None, client)
        assert result.isError is True
        assert _text(result) == "Error: Connection refused"

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_in_band_error(self, make_client):
        client = make_client(RecordingTransport(lambda r: httpx.Response(200, text="<html>")))
        result = await server.run_tool("get_system_health", {}, client)
        assert result.isError is True
        assert _text(result).startswith("Error: ")

    @pytest.mark.asyncio
    async def test_null_body_serialises(self, make_client):
        client = make_client(RecordingTransport(lambda r: httpx.Response(200, json=None)))
        result = await server.run_tool("get_event_stats", {}, client)
        assert result.isError is False
        assert _text(result) == "null"


# ═══════════════════════════════════════════════════════════════════════════
# Protocol handlers
# ═══════════════════════════════════════════════════════════════════════════


class TestHandlers:
    def test_list_tools_returns_full_catalogue(self):
        tools = asyncio.run(server.list_tools())
        assert [t.name for t in tools] == [d["name"] for d in TOOL_DEFINITIONS]
        by_name = {t.name: t for t in tools}
        assert by_name["get_entity"].inputSchema["required"] == ["source", "entity_id"]

    def test_call_tool_unknown_name(self):
        result = asyncio.run(server.call_tool("frobnicate", {}))
        assert result.isError is True
        assert result.content[0].text == "Error: Unknown tool: frobnicate"

    def test_list_resources(self):
        resources = asyncio.run(server.list_resources())
        assert len(resources) == len(RESOURCES) == 7
        assert {str(r.uri) for r in resources} == {e.uri for e in RESOURCES}
        assert all(r.mimeType == "text/markdown" for r in resources)

    def test_read_resource(self):
        contents = asyncio.run(server.read_resource("osint://reference/event-tiers"))
        assert len(contents) == 1
        assert contents[0].mime_type == "text/markdown"
        assert contents[0].content.startswith("# Event Tier Reference")

    def test_read_unknown_resource(self):
        contents = asyncio.run(server.read_resource("osint://nope"))
        assert contents[0].content == "Resource not found: osint://nope"

    def test_list_prompts(self):
        prompts = asyncio.run(server.list_prompts())
        assert [p.name for p in prompts] == [t.name for t in PROMPTS]
        investigate = next(p for p in prompts if p.name == "investigate_entity")
        required = {a.name: a.required for a in investigate.arguments}
        assert required == {"entity_name": True, "entity_type": False}

    def test_get_prompt(self):
        result = asyncio.run(server.get_prompt("validate_claim", {"message_id": "77"}))
        assert len(result.messages) == 1
        message = result.messages[0]
        assert message.role == "user"
        assert "Message #77" in message.content.text
        assert result.description

    def test_get_unknown_prompt(self):
        result = asyncio.run(server.get_prompt("frobnicate", None))
        assert result.messages[0].content.text == "Unknown prompt: frobnicate"


# ═══════════════════════════════════════════════════════════════════════════
# Shared client and dispatch wiring
# ═══════════════════════════════════════════════════════════════════════════


class TestWiring:
    def test_call_tool_routes_through_dispatch(self):
        with patch("osint_mcp.server.dispatch", new_callable=AsyncMock) as mock_dispatch:
            mock_dispatch.return_value = [1, 2]
            result = asyncio.run(server.call_tool("get_event_stats", {"x": 1}))
        assert result.isError is False
        assert json.loads(result.content[0].text) == [1, 2]
        name, arguments, _client = mock_dispatch.call_args.args
        assert name == "get_event_stats"
        assert arguments == {"x": 1}

    def test_unexpected_dispatch_failure_is_contained(self, caplog):
        with patch("osint_mcp.server.dispatch", new_callable=AsyncMock) as mock_dispatch:
            mock_dispatch.side_effect = RuntimeError("kaput")
            result = asyncio.run(server.call_tool("get_event_stats", {}))
        assert result.isError is True
        assert result.content[0].text == "Error: kaput"
        assert any("Unexpected failure" in r.getMessage() for r in caplog.records)

    def test_get_client_is_lazy_singleton(self):
        asyncio.run(server.close_client())
        first = server.get_client()
        assert server.get_client() is first
        asyncio.run(server.close_client())
        assert server.get_client() is not first
        asyncio.run(server.close_client())
