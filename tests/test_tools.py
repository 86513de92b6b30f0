"""Tests for the tool catalogue, argument validation, and dispatch routing.

Covers:
- osint_mcp.registry (Param, ToolSpec, ToolRegistry)
- osint_mcp.tools.TOOL_DEFINITIONS / dispatch
- one-request-per-tool behaviour for every registered tool
"""

from __future__ import annotations

import httpx
import pytest

from osint_mcp.errors import ApiError, InvalidArgumentsError, UnknownToolError
from osint_mcp.registry import REGISTRY, Param, ToolRegistry
from osint_mcp.tools import TOOL_DEFINITIONS, dispatch

from tests.conftest import RecordingTransport

_SAMPLE_VALUES = {"string": "x", "integer": 1, "number": 1.5, "boolean": True}


def _minimal_args(spec) -> dict:
    """Smallest argument bag that satisfies *spec*'s required params."""
    args = {}
    for p in spec.params:
        if p.required:
            args[p.name] = p.enum[0] if p.enum else _SAMPLE_VALUES[p.type]
    return args


# ═══════════════════════════════════════════════════════════════════════════
# Catalogue
# ═══════════════════════════════════════════════════════════════════════════


class TestCatalogue:
    def test_catalogue_and_dispatch_table_match(self):
        advertised = [d["name"] for d in TOOL_DEFINITIONS]
        assert len(advertised) == len(set(advertised))
        assert set(advertised) == set(REGISTRY.names())
        for name in advertised:
            assert REGISTRY.get(name).handler is not None

    def test_catalogue_size(self):
        assert 60 <= len(TOOL_DEFINITIONS) <= 80

    @pytest.mark.parametrize(
        "name",
        [
            "search_messages",
            "get_message",
            "semantic_search",
            "unified_search",
            "list_channels",
            "search_entities",
            "get_entity",
            "list_events",
            "get_timeline_stats",
            "get_map_messages",
            "validate_message",
            "translate_comment",
            "get_platform_dashboard",
            "get_system_health",
            "get_model_health",
        ],
    )
    def test_core_tools_present(self, name):
        assert name in REGISTRY

    def test_schema_shape(self):
        for defn in TOOL_DEFINITIONS:
            schema = defn["inputSchema"]
            assert schema["type"] == "object"
            assert defn["description"]
            assert set(schema["required"]) <= set(schema["properties"])
            for prop in schema["properties"].values():
                assert prop["type"] in {"string", "integer", "number", "boolean"}
                assert prop["description"]
                if "enum" in prop:
                    assert prop["type"] == "string"

    def test_required_fields_declared(self):
        schema = REGISTRY.get("get_entity").input_schema
        assert schema["required"] == ["source", "entity_id"]
        assert REGISTRY.get("get_system_health").input_schema == {
            "type": "object",
            "properties": {},
            "required": [],
        }

    def test_enum_advertised(self):
        props = REGISTRY.get("search_messages").input_schema["properties"]
        assert props["importance_level"]["enum"] == ["high", "medium", "low"]


# ═══════════════════════════════════════════════════════════════════════════
# Registry mechanics
# ═══════════════════════════════════════════════════════════════════════════


class TestRegistry:
    def test_duplicate_tool_rejected(self):
        reg = ToolRegistry()

        @reg.tool("ping", "Ping.")
        async def ping(client, args):
            return None

        with pytest.raises(ValueError, match="already registered"):

            @reg.tool("ping", "Ping again.")
            async def ping_again(client, args):
                return None

    def test_duplicate_param_rejected(self):
        reg = ToolRegistry()
        with pytest.raises(ValueError, match="Duplicate parameter"):
            reg.tool("t", "T.", Param("a", "string", "A"), Param("a", "integer", "A"))

    def test_bad_param_type_rejected(self):
        with pytest.raises(ValueError):
            Param("a", "array", "A")

    def test_enum_on_non_string_rejected(self):
        with pytest.raises(ValueError):
            Param("a", "integer", "A", enum=("1",))

    def test_unknown_tool(self):
        with pytest.raises(UnknownToolError) as exc_info:
            REGISTRY.get("frobnicate")
        assert exc_info.value.kind == "unknown_tool"
        assert str(exc_info.value) == "Unknown tool: frobnicate"

    def test_parse_returns_frozen_model_with_unset_fields_none(self):
        args = REGISTRY.get("search_messages").parse({"query": "Bakhmut", "days": 7})
        assert args.query == "Bakhmut"
        assert args.days == 7
        assert args.channel_id is None
        with pytest.raises(Exception):
            args.days = 8

    def test_parse_ignores_unknown_keys(self):
        args = REGISTRY.get("get_message").parse({"message_id": 3, "bogus": True})
        assert args.message_id == 3
        assert not hasattr(args, "bogus")

    def test_parse_coerces_numeric_strings(self):
        args = REGISTRY.get("get_message").parse({"message_id": "42"})
        assert args.message_id == 42

    def test_missing_required_argument(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            REGISTRY.get("get_entity").parse({"source": "curated"})
        err = exc_info.value
        assert err.kind == "invalid_arguments"
        assert err.tool_name == "get_entity"
        assert any(e.startswith("entity_id:") for e in err.errors)
        assert str(err).startswith("Invalid arguments for get_entity: entity_id:")

    def test_enum_violation(self):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            REGISTRY.get("search_messages").parse({"importance_level": "critical"})
        assert exc_info.value.errors[0].startswith("importance_level:")

    def test_wrong_type(self):
        with pytest.raises(InvalidArgumentsError):
            REGISTRY.get("get_message").parse({"message_id": "not-a-number"})

    def test_numeric_string_field_coerced_to_text(self):
        args = REGISTRY.get("get_entity").parse({"source": "curated", "entity_id": 12345})
        assert args.entity_id == "12345"

    def test_whole_number_stays_integer(self):
        args = REGISTRY.get("unified_search").parse({"query": "x", "radius_km": 10})
        assert args.radius_km == 10
        assert isinstance(args.radius_km, int)

    def test_fractional_number_stays_float(self):
        args = REGISTRY.get("unified_search").parse({"query": "x", "radius_km": 2.5})
        assert args.radius_km == 2.5

    def test_none_arguments_treated_as_empty(self):
        args = REGISTRY.get("get_system_health").parse(None)
        assert args.model_dump() == {}


# ═══════════════════════════════════════════════════════════════════════════
# Dispatch
# ═══════════════════════════════════════════════════════════════════════════


class TestDispatch:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", REGISTRY.names())
    async def test_every_tool_makes_exactly_one_request(self, name, recorder, api_client):
        spec = REGISTRY.get(name)
        result = await dispatch(name, _minimal_args(spec), api_client)
        assert result == {"ok": True}
        assert len(recorder.requests) == 1
        expected = "POST" if name == "translate_comment" else "GET"
        assert recorder.last.method == expected

    @pytest.mark.asyncio
    async def test_system_health_hits_health_without_params(self, recorder, make_client):
        body = {"status": "healthy", "services": {"db": "up"}}
        transport = RecordingTransport(lambda r: httpx.Response(200, json=body))
        client = make_client(transport)
        result = await dispatch("get_system_health", {}, client)
        assert result == body
        assert len(transport.requests) == 1
        assert transport.last.method == "GET"
        assert transport.last.url.path == "/health"
        assert transport.last.url.query == b""

    @pytest.mark.asyncio
    async def test_search_messages_maps_query_to_q(self, recorder, api_client):
        await dispatch("search_messages", {"query": "Bakhmut", "days": 7}, api_client)
        assert len(recorder.requests) == 1
        req = recorder.last
        assert req.url.path == "/api/messages"
        assert dict(req.url.params) == {"q": "Bakhmut", "days": "7"}

    @pytest.mark.asyncio
    async def test_get_entity_interpolates_source_and_id(self, recorder, api_client):
        await dispatch("get_entity", {"source": "curated", "entity_id": "Q12345"}, api_client)
        assert recorder.last.url.path == "/api/entities/curated/Q12345"
        assert recorder.last.url.query == b""

    @pytest.mark.asyncio
    async def test_numeric_entity_id_reaches_the_path(self, recorder, api_client):
        await dispatch("get_entity", {"source": "curated", "entity_id": 12345}, api_client)
        assert len(recorder.requests) == 1
        assert recorder.last.url.path == "/api/entities/curated/12345"

    @pytest.mark.asyncio
    async def test_whole_number_radius_sent_without_decimal(self, recorder, api_client):
        await dispatch("unified_search", {"query": "x", "radius_km": 10}, api_client)
        assert dict(recorder.last.url.params) == {"q": "x", "radius_km": "10"}

    @pytest.mark.asyncio
    async def test_false_boolean_is_forwarded(self, recorder, api_client):
        await dispatch("search_messages", {"has_media": False, "min_views": 0}, api_client)
        assert dict(recorder.last.url.params) == {"has_media": "false", "min_views": "0"}

    @pytest.mark.asyncio
    async def test_entity_mentions_route(self, recorder, api_client):
        await dispatch(
            "get_entity_mentions",
            {"source": "opensanctions", "entity_id": "NK-1", "limit": 5},
            api_client,
        )
        assert recorder.last.url.path == "/api/entities/opensanctions/NK-1/messages"
        assert dict(recorder.last.url.params) == {"limit": "5"}

    @pytest.mark.asyncio
    async def test_reverse_geocode_sends_coordinates(self, recorder, api_client):
        await dispatch("reverse_geocode", {"lat": 48.59, "lng": 38.0}, api_client)
        assert recorder.last.url.path == "/api/map/locations/reverse"
        assert dict(recorder.last.url.params) == {"lat": "48.59", "lng": "38.0"}

    @pytest.mark.asyncio
    async def test_processing_stats_hours(self, recorder, api_client):
        await dispatch("get_processing_stats", {"hours": 6}, api_client)
        assert recorder.last.url.path == "/api/admin/stats/processing"
        assert dict(recorder.last.url.params) == {"hours": "6"}

    @pytest.mark.asyncio
    async def test_unknown_tool_makes_no_request(self, recorder, api_client):
        with pytest.raises(UnknownToolError):
            await dispatch("frobnicate", {}, api_client)
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_invalid_arguments_make_no_request(self, recorder, api_client):
        with pytest.raises(InvalidArgumentsError):
            await dispatch("list_events", {"tab": "upcoming"}, api_client)
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_api_error_propagates(self, make_client):
        transport = RecordingTransport(lambda r: httpx.Response(500, text="boom"))
        client = make_client(transport)
        with pytest.raises(ApiError, match="API Error 500: boom"):
            await dispatch("get_event_stats", {}, client)

    @pytest.mark.asyncio
    async def test_dispatch_logs_call_and_result(self, api_client, caplog):
        caplog.set_level("INFO", logger="osint_mcp.tools")
        await dispatch("get_event_stats", {}, api_client)
        messages = [r.getMessage() for r in caplog.records]
        assert any("[mcp:call]" in m and "get_event_stats" in m for m in messages)
        assert any("[mcp:result]" in m and "OK" in m for m in messages)
