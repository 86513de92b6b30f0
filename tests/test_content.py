"""Tests for the static resource table and prompt templates."""

import re

import pytest

from osint_mcp.prompts import PROMPTS, PromptArgument, PromptTemplate, get_prompt_content
from osint_mcp.registry import REGISTRY
from osint_mcp.resources import RESOURCES, get_resource_content

_TOOL_REF = re.compile(r"`([a-z][a-z_]+)`")


# ═══════════════════════════════════════════════════════════════════════════
# Resources
# ═══════════════════════════════════════════════════════════════════════════


class TestResources:
    def test_uris(self):
        assert [r.uri for r in RESOURCES] == [
            "osint://guide/getting-started",
            "osint://reference/topics",
            "osint://reference/event-tiers",
            "osint://reference/entity-types",
            "osint://reference/channel-affiliations",
            "osint://reference/geolocation",
            "osint://workflows/investigation",
        ]

    @pytest.mark.parametrize("entry", RESOURCES, ids=lambda e: e.uri)
    def test_content_is_markdown(self, entry):
        text = get_resource_content(entry.uri)
        assert text.startswith("# ")
        assert entry.mime_type == "text/markdown"
        assert entry.name and entry.description

    def test_not_found(self):
        assert get_resource_content("osint://missing") == "Resource not found: osint://missing"

    @pytest.mark.parametrize("entry", RESOURCES, ids=lambda e: e.uri)
    def test_referenced_tools_exist(self, entry):
        for name in _TOOL_REF.findall(entry.text):
            assert name in REGISTRY, f"{entry.uri} references unknown tool {name}"


# ═══════════════════════════════════════════════════════════════════════════
# Prompts
# ═══════════════════════════════════════════════════════════════════════════


class TestPrompts:
    def test_names(self):
        assert [p.name for p in PROMPTS] == [
            "investigate_entity",
            "validate_claim",
            "track_event",
            "analyze_channel",
            "trace_narrative",
            "daily_briefing",
            "geographic_sitrep",
            "platform_health_check",
            "find_viral_content",
            "discover_connections",
        ]

    @pytest.mark.parametrize("template", PROMPTS, ids=lambda t: t.name)
    def test_referenced_tools_exist(self, template):
        for section in template.texts():
            for name in _TOOL_REF.findall(section):
                assert name in REGISTRY, f"{template.name} references unknown tool {name}"

    @pytest.mark.parametrize("template", PROMPTS, ids=lambda t: t.name)
    def test_render_without_arguments_has_no_placeholders(self, template):
        text = template.render({})
        assert text.startswith("# ")
        assert "{" not in text
        assert "None" not in text
        assert "undefined" not in text

    @pytest.mark.parametrize(
        "name, heading",
        [
            ("investigate_entity", "# Entity Investigation"),
            ("validate_claim", "# Claim Validation"),
            ("analyze_channel", "# Channel Analysis"),
            ("geographic_sitrep", "# Geographic Situation Report"),
        ],
    )
    def test_heading_kept_when_required_argument_missing(self, name, heading):
        text = get_prompt_content(name, {})
        assert text.split("\n")[0] == heading

    def test_heading_uses_argument_when_supplied(self):
        text = get_prompt_content("geographic_sitrep", {"location": "Kharkiv"})
        assert text.startswith("# Geographic Situation Report: Kharkiv\n")

    def test_unknown_prompt(self):
        assert get_prompt_content("frobnicate", {}) == "Unknown prompt: frobnicate"

    def test_investigate_entity_optional_line(self):
        without = get_prompt_content("investigate_entity", {"entity_name": "Wagner"})
        assert "# Entity Investigation: Wagner" in without
        assert 'query="Wagner"' in without
        assert "entity_type" not in without

        with_type = get_prompt_content(
            "investigate_entity", {"entity_name": "Wagner", "entity_type": "organization"}
        )
        assert 'entity_type="organization"' in with_type

    def test_track_event_switches_on_supplied_argument(self):
        by_id = get_prompt_content("track_event", {"event_id": "12"})
        assert "event_id=12" in by_id
        assert "`list_events`" not in by_id

        by_search = get_prompt_content("track_event", {"search_query": "Kupiansk"})
        assert 'search="Kupiansk"' in by_search
        assert "Event #" not in by_search

    def test_blank_argument_counts_as_missing(self):
        text = get_prompt_content("track_event", {"event_id": "  "})
        assert "Event #" not in text

    def test_daily_briefing_defaults(self):
        text = get_prompt_content("daily_briefing", {})
        assert "**Time window**: 24 hours" in text
        assert "Focus topic" not in text

        focused = get_prompt_content("daily_briefing", {"hours": "6", "focus_topic": "combat"})
        assert "**Time window**: 6 hours" in focused
        assert 'topic="combat"' in focused

    def test_day_defaults(self):
        assert "days=7" in get_prompt_content("geographic_sitrep", {"location": "Bakhmut"})
        assert "days=7" in get_prompt_content("find_viral_content", {})
        assert "days=3" in get_prompt_content("find_viral_content", {"days": "3"})

    def test_discover_connections_sections(self):
        assert "Starting from" not in get_prompt_content("discover_connections", {})
        text = get_prompt_content("discover_connections", {"start_channel": "5"})
        assert "channel_id=5" in text
        assert "Starting from entity" not in text

    def test_required_arguments_declared(self):
        required = {
            p.name: [a.name for a in p.arguments if a.required] for p in PROMPTS
        }
        assert required["investigate_entity"] == ["entity_name"]
        assert required["validate_claim"] == ["message_id"]
        assert required["analyze_channel"] == ["channel_id"]
        assert required["geographic_sitrep"] == ["location"]
        assert required["platform_health_check"] == []


class TestPromptTemplate:
    def test_sections_without_placeholders_always_render(self):
        t = PromptTemplate(name="t", description="T", sections=("# Title", "Body {x}"))
        assert t.render({}) == "# Title"
        assert t.render({"x": "1"}) == "# Title\n\nBody 1"

    def test_alternatives_pick_first_fillable(self):
        t = PromptTemplate(name="t", description="T", sections=(("# T: {x}", "# T"), "{x}"))
        assert t.render({}) == "# T"
        assert t.render({"x": "1"}) == "# T: 1\n\n1"
        assert t.texts() == ["# T: {x}", "# T", "{x}"]

    def test_defaults_are_overridden(self):
        t = PromptTemplate(
            name="t",
            description="T",
            sections=("{n} days",),
            arguments=(PromptArgument("n", "N"),),
            defaults={"n": "7"},
        )
        assert t.render(None) == "7 days"
        assert t.render({"n": "2"}) == "2 days"
