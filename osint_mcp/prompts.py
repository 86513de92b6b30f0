"""Workflow prompt templates.

Each prompt is a list of markdown sections with ``{placeholder}`` fields.
Rendering fills the placeholders from the caller's arguments (plus the
prompt's defaults) and drops any section whose placeholders cannot all be
filled, so optional arguments switch whole blocks on and off.  A section
given as a tuple lists alternatives; the first one that can be filled is
used, which keeps headings present when their argument is missing.

Tool names appear in backticks and must match the tool catalogue.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass, field
from typing import Mapping

logger = logging.getLogger(__name__)

_FORMATTER = string.Formatter()


@dataclass(frozen=True)
class PromptArgument:
    name: str
    description: str
    required: bool = False


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    description: str
    sections: tuple[str | tuple[str, ...], ...]
    arguments: tuple[PromptArgument, ...] = ()
    defaults: Mapping[str, str] = field(default_factory=dict)

    def render(self, args: Mapping[str, str] | None = None) -> str:
        values = dict(self.defaults)
        for key, value in (args or {}).items():
            if value is None or str(value).strip() == "":
                continue
            values[key] = str(value)

        rendered = []
        for section in self.sections:
            options = (section,) if isinstance(section, str) else section
            for option in options:
                fields = _placeholders(option)
                if fields <= values.keys():
                    rendered.append(option.format(**values) if fields else option)
                    break
        return "\n\n".join(rendered)

    def texts(self) -> list[str]:
        """Every section text, alternatives included."""
        return [
            option
            for section in self.sections
            for option in ((section,) if isinstance(section, str) else section)
        ]


def _placeholders(template: str) -> set[str]:
    return {name for _, name, _, _ in _FORMATTER.parse(template) if name}


# ═══════════════════════════════════════════════════════════════════════════
# Investigation
# ═══════════════════════════════════════════════════════════════════════════

_INVESTIGATE_ENTITY = PromptTemplate(
    name="investigate_entity",
    description=(
        "Investigate a person, organization, or military unit. Searches curated "
        "entities and OpenSanctions, finds relationships, and retrieves recent "
        "mentions in Telegram messages."
    ),
    arguments=(
        PromptArgument("entity_name", "Name of the person, organization, or unit to investigate", True),
        PromptArgument("entity_type", "Type: person, organization, military_unit, equipment (optional)"),
    ),
    sections=(
        ("# Entity Investigation: {entity_name}", "# Entity Investigation"),
        (
            "## Workflow\n"
            "1. **Search entities** in the curated list and OpenSanctions\n"
            "2. **Open the profile** with aliases, metadata, and linked counts\n"
            "3. **Map relationships** from Wikidata\n"
            "4. **Find mentions** in recent Telegram messages\n"
            "5. **Cross-reference events** the entity appears in"
        ),
        '### Tools to use\n- `search_entities` with query="{entity_name}"',
        '- Narrow the search with entity_type="{entity_type}"',
        (
            "- `get_entity` for the matched entity\n"
            "- `get_entity_relationships` for Wikidata connections\n"
            "- `get_entity_mentions` for recent messages"
        ),
        (
            "### Look for\n"
            "- Sanctions status (OFAC, EU, UK lists)\n"
            "- PEP (politically exposed person) flags\n"
            "- Corporate ownership chains\n"
            "- Cross-channel mention frequency"
        ),
    ),
)

_VALIDATE_CLAIM = PromptTemplate(
    name="validate_claim",
    description=(
        "Validate the claims in a Telegram message by cross-referencing RSS news "
        "sources and checking event clustering."
    ),
    arguments=(PromptArgument("message_id", "The message ID to validate", True),),
    sections=(
        ("# Claim Validation: Message #{message_id}", "# Claim Validation"),
        (
            "## Workflow\n"
            "1. **Read the message** with its content and metadata\n"
            "2. **Cross-reference RSS** coverage from trusted outlets\n"
            "3. **Check the validation verdict** (confirms, contradicts, context)\n"
            "4. **Find event context** for the claim"
        ),
        (
            "### Tools to use\n"
            "- `get_message` with message_id={message_id}\n"
            "- `validate_message` to cross-reference with RSS\n"
            "- `get_message_correlations` for related articles grouped by relation\n"
            "- `get_events_for_message` to find linked events"
        ),
        (
            "### Verdicts\n"
            "- **confirms**: the article supports the claim\n"
            "- **contradicts**: the article refutes the claim\n"
            "- **context**: the article adds background\n"
            "- **alternative**: the article presents a different account\n"
            "- **none**: no relevant coverage found"
        ),
        (
            "### Trust indicators\n"
            "- Event tier (rumor, unconfirmed, confirmed, verified)\n"
            "- Number of independent sources\n"
            "- Agreement across opposing affiliations"
        ),
    ),
)

_TRACK_EVENT = PromptTemplate(
    name="track_event",
    description=(
        "Track an event through its lifecycle: sources, timeline, and verification tier."
    ),
    arguments=(
        PromptArgument("event_id", "Event cluster ID to track"),
        PromptArgument("search_query", "Or search for events by keyword or location"),
    ),
    sections=(
        "# Event Tracking",
        "## Event #{event_id}",
        (
            "## Workflow\n"
            "1. **Get the event** with contributing channels and messages\n"
            "2. **Build the timeline** from Telegram messages and RSS articles\n"
            "3. **Check source diversity** across affiliations\n"
            "4. **Read the tier** to gauge verification"
        ),
        (
            "### Tools to use\n"
            "- `get_event` with event_id={event_id}, include_messages=true, include_sources=true\n"
            "- `get_event_timeline` for the chronological view\n"
            "- `get_event_stats` for platform-wide event statistics"
        ),
        (
            "### Tools to use\n"
            '- `list_events` with search="{search_query}"\n'
            "- Then `get_event` and `get_event_timeline` for the relevant event"
        ),
        (
            "### Tiers\n"
            "| Tier | Criteria |\n"
            "|------|----------|\n"
            "| **rumor** | Single channel reporting |\n"
            "| **unconfirmed** | 2-3 channels, same affiliation |\n"
            "| **confirmed** | 3+ channels, cross-affiliation |\n"
            "| **verified** | Human-verified with evidence |"
        ),
    ),
)

_ANALYZE_CHANNEL = PromptTemplate(
    name="analyze_channel",
    description=(
        "Analyze a Telegram channel: profile, statistics, content network, and "
        "forwarding influence."
    ),
    arguments=(PromptArgument("channel_id", "Channel ID to analyze", True),),
    sections=(
        ("# Channel Analysis: Channel #{channel_id}", "# Channel Analysis"),
        (
            "## Workflow\n"
            "1. **Profile**: affiliation, source type, verification\n"
            "2. **Statistics**: message counts, spam rate, topics\n"
            "3. **Content network**: semantic clusters\n"
            "4. **Influence**: who forwards from and to this channel\n"
            "5. **Recent activity**: high-importance messages from the last 7 days"
        ),
        (
            "### Tools to use\n"
            "- `get_channel` with channel_id={channel_id}\n"
            "- `get_channel_stats` for detailed statistics\n"
            "- `get_channel_network` for the content graph\n"
            "- `get_channel_influence` for forwarding relationships\n"
            '- `search_messages` with channel_id={channel_id}, importance_level="high", days=7'
        ),
        (
            "### Metadata to review\n"
            "- **Affiliation**: russia, ukraine, neutral, unknown\n"
            "- **Source type**: state_media, military_unit, journalist, osint_aggregator\n"
            "- **Folder rule**: archive_all or selective_archive"
        ),
    ),
)

_TRACE_NARRATIVE = PromptTemplate(
    name="trace_narrative",
    description=(
        "Trace how a narrative spreads across channels using semantic similarity "
        "and forwarding chains."
    ),
    arguments=(
        PromptArgument("message_id", "Starting message ID"),
        PromptArgument("search_query", "Or search for the narrative by description"),
    ),
    sections=(
        "# Narrative Tracing",
        "## Starting from Message #{message_id}",
        (
            "## Workflow\n"
            "1. **Find the origin** of the narrative\n"
            "2. **Collect variants** with semantic search\n"
            "3. **Map propagation** through forwards and timing\n"
            "4. **Measure reach** across affiliations"
        ),
        (
            "### Tools to use\n"
            "- `get_message` with message_id={message_id}\n"
            "- `find_similar_messages` for semantic matches\n"
            "- `get_message_social_graph` for the forward chain\n"
            "- `get_engagement_timeline` for the virality curve"
        ),
        (
            "### Tools to use\n"
            '- `semantic_search` with query="{search_query}"\n'
            "- Then take the earliest result and trace forward"
        ),
        (
            "### Propagation signals\n"
            "- **Forward chains**: direct resharing with attribution\n"
            "- **Semantic similarity**: same content, different wording\n"
            "- **Near-simultaneous posting** across unrelated channels"
        ),
    ),
)

# ═══════════════════════════════════════════════════════════════════════════
# Monitoring
# ═══════════════════════════════════════════════════════════════════════════

_DAILY_BRIEFING = PromptTemplate(
    name="daily_briefing",
    description=(
        "Compile a daily intelligence briefing: high-priority messages, confirmed "
        "events, topic trends, and viral content."
    ),
    arguments=(
        PromptArgument("hours", "Hours to look back (default: 24)"),
        PromptArgument("focus_topic", "Optional topic focus: combat, equipment, casualties, etc."),
    ),
    defaults={"hours": "24"},
    sections=(
        "# Daily Intelligence Briefing",
        "## Parameters\n- **Time window**: {hours} hours",
        "- **Focus topic**: {focus_topic}",
        (
            "## Workflow\n"
            "1. **High-priority messages** from the window\n"
            "2. **Confirmed events** that reached confirmed or verified\n"
            "3. **Topic trends** and **viral content**\n"
            "4. **Platform status** for gaps in coverage"
        ),
        (
            "### Tools to use\n"
            '- `get_unified_stream` with importance_level="high", hours={hours}\n'
            '- `search_messages` with importance_level="high", days=1'
        ),
        '- Add topic="{focus_topic}" to the message search',
        (
            '- `list_events` with tier_status="confirmed", then "verified"\n'
            "- `get_topic_distribution` with days=1\n"
            "- `get_top_forwarded` with days=1\n"
            "- `get_platform_stats_overview` for platform status"
        ),
    ),
)

_GEOGRAPHIC_SITREP = PromptTemplate(
    name="geographic_sitrep",
    description=(
        "Build a situation report for a location from geolocated messages, "
        "event clusters, and activity density."
    ),
    arguments=(
        PromptArgument("location", "Location name (e.g., Bakhmut, Kharkiv Oblast)", True),
        PromptArgument("days", "Days to look back (default: 7)"),
    ),
    defaults={"days": "7"},
    sections=(
        ("# Geographic Situation Report: {location}", "# Geographic Situation Report"),
        "## Parameters\n- **Location**: {location}\n- **Time window**: {days} days",
        (
            "### Tools to use\n"
            '- `suggest_locations` with query="{location}" to confirm the place\n'
            '- `unified_search` with query="{location}", location="{location}", days={days}\n'
            "- `get_map_messages` with bounds around the area, days={days}\n"
            "- `get_map_clusters` for event locations\n"
            "- `get_map_heatmap` for activity density"
        ),
        (
            "### Geographic notes\n"
            '- Bounding boxes are "minLng,minLat,maxLng,maxLat"\n'
            "- GeoJSON coordinates are (longitude, latitude)"
        ),
    ),
)

_PLATFORM_HEALTH_CHECK = PromptTemplate(
    name="platform_health_check",
    description=(
        "Check platform health: services, worker queues, enrichment tasks, data "
        "quality, and LLM performance."
    ),
    sections=(
        "# Platform Health Check",
        (
            "### Tools to use\n"
            "- `get_system_health` for API liveness\n"
            "- `get_platform_dashboard` for headline metrics\n"
            "- `get_platform_stats_overview` for comprehensive statistics\n"
            "- `get_worker_stats` for queue health\n"
            "- `get_enrichment_tasks` for task status\n"
            "- `get_data_quality_stats` for coverage\n"
            "- `get_metrics_llm` and `get_model_health` for LLM performance\n"
            "- `get_cache_stats` for Redis performance"
        ),
        (
            "### Thresholds\n"
            "| Metric | Healthy | Warning | Critical |\n"
            "|--------|---------|---------|----------|\n"
            "| Queue depth | < 100 | 100-1000 | > 1000 |\n"
            "| Processing latency | < 1s | 1-5s | > 5s |\n"
            "| Translation coverage | > 95% | 80-95% | < 80% |\n"
            "| LLM availability | 100% | 95-99% | < 95% |"
        ),
    ),
)

_FIND_VIRAL_CONTENT = PromptTemplate(
    name="find_viral_content",
    description=(
        "Find viral content and the channels amplifying it: top forwarded "
        "messages, top influencers, and the influence network."
    ),
    arguments=(
        PromptArgument("days", "Days to look back (default: 7)"),
        PromptArgument("topic", "Optional topic filter"),
    ),
    defaults={"days": "7"},
    sections=(
        "# Viral Content Discovery",
        "## Parameters\n- **Time window**: {days} days",
        "- **Topic filter**: {topic}",
        (
            "### Tools to use\n"
            "- `get_top_forwarded` with days={days}\n"
            "- `get_top_influencers` with days={days}\n"
            "- `get_influence_network` with days={days}\n"
            "- `get_viral_posts` for posts tracked as viral right now"
        ),
        '- `search_messages` with topic="{topic}", days={days} to narrow the field',
        (
            "### Virality signals\n"
            "- Views per hour above 1000\n"
            "- More than 50 forwards\n"
            "- Pickup across opposing affiliations"
        ),
    ),
)

_DISCOVER_CONNECTIONS = PromptTemplate(
    name="discover_connections",
    description=(
        "Discover hidden connections between entities and channels through "
        "relationships, co-mentions, and forwarding patterns."
    ),
    arguments=(
        PromptArgument("start_entity", "Entity name to start from"),
        PromptArgument("start_channel", "Or channel ID to start from"),
    ),
    sections=(
        "# Connection Discovery",
        (
            "### Starting from entity: {start_entity}\n"
            '- `search_entities` with query="{start_entity}"\n'
            "- `get_entity_relationships` for Wikidata connections\n"
            "- `get_entity_mentions` for co-occurring entities"
        ),
        (
            "### Starting from channel: {start_channel}\n"
            "- `get_channel_influence` with channel_id={start_channel}\n"
            "- `get_influence_network` for the wider pattern\n"
            "- `get_channel_network` for semantic content clusters"
        ),
        (
            "### Connection types\n"
            "- **Entity to entity**: shared organizations, positions, transactions\n"
            "- **Channel to channel**: forwarding and timing correlation\n"
            "- **Entity to channel**: frequent mentions, source attribution"
        ),
    ),
)

PROMPTS: tuple[PromptTemplate, ...] = (
    _INVESTIGATE_ENTITY,
    _VALIDATE_CLAIM,
    _TRACK_EVENT,
    _ANALYZE_CHANNEL,
    _TRACE_NARRATIVE,
    _DAILY_BRIEFING,
    _GEOGRAPHIC_SITREP,
    _PLATFORM_HEALTH_CHECK,
    _FIND_VIRAL_CONTENT,
    _DISCOVER_CONNECTIONS,
)

_BY_NAME: dict[str, PromptTemplate] = {p.name: p for p in PROMPTS}


def get_prompt(name: str) -> PromptTemplate | None:
    return _BY_NAME.get(name)


def get_prompt_content(name: str, args: Mapping[str, str] | None = None) -> str:
    """Render prompt *name* with *args*; unknown names yield a message, not an error."""
    template = _BY_NAME.get(name)
    if template is None:
        logger.warning("Unknown prompt requested: %s", name)
        return f"Unknown prompt: {name}"
    return template.render(args)
