"""Static markdown resources: platform reference material for MCP clients.

Served verbatim by URI.  Tool names are written in backticks and must
match the tool catalogue.
"""

from __future__ import annotations

from dataclasses import dataclass

MIME_TYPE = "text/markdown"


@dataclass(frozen=True)
class ResourceEntry:
    uri: str
    name: str
    description: str
    text: str
    mime_type: str = MIME_TYPE


_GETTING_STARTED = """\
# Getting Started with the OSINT Platform

The platform monitors Telegram channels for Ukraine-related intelligence,
enriches every message with AI analysis, and cross-references it with RSS
news sources.

## Core data

### Messages
Each Telegram message carries:
- **Classification**: importance level (high / medium / low) and topic
- **Entities**: people, organizations, units, equipment, and places mentioned
- **Embedding**: a 384-dimensional vector used by semantic search
- **Translation**: automatic translation to English
- **Geolocation**: coordinates extracted from the text, with a confidence score

### Channels
Channels are organised by Telegram folder and processing rule
(archive_all keeps everything, selective_archive keeps what the classifier
marks as relevant), and tagged with an affiliation and source type.

### Events
Events are clusters of messages about the same real-world incident. They
are detected from message velocity plus semantic similarity and climb the
verification tiers as independent sources report them.

## Where to start

| Goal | Tools |
|------|-------|
| Find messages | `search_messages`, `semantic_search`, `unified_search` |
| Investigate someone | `search_entities`, `get_entity`, `get_entity_relationships` |
| Check a claim | `validate_message`, `get_message_correlations` |
| Follow an incident | `list_events`, `get_event`, `get_event_timeline` |
| Check the platform | `get_system_health`, `get_platform_dashboard` |

## Tips
- Filter by days to keep result sets small.
- Semantic search finds paraphrases that keyword search misses.
- Prompts (investigate_entity, daily_briefing, ...) chain the right tools
  for common workflows.
"""

_TOPICS = """\
# Topic Classification Reference

Every message is assigned one topic by the classifier.

| Topic | Covers | Examples |
|-------|--------|----------|
| **combat** | Fighting and strikes | Assaults, shelling, drone strikes |
| **equipment** | Weapons and vehicles | Losses, deliveries, new systems |
| **casualties** | Losses and injuries | KIA reports, wounded, POW exchanges |
| **movements** | Force movements | Redeployments, convoys, rotations |
| **infrastructure** | Civilian and military infrastructure | Power grid, bridges, rail |
| **humanitarian** | Civilian impact | Evacuations, aid, refugees |
| **diplomatic** | International relations | Talks, sanctions, statements |
| **intelligence** | Intelligence reporting | Leaks, intercepted communications |
| **propaganda** | Information operations | Disinformation, narrative pushes |
| **units** | Unit-level reporting | Unit identification, commanders |
| **locations** | Place-centric reports | Front-line changes, control claims |
| **politics** | Domestic politics | Elections, appointments, legislation |
| **general** | Everything else | Announcements, off-topic posts |

Use the topic filter of `search_messages` or `get_timeline_stats`, and
`get_topic_distribution` to see which topics are active.
"""

_EVENT_TIERS = """\
# Event Tier Reference

Events move up the tiers as corroboration grows. Tiers never move down
automatically.

| Tier | Criteria |
|------|----------|
| **rumor** | A single channel is reporting |
| **unconfirmed** | 2-3 channels, all with the same affiliation |
| **confirmed** | 3+ channels across affiliations |
| **verified** | Human-verified with supporting evidence |

## Reading an event
- Time from first report to confirmation shows how contested a claim is.
- Cross-affiliation agreement is the strongest automatic signal.
- RSS correlation adds independent press coverage to the picture.

Use `list_events` with a tier filter, then `get_event` and
`get_event_timeline` for detail.
"""

_ENTITY_TYPES = """\
# Entity Types Reference

## Sources
| Source | Contents |
|--------|----------|
| **curated** | Hand-maintained list of units, commanders, equipment, and places |
| **opensanctions** | Sanctioned people and companies, PEPs, and their aliases |
| **wikidata** | Relationship enrichment: positions, ownership, associates |

## Types
| Type | Examples |
|------|----------|
| **person** | Commanders, officials, journalists |
| **organization** | Companies, agencies, PMCs |
| **military_unit** | Brigades, battalions, regiments |
| **equipment** | Vehicles, aircraft, weapon systems |
| **location** | Settlements, oblasts, facilities |

Search with `search_entities`, then open a profile with `get_entity` using
the returned source and ID. `get_entity_mentions` lists the messages that
mention it.
"""

_CHANNEL_AFFILIATIONS = """\
# Channel Affiliations Reference

## Affiliation
| Value | Meaning |
|-------|---------|
| **ukraine** | Ukrainian government, military, or aligned media |
| **russia** | Russian government, military, or aligned media |
| **neutral** | International or independent outlets |
| **unknown** | Not yet assessed |

## Source type
state_media, military_unit, journalist, osint_aggregator, official,
volunteer, and unknown.

## Folder rules
| Rule | Behaviour |
|------|-----------|
| **archive_all** | Every message is stored and enriched |
| **selective_archive** | Only messages the classifier keeps are stored |
| **test** / **staging** | Non-production channels |

`list_channels` filters by rule and folder; `get_channel_influence`
shows who amplifies whom.
"""

_GEOLOCATION = """\
# Geolocation Pipeline Reference

Coordinates are extracted in four stages; the first stage that succeeds
wins and sets the confidence score.

| Stage | Method | Confidence |
|-------|--------|------------|
| 1 | Gazetteer match on place names | 0.95 |
| 2 | LLM extraction of a location from context | 0.75 |
| 3 | Geocoder lookup of the extracted name | 0.60 |
| 4 | Channel home-area fallback | 0.30 |

## Coordinates
- Bounding boxes are written "minLng,minLat,maxLng,maxLat".
- GeoJSON output is (longitude, latitude).

Use `suggest_locations` to resolve a name, `get_map_messages` and
`get_map_clusters` for the map layers, and `get_map_heatmap` for density.
"""

_INVESTIGATION = """\
# Investigation Workflows

## Entity investigation
1. `search_entities` to find the entity in curated lists and OpenSanctions
2. `get_entity` for the profile, aliases, and sanctions flags
3. `get_entity_relationships` for Wikidata connections
4. `get_entity_mentions` for recent Telegram coverage

## Claim validation
1. `get_message` for the full content
2. `validate_message` to cross-reference RSS sources
3. `get_message_correlations` for the supporting articles
4. `get_events_for_message` to see if the claim belongs to an event

## Narrative tracing
1. `semantic_search` or `find_similar_messages` to collect variants
2. `get_message_social_graph` for the forward chain
3. `get_engagement_timeline` for the virality curve

## Channel assessment
1. `get_channel` and `get_channel_stats`
2. `get_channel_influence` for amplification relationships
3. `search_messages` restricted to the channel and high importance
"""

RESOURCES: tuple[ResourceEntry, ...] = (
    ResourceEntry(
        "osint://guide/getting-started",
        "Getting Started Guide",
        "Introduction to the OSINT platform and common workflows",
        _GETTING_STARTED,
    ),
    ResourceEntry(
        "osint://reference/topics",
        "Topic Classification Reference",
        "The topic categories used for message classification",
        _TOPICS,
    ),
    ResourceEntry(
        "osint://reference/event-tiers",
        "Event Tier Reference",
        "Event verification tiers and progression criteria",
        _EVENT_TIERS,
    ),
    ResourceEntry(
        "osint://reference/entity-types",
        "Entity Types Reference",
        "Entity types and sources (curated, OpenSanctions, Wikidata)",
        _ENTITY_TYPES,
    ),
    ResourceEntry(
        "osint://reference/channel-affiliations",
        "Channel Affiliations Reference",
        "Channel affiliation types and source categories",
        _CHANNEL_AFFILIATIONS,
    ),
    ResourceEntry(
        "osint://reference/geolocation",
        "Geolocation Pipeline Reference",
        "Geolocation pipeline stages and confidence scores",
        _GEOLOCATION,
    ),
    ResourceEntry(
        "osint://workflows/investigation",
        "Investigation Workflows",
        "Step-by-step workflows for common investigation tasks",
        _INVESTIGATION,
    ),
)

_BY_URI: dict[str, ResourceEntry] = {r.uri: r for r in RESOURCES}


def get_resource_content(uri: str) -> str:
    """Return the markdown for *uri*, or a not-found message."""
    entry = _BY_URI.get(uri)
    if entry is None:
        return f"Resource not found: {uri}"
    return entry.text
