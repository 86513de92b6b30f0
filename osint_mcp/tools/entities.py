"""Entity and event (message cluster) tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..registry import Param, tool
from .common import (
    ENTITY_ID,
    ENTITY_SOURCE,
    EVENT_ID,
    LIMIT,
    MESSAGE_ID,
    OFFSET,
    PAGE,
    PAGE_SIZE,
    SEARCH_MODES,
    SIMILARITY_THRESHOLD,
    TIER_STATUS,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import OsintApiClient

# ── Entities ──────────────────────────────────────────────────────────────


@tool(
    "search_entities",
    (
        "Search for entities (people, organizations, military units). "
        "Sources include curated lists and OpenSanctions."
    ),
    Param("query", "string", "Entity name or partial name to search", required=True),
    Param(
        "source",
        "string",
        "Entity source to search (default: all)",
        enum=("curated", "opensanctions", "all"),
    ),
    Param("entity_type", "string", "Filter by type (person, organization, military_unit, etc.)"),
    LIMIT.describe("Max results (default: 20)"),
)
async def search_entities(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.search_entities(
        q=args.query,
        source=args.source,
        entity_type=args.entity_type,
        limit=args.limit,
    )


@tool(
    "get_entity",
    "Get detailed entity profile with metadata, aliases, and linked content counts.",
    ENTITY_SOURCE,
    ENTITY_ID,
    Param("include_linked", "boolean", "Include linked entities from other sources"),
)
async def get_entity(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_entity(args.source, args.entity_id, include_linked=args.include_linked)


@tool(
    "get_entity_relationships",
    (
        "Get entity relationships from Wikidata - corporate connections, "
        "political positions, associates."
    ),
    ENTITY_SOURCE,
    ENTITY_ID,
    Param("refresh", "boolean", "Bypass the cached Wikidata lookup"),
)
async def get_entity_relationships(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_entity_relationships(
        args.source, args.entity_id, refresh=args.refresh
    )


@tool(
    "get_entity_mentions",
    "Get messages that mention a specific entity.",
    ENTITY_SOURCE,
    ENTITY_ID,
    LIMIT.describe("Max messages to return (default: 20)"),
    OFFSET,
)
async def get_entity_mentions(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_entity_messages(
        args.source, args.entity_id, limit=args.limit, offset=args.offset
    )


# ── Events / clusters ─────────────────────────────────────────────────────


@tool(
    "list_events",
    (
        "List detected events (message clusters). "
        "Events are groups of messages about the same real-world incident."
    ),
    PAGE,
    PAGE_SIZE,
    Param(
        "tab",
        "string",
        "Event list view (default: active)",
        enum=("active", "major", "archived", "all"),
    ),
    Param("event_type", "string", "Filter by event type"),
    TIER_STATUS,
    Param("search", "string", "Search events by keyword or location"),
    Param("search_mode", "string", "Search mode (default: text)", enum=SEARCH_MODES),
    SIMILARITY_THRESHOLD,
)
async def list_events(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.list_events(
        page=args.page,
        page_size=args.page_size,
        tab=args.tab,
        event_type=args.event_type,
        tier_status=args.tier_status,
        search=args.search,
        search_mode=args.search_mode,
        similarity_threshold=args.similarity_threshold,
    )


@tool("get_event_stats", "Get overall event statistics - counts per tier, type, and status.")
async def get_event_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_event_stats()


@tool(
    "get_event",
    "Get detailed event information including tier, location, and contributing channels.",
    EVENT_ID,
    Param("include_messages", "boolean", "Include the clustered messages"),
    Param("include_sources", "boolean", "Include RSS sources linked to the event"),
    Param("message_limit", "integer", "Maximum messages to include"),
)
async def get_event(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_event(
        args.event_id,
        include_messages=args.include_messages,
        include_sources=args.include_sources,
        message_limit=args.message_limit,
    )


@tool(
    "get_event_timeline",
    "Get the chronological timeline of an event, combining Telegram messages and RSS articles.",
    EVENT_ID,
)
async def get_event_timeline(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_event_timeline(args.event_id)


@tool("get_events_for_message", "Get the events a message has been clustered into.", MESSAGE_ID)
async def get_events_for_message(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_events_for_message(args.message_id)
