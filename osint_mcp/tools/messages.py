"""Message retrieval and search tools (full-text, semantic, tags, unified)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..registry import Param, tool
from .common import (
    BOUNDS,
    CHANNEL_FILTER,
    DATE_FROM,
    DATE_TO,
    DAYS,
    IMPORTANCE,
    LIMIT,
    MESSAGE_ID,
    PAGE,
    PAGE_SIZE,
    SEARCH_MODES,
    SIMILARITY_THRESHOLD,
    TOPIC,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import OsintApiClient

# ── Messages ──────────────────────────────────────────────────────────────


@tool(
    "search_messages",
    (
        "Search Telegram messages with full-text search and filters. "
        "Supports filtering by channel, date range, importance level, topic, "
        "media presence, language, engagement, and spam status."
    ),
    Param("query", "string", "Search query text (full-text search)"),
    CHANNEL_FILTER,
    DAYS.describe("Limit to last N days (default: all time)"),
    DATE_FROM,
    DATE_TO,
    IMPORTANCE,
    TOPIC,
    Param("has_media", "boolean", "Filter for messages with media attachments"),
    Param("media_type", "string", "Filter by media type (photo, video, document)"),
    Param("is_spam", "boolean", "Filter by spam classification"),
    Param("language", "string", 'Filter by detected source language (e.g., "ru", "uk")'),
    Param("min_views", "integer", "Minimum view count"),
    Param("min_forwards", "integer", "Minimum forward count"),
    Param("channel_folder", "string", "Filter by Telegram folder name"),
    PAGE,
    PAGE_SIZE,
)
async def search_messages(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.search_messages(
        q=args.query,
        channel_id=args.channel_id,
        days=args.days,
        date_from=args.date_from,
        date_to=args.date_to,
        importance_level=args.importance_level,
        topic=args.topic,
        has_media=args.has_media,
        media_type=args.media_type,
        is_spam=args.is_spam,
        language=args.language,
        min_views=args.min_views,
        min_forwards=args.min_forwards,
        channel_folder=args.channel_folder,
        page=args.page,
        page_size=args.page_size,
    )


@tool(
    "get_message",
    (
        "Get detailed information about a specific message by ID. "
        "Returns full content, media, entities, social graph data, and AI analysis."
    ),
    MESSAGE_ID,
)
async def get_message(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message(args.message_id)


@tool(
    "get_adjacent_messages",
    "Get the previous and next messages in the same channel, for reading a message in context.",
    MESSAGE_ID,
)
async def get_adjacent_messages(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_adjacent_messages(args.message_id)


@tool(
    "get_message_album",
    "Get every message belonging to the same media album (grouped photos/videos).",
    MESSAGE_ID,
)
async def get_message_album(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message_album(args.message_id)


@tool(
    "get_message_network",
    (
        "Get the content network around a message: extracted entities, "
        "linked events, and semantically similar messages."
    ),
    MESSAGE_ID,
    Param("include_similar", "boolean", "Include semantically similar messages (default: true)"),
    SIMILARITY_THRESHOLD,
    Param("max_similar", "integer", "Maximum similar messages to include"),
)
async def get_message_network(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message_network(
        args.message_id,
        include_similar=args.include_similar,
        similarity_threshold=args.similarity_threshold,
        max_similar=args.max_similar,
    )


@tool(
    "get_message_timeline",
    (
        "Build a timeline around a message: what was posted before and after, "
        "optionally across channels using semantic similarity and events."
    ),
    MESSAGE_ID,
    Param("before_count", "integer", "Messages to include before the anchor"),
    Param("after_count", "integer", "Messages to include after the anchor"),
    Param("same_channel_only", "boolean", "Restrict the timeline to the anchor's channel"),
    Param("use_semantic", "boolean", "Use semantic similarity to pick related messages"),
    Param("use_events", "boolean", "Use event clusters to pick related messages"),
    SIMILARITY_THRESHOLD,
)
async def get_message_timeline(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message_timeline(
        args.message_id,
        before_count=args.before_count,
        after_count=args.after_count,
        same_channel_only=args.same_channel_only,
        use_semantic=args.use_semantic,
        use_events=args.use_events,
        similarity_threshold=args.similarity_threshold,
    )


# ── Semantic search ───────────────────────────────────────────────────────


@tool(
    "semantic_search",
    (
        "AI-powered semantic search - find messages by meaning, not just keywords. "
        "Uses 384-dimensional vector embeddings for similarity matching."
    ),
    Param(
        "query",
        "string",
        "Natural language query describing what you want to find",
        required=True,
    ),
    SIMILARITY_THRESHOLD,
    LIMIT.describe("Maximum results to return (default: 10)"),
    CHANNEL_FILTER.describe("Limit search to specific channel"),
    IMPORTANCE,
    DAYS,
)
async def semantic_search(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.semantic_search(
        q=args.query,
        similarity_threshold=args.similarity_threshold,
        limit=args.limit,
        channel_id=args.channel_id,
        importance_level=args.importance_level,
        days=args.days,
    )


@tool(
    "find_similar_messages",
    (
        "Find messages similar to a given message using AI embeddings. "
        "Useful for finding related content or tracking narratives."
    ),
    MESSAGE_ID.describe("Source message ID to find similar content for"),
    SIMILARITY_THRESHOLD,
    LIMIT.describe("Maximum results (default: 10)"),
)
async def find_similar_messages(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.find_similar_messages(
        args.message_id,
        similarity_threshold=args.similarity_threshold,
        limit=args.limit,
    )


@tool(
    "get_tags",
    "List AI-generated content tags with usage counts.",
    Param("tag_type", "string", "Filter by tag type (e.g., keyword, topic, emotion)"),
    LIMIT,
)
async def get_tags(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_tags(tag_type=args.tag_type, limit=args.limit)


@tool(
    "search_by_tags",
    "Find messages carrying the given AI-generated tags.",
    Param("tags", "string", "Comma-separated list of tags", required=True),
    Param("match_all", "boolean", "Require every tag to match (default: any)"),
    LIMIT,
)
async def search_by_tags(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.search_by_tags(tags=args.tags, match_all=args.match_all, limit=args.limit)


# ── Unified search ────────────────────────────────────────────────────────


@tool(
    "unified_search",
    (
        "Search across ALL platform data sources at once: "
        "Telegram messages, events, RSS articles, and entities. "
        "Returns grouped results by type. Supports geographic filtering."
    ),
    Param("query", "string", "Search query", required=True),
    Param("mode", "string", "Search mode (default: text)", enum=SEARCH_MODES),
    Param("types", "string", 'Comma-separated types to search (e.g., "messages,events,entities")'),
    Param("limit_per_type", "integer", "Max results per type (default: 5)"),
    DAYS,
    Param("location", "string", "Filter by location name"),
    Param("lat", "number", "Latitude of the search centre"),
    Param("lng", "number", "Longitude of the search centre"),
    Param("radius_km", "number", "Radius around lat/lng in kilometres"),
    BOUNDS,
)
async def unified_search(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.unified_search(
        q=args.query,
        mode=args.mode,
        types=args.types,
        limit_per_type=args.limit_per_type,
        days=args.days,
        location=args.location,
        lat=args.lat,
        lng=args.lng,
        radius_km=args.radius_km,
        bounds=args.bounds,
    )
