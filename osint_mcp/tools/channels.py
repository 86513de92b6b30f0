"""Channel and social-graph tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..registry import Param, tool
from .common import CHANNEL_ID, DAYS, LIMIT, MESSAGE_ID, OFFSET, SIMILARITY_THRESHOLD

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import OsintApiClient

# ── Channels ──────────────────────────────────────────────────────────────


@tool(
    "list_channels",
    (
        "List monitored Telegram channels with optional filters. "
        "Shows channel name, folder, rule, and message counts."
    ),
    Param("active_only", "boolean", "Only show active channels (default: true)"),
    Param(
        "rule",
        "string",
        "Filter by processing rule",
        enum=("archive_all", "selective_archive", "test", "staging"),
    ),
    Param("folder", "string", "Filter by Telegram folder name (partial match)"),
    Param("verified_only", "boolean", "Only show verified channels"),
    LIMIT.describe("Max channels to return (default: 100)"),
)
async def list_channels(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.list_channels(
        active_only=args.active_only,
        rule=args.rule,
        folder=args.folder,
        verified_only=args.verified_only,
        limit=args.limit,
    )


@tool("get_channel", "Get detailed information about a specific channel.", CHANNEL_ID)
async def get_channel(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_channel(args.channel_id)


@tool(
    "get_channel_stats",
    "Get statistics for a channel - message counts, media counts, activity timeline.",
    CHANNEL_ID,
)
async def get_channel_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_channel_stats(args.channel_id)


@tool(
    "get_channel_network",
    "Get the content network for a channel - semantic clusters and related messages.",
    CHANNEL_ID,
    SIMILARITY_THRESHOLD,
    Param("max_messages", "integer", "Maximum messages to include in the graph"),
    Param("time_window", "string", 'Time window to analyse (e.g., "7d", "30d")'),
    Param("include_clusters", "boolean", "Include detected topic clusters"),
)
async def get_channel_network(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_channel_network(
        args.channel_id,
        similarity_threshold=args.similarity_threshold,
        max_messages=args.max_messages,
        time_window=args.time_window,
        include_clusters=args.include_clusters,
    )


# ── Social graph ──────────────────────────────────────────────────────────


@tool(
    "get_message_social_graph",
    (
        "Get the social graph for a message - forwards, reactions, replies, "
        "comments, and influence chain."
    ),
    MESSAGE_ID,
    Param("include_forwards", "boolean", "Include forward chain"),
    Param("include_replies", "boolean", "Include reply threads"),
    Param("max_depth", "integer", "Maximum forward-chain depth"),
    Param("max_comments", "integer", "Maximum comments to include"),
)
async def get_message_social_graph(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message_social_graph(
        args.message_id,
        include_forwards=args.include_forwards,
        include_replies=args.include_replies,
        max_depth=args.max_depth,
        max_comments=args.max_comments,
    )


@tool(
    "get_channel_influence",
    "Get forwarding relationships for a channel - who amplifies it and whom it amplifies.",
    CHANNEL_ID,
)
async def get_channel_influence(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_channel_influence(args.channel_id)


@tool(
    "get_influence_network",
    "Get the cross-channel influence network built from forwarding patterns.",
    Param("min_forwards", "integer", "Minimum forwards for an edge to be included"),
    DAYS,
    LIMIT,
)
async def get_influence_network(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_influence_network(
        min_forwards=args.min_forwards, days=args.days, limit=args.limit
    )


@tool(
    "get_engagement_timeline",
    "Get views, forwards, and reactions over time for a message (virality curve).",
    MESSAGE_ID,
)
async def get_engagement_timeline(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_engagement_timeline(args.message_id)


@tool(
    "get_message_comments",
    "Get discussion-group comments attached to a message.",
    MESSAGE_ID,
    LIMIT,
    OFFSET,
)
async def get_message_comments(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_message_comments(args.message_id, limit=args.limit, offset=args.offset)


@tool(
    "get_top_forwarded",
    "Get the most forwarded messages in a time window.",
    DAYS,
    LIMIT,
)
async def get_top_forwarded(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_top_forwarded(days=args.days, limit=args.limit)


@tool(
    "get_top_influencers",
    "Get the channels with the highest reach in a time window.",
    DAYS,
    LIMIT,
)
async def get_top_influencers(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_top_influencers(days=args.days, limit=args.limit)
