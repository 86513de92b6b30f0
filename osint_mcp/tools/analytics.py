"""Analytics, map/geolocation, and stream tools."""

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
    TIER_STATUS,
    TOPIC,
    ZOOM,
)

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import OsintApiClient

PERIOD_DAYS = DAYS.describe("Time period in days")

# ── Analytics ─────────────────────────────────────────────────────────────


@tool(
    "get_timeline_stats",
    (
        "Get message volume over time for visualizations. "
        "Supports hourly, daily, weekly, monthly, and yearly granularity."
    ),
    Param(
        "granularity",
        "string",
        "Time bucket size (default: day)",
        enum=("hour", "day", "week", "month", "year"),
    ),
    CHANNEL_FILTER,
    TOPIC,
    IMPORTANCE,
    DATE_FROM,
    DATE_TO,
    DAYS,
)
async def get_timeline_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_timeline_stats(
        granularity=args.granularity,
        channel_id=args.channel_id,
        topic=args.topic,
        importance_level=args.importance_level,
        date_from=args.date_from,
        date_to=args.date_to,
        days=args.days,
    )


@tool(
    "get_topic_distribution",
    "Get distribution of messages across topics.",
    PERIOD_DAYS,
    LIMIT.describe("Max topics to return"),
)
async def get_topic_distribution(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_topic_distribution(days=args.days, limit=args.limit)


@tool(
    "get_language_distribution",
    "Get distribution of messages across detected source languages.",
    PERIOD_DAYS,
)
async def get_language_distribution(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_language_distribution(days=args.days)


@tool(
    "get_channel_analytics",
    "Get analytics for all channels - message volume, engagement, activity trends.",
    PERIOD_DAYS,
    LIMIT.describe("Max channels to return"),
)
async def get_channel_analytics(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_channel_analytics(days=args.days, limit=args.limit)


@tool(
    "get_activity_heatmap",
    "Get posting activity by weekday and hour of day.",
    PERIOD_DAYS,
)
async def get_activity_heatmap(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_heatmap(days=args.days)


@tool(
    "get_entity_analytics",
    "Get the most mentioned entities and their mention trends.",
    PERIOD_DAYS,
    LIMIT.describe("Max entities to return"),
)
async def get_entity_analytics(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_entity_analytics(days=args.days, limit=args.limit)


@tool("get_media_analytics", "Get media statistics - counts and storage by media type.")
async def get_media_analytics(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_media_analytics()


# ── Map / geolocation ─────────────────────────────────────────────────────


@tool(
    "get_map_messages",
    (
        "Get geolocated messages as GeoJSON for map display. "
        "Supports bounding box filtering and server-side clustering."
    ),
    BOUNDS,
    ZOOM,
    Param("cluster", "boolean", "Cluster nearby points server-side"),
    Param("cluster_grid_size", "number", "Cluster grid size in degrees"),
    DAYS,
    Param("include_confidence", "boolean", "Include geolocation confidence scores"),
)
async def get_map_messages(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_map_messages(
        bounds=args.bounds,
        zoom=args.zoom,
        cluster=args.cluster,
        cluster_grid_size=args.cluster_grid_size,
        days=args.days,
        include_confidence=args.include_confidence,
    )


@tool(
    "get_map_clusters",
    "Get event clusters with geographic locations for map display.",
    BOUNDS,
    ZOOM,
    TIER_STATUS,
    DAYS,
)
async def get_map_clusters(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_map_clusters(
        bounds=args.bounds,
        zoom=args.zoom,
        tier_status=args.tier_status,
        days=args.days,
    )


@tool("get_map_events", "Get geolocated events as GeoJSON for map display.", BOUNDS)
async def get_map_events(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_map_events(bounds=args.bounds)


@tool(
    "get_map_heatmap",
    "Get geographic activity density as a grid heatmap.",
    ZOOM,
    BOUNDS,
    Param("grid_size", "number", "Grid cell size in degrees"),
)
async def get_map_heatmap(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_map_heatmap(zoom=args.zoom, bounds=args.bounds, grid_size=args.grid_size)


@tool(
    "suggest_locations",
    "Autocomplete a location name against the gazetteer; returns coordinates.",
    Param("query", "string", "Partial location name", required=True),
    LIMIT,
)
async def suggest_locations(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.suggest_locations(q=args.query, limit=args.limit)


@tool(
    "reverse_geocode",
    "Find the nearest known location for a coordinate pair.",
    Param("lat", "number", "Latitude", required=True),
    Param("lng", "number", "Longitude", required=True),
)
async def reverse_geocode(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.reverse_geocode(lat=args.lat, lng=args.lng)


# ── Stream ────────────────────────────────────────────────────────────────


@tool(
    "get_unified_stream",
    "Get the unified intelligence feed - Telegram messages and RSS articles interleaved by time.",
    LIMIT,
    Param("sources", "string", 'Comma-separated sources (e.g., "telegram,rss")'),
    Param("categories", "string", "Comma-separated categories to include"),
    IMPORTANCE,
    Param("hours", "integer", "Hours to look back"),
)
async def get_unified_stream(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_unified_stream(
        limit=args.limit,
        sources=args.sources,
        categories=args.categories,
        importance_level=args.importance_level,
        hours=args.hours,
    )
