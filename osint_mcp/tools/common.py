"""Parameter rows shared by several tools."""

from __future__ import annotations

from ..registry import Param

IMPORTANCE_LEVELS = ("high", "medium", "low")
SEARCH_MODES = ("text", "semantic")

MESSAGE_ID = Param("message_id", "integer", "Message database ID", required=True)
CHANNEL_ID = Param("channel_id", "integer", "Channel database ID or Telegram ID", required=True)
EVENT_ID = Param("event_id", "integer", "Event cluster ID", required=True)
COMMENT_ID = Param("comment_id", "integer", "Comment database ID", required=True)

CHANNEL_FILTER = Param("channel_id", "integer", "Filter by specific channel ID")
DAYS = Param("days", "integer", "Limit to last N days")
HOURS = Param("hours", "integer", "Time window in hours")
LIMIT = Param("limit", "integer", "Maximum results to return")
OFFSET = Param("offset", "integer", "Number of results to skip (pagination)")
PAGE = Param("page", "integer", "Page number (default: 1)")
PAGE_SIZE = Param("page_size", "integer", "Results per page (default: 20, max: 100)")
DATE_FROM = Param("date_from", "string", "Start date (ISO format: YYYY-MM-DD)")
DATE_TO = Param("date_to", "string", "End date (ISO format: YYYY-MM-DD)")
TOPIC = Param("topic", "string", 'Filter by topic (e.g., "combat", "equipment", "humanitarian")')
IMPORTANCE = Param(
    "importance_level",
    "string",
    "Filter by AI-assigned importance level",
    enum=IMPORTANCE_LEVELS,
)
SIMILARITY_THRESHOLD = Param(
    "similarity_threshold", "number", "Minimum similarity score (0-1, default: 0.7)"
)
BOUNDS = Param("bounds", "string", 'Bounding box: "minLng,minLat,maxLng,maxLat"')
ZOOM = Param("zoom", "integer", "Map zoom level (affects clustering)")
TIER_STATUS = Param(
    "tier_status",
    "string",
    "Filter by verification tier: rumor, unconfirmed, confirmed, verified",
)

ENTITY_SOURCE = Param(
    "source",
    "string",
    "Entity source the ID belongs to: curated or opensanctions",
    required=True,
)
ENTITY_ID = Param(
    "entity_id",
    "string",
    'Entity ID (e.g., "Q12345" for Wikidata IDs or a database ID)',
    required=True,
)
