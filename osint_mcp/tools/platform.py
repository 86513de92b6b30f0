"""Validation, comments, media, admin statistics, and system monitoring tools.

Everything here is read-only except ``translate_comment``, which asks the
platform to (re)translate a single comment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..registry import Param, tool
from .common import CHANNEL_FILTER, COMMENT_ID, DATE_FROM, DATE_TO, HOURS, LIMIT, MESSAGE_ID, OFFSET

if TYPE_CHECKING:
    from pydantic import BaseModel

    from ..client import OsintApiClient

# ── Validation (RSS cross-reference) ──────────────────────────────────────


@tool(
    "validate_message",
    (
        "Fact-check a message against RSS news sources. Returns whether "
        "correlated articles confirm, contradict, or add context to the claim."
    ),
    MESSAGE_ID,
)
async def validate_message(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.validate_message(args.message_id)


@tool(
    "get_message_correlations",
    "Get RSS articles correlated with a message, grouped by relation type.",
    MESSAGE_ID,
)
async def get_message_correlations(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_correlations(args.message_id)


# ── Comments ──────────────────────────────────────────────────────────────


@tool("get_comment", "Get a single discussion comment with its translation.", COMMENT_ID)
async def get_comment(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_comment(args.comment_id)


@tool(
    "translate_comment",
    "Trigger translation of a comment into English and return the result.",
    COMMENT_ID,
)
async def translate_comment(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.translate_comment(args.comment_id)


# ── Media ─────────────────────────────────────────────────────────────────


@tool(
    "get_media_gallery",
    "Browse archived media (photos, videos, documents) with filters.",
    CHANNEL_FILTER,
    Param("media_type", "string", "Filter by media type (photo, video, document)"),
    DATE_FROM,
    DATE_TO,
    LIMIT,
    OFFSET,
)
async def get_media_gallery(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_media_gallery(
        channel_id=args.channel_id,
        media_type=args.media_type,
        date_from=args.date_from,
        date_to=args.date_to,
        limit=args.limit,
        offset=args.offset,
    )


# ── Admin statistics (read-only) ──────────────────────────────────────────


@tool("get_platform_dashboard", "Get the admin dashboard - headline platform metrics.")
async def get_platform_dashboard(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_dashboard()


@tool(
    "get_platform_stats_overview",
    "Get comprehensive platform statistics - messages, channels, events, entities, storage.",
)
async def get_platform_stats_overview(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_stats_overview()


@tool(
    "get_data_quality_stats",
    "Get data quality coverage - translation, embedding, classification, and geolocation rates.",
)
async def get_data_quality_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_stats_quality()


@tool(
    "get_processing_stats",
    "Get processing pipeline throughput and latency.",
    HOURS.describe("Hours to look back (default: 24)"),
)
async def get_processing_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_stats_processing(hours=args.hours)


@tool("get_storage_stats", "Get database and media storage usage.")
async def get_storage_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_stats_storage()


@tool("get_worker_stats", "Get worker queue health - pending, processing, and failed counts.")
async def get_worker_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_workers_stats()


@tool("get_enrichment_tasks", "Get the status of every enrichment task.")
async def get_enrichment_tasks(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_enrichment_tasks()


@tool("get_cache_stats", "Get Redis cache statistics - hit rate, memory, key counts.")
async def get_cache_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_cache_stats()


@tool("get_audit_stats", "Get audit log statistics.")
async def get_audit_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_audit_stats()


@tool("get_spam_stats", "Get spam detection statistics.")
async def get_spam_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_spam_stats()


@tool("get_channel_admin_stats", "Get channel statistics by folder, rule, and verification.")
async def get_channel_admin_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_channels_stats()


@tool("get_entity_admin_stats", "Get entity database statistics by source and type.")
async def get_entity_admin_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_entities_stats()


@tool("get_feed_stats", "Get RSS feed ingestion statistics.")
async def get_feed_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_feeds_stats()


@tool("get_prompt_stats", "Get LLM prompt version and usage statistics.")
async def get_prompt_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_prompts_stats()


@tool("get_comment_stats", "Get discussion comment ingestion and translation statistics.")
async def get_comment_stats(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_comments_stats()


@tool("get_viral_posts", "Get posts currently tracked as viral by the comment monitor.")
async def get_viral_posts(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_admin_viral_posts()


# ── System health & metrics ───────────────────────────────────────────────


@tool("get_system_health", "Check API health status.")
async def get_system_health(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_health()


@tool("get_hardware_config", "Get the host hardware configuration the platform is tuned for.")
async def get_hardware_config(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_hardware_config()


@tool(
    "get_system_status",
    "Get detailed system status including service health, queue depths, and statistics.",
)
async def get_system_status(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_system_status()


@tool("get_metrics_overview", "Get the platform metrics overview.")
async def get_metrics_overview(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_metrics_overview()


@tool("get_metrics_llm", "Get LLM metrics - request counts, latency, and error rates per model.")
async def get_metrics_llm(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_metrics_llm()


@tool("get_metrics_pipeline", "Get pipeline metrics - ingestion and enrichment throughput.")
async def get_metrics_pipeline(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_metrics_pipeline()


@tool("get_metrics_services", "Get per-service health and resource metrics.")
async def get_metrics_services(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_metrics_services()


# ── Models ────────────────────────────────────────────────────────────────


@tool("list_models", "List configured LLM models and their assigned tasks.")
async def list_models(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.list_models()


@tool("get_model_health", "Check availability and latency of the configured LLM models.")
async def get_model_health(client: OsintApiClient, args: BaseModel) -> Any:
    return await client.get_model_health()
