"""OSINT platform API client: one typed coroutine per REST endpoint.

Covers messages, semantic/unified search, channels, social graph, entities,
events, analytics, map, stream, validation, comments, media, read-only
admin stats, and system monitoring.  Every method performs exactly one
HTTP request and returns the decoded JSON body untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import quote

import httpx

from .config import VERSION, Settings
from .errors import ApiError, NetworkError

logger = logging.getLogger(__name__)

ImportanceLevel = Literal["high", "medium", "low"]
SearchMode = Literal["text", "semantic"]
EventTab = Literal["active", "major", "archived", "all"]
Granularity = Literal["hour", "day", "week", "month", "year"]

QueryValue = str | int | float | bool | None


@dataclass(frozen=True)
class ApiClientConfig:
    """Immutable connection settings for :class:`OsintApiClient`."""

    base_url: str
    jwt_token: str | None = None
    api_key: str | None = None
    ory_user_id: str | None = None
    ory_user_email: str | None = None
    ory_user_role: str | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_settings(cls, settings: Settings) -> ApiClientConfig:
        return cls(
            base_url=settings.OSINT_API_URL,
            jwt_token=settings.OSINT_JWT_TOKEN or None,
            api_key=settings.OSINT_API_KEY or None,
            ory_user_id=settings.OSINT_ORY_USER_ID or None,
            ory_user_email=settings.OSINT_ORY_USER_EMAIL or None,
            ory_user_role=settings.OSINT_ORY_USER_ROLE or None,
            timeout=settings.OSINT_HTTP_TIMEOUT,
        )


def build_auth_headers(config: ApiClientConfig) -> dict[str, str]:
    """Return the auth headers for *config*.

    Precedence: JWT token, then API key (both as bearer tokens), then the
    Ory identity headers.  Email and role are only sent alongside a user
    id.  Returns an empty dict for anonymous access.
    """
    if config.jwt_token:
        return {"Authorization": f"Bearer {config.jwt_token}"}
    if config.api_key:
        return {"Authorization": f"Bearer {config.api_key}"}
    if config.ory_user_id:
        headers = {"X-User-ID": config.ory_user_id}
        if config.ory_user_email:
            headers["X-User-Email"] = config.ory_user_email
        if config.ory_user_role:
            headers["X-User-Role"] = config.ory_user_role
        return headers
    return {}


def clean_params(params: dict[str, QueryValue] | None) -> dict[str, QueryValue]:
    """Drop unset (``None``) query parameters; ``False`` and ``0`` are kept."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def _seg(value: str | int) -> str:
    """Encode a value as a single URL path segment."""
    return quote(str(value), safe="")


class OsintApiClient:
    """Async HTTP binding for the OSINT Intelligence Platform REST API."""

    def __init__(
        self,
        config: ApiClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.headers: dict[str, str] = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"OSINT-MCP/{VERSION}",
            **build_auth_headers(config),
        }
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._http is None:
            kwargs: dict[str, Any] = {
                "base_url": self.config.base_url,
                "headers": self.headers,
            }
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._http = httpx.AsyncClient(**kwargs)
        return self._http

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        client = self._get_client()
        try:
            resp = await client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            logger.warning("[api] %s %s failed: %s", method, path, exc)
            raise NetworkError(exc) from exc
        if not resp.is_success:
            logger.warning("[api] %s %s -> %d", method, path, resp.status_code)
            raise ApiError(resp.status_code, resp.text)
        logger.debug("[api] %s %s -> %d", method, path, resp.status_code)
        if not resp.content:
            return None
        return resp.json()

    async def get(self, path: str, params: dict[str, QueryValue] | None = None) -> Any:
        """GET *path*, sending every set parameter as a query-string entry."""
        return await self._send("GET", path, params=clean_params(params))

    async def post(self, path: str, body: Any = None) -> Any:
        """POST *path* with an optional JSON body."""
        if body is None:
            return await self._send("POST", path)
        return await self._send("POST", path, json=body)

    # ── Messages ──────────────────────────────────────────────────────────

    async def search_messages(
        self,
        *,
        q: str | None = None,
        channel_id: int | None = None,
        days: int | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        importance_level: ImportanceLevel | None = None,
        topic: str | None = None,
        has_media: bool | None = None,
        media_type: str | None = None,
        is_spam: bool | None = None,
        language: str | None = None,
        min_views: int | None = None,
        min_forwards: int | None = None,
        channel_folder: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> Any:
        return await self.get("/api/messages", {
            "q": q,
            "channel_id": channel_id,
            "days": days,
            "date_from": date_from,
            "date_to": date_to,
            "importance_level": importance_level,
            "topic": topic,
            "has_media": has_media,
            "media_type": media_type,
            "is_spam": is_spam,
            "language": language,
            "min_views": min_views,
            "min_forwards": min_forwards,
            "channel_folder": channel_folder,
            "page": page,
            "page_size": page_size,
        })

    async def get_message(self, message_id: int) -> Any:
        return await self.get(f"/api/messages/{_seg(message_id)}")

    async def get_adjacent_messages(self, message_id: int) -> Any:
        return await self.get(f"/api/messages/{_seg(message_id)}/adjacent")

    async def get_message_album(self, message_id: int) -> Any:
        return await self.get(f"/api/messages/{_seg(message_id)}/album")

    async def get_message_network(
        self,
        message_id: int,
        *,
        include_similar: bool | None = None,
        similarity_threshold: float | None = None,
        max_similar: int | None = None,
    ) -> Any:
        return await self.get(f"/api/messages/{_seg(message_id)}/network", {
            "include_similar": include_similar,
            "similarity_threshold": similarity_threshold,
            "max_similar": max_similar,
        })

    async def get_message_timeline(
        self,
        message_id: int,
        *,
        before_count: int | None = None,
        after_count: int | None = None,
        same_channel_only: bool | None = None,
        use_semantic: bool | None = None,
        use_events: bool | None = None,
        similarity_threshold: float | None = None,
    ) -> Any:
        return await self.get(f"/api/messages/{_seg(message_id)}/timeline", {
            "before_count": before_count,
            "after_count": after_count,
            "same_channel_only": same_channel_only,
            "use_semantic": use_semantic,
            "use_events": use_events,
            "similarity_threshold": similarity_threshold,
        })

    # ── Semantic search ───────────────────────────────────────────────────

    async def semantic_search(
        self,
        *,
        q: str,
        similarity_threshold: float | None = None,
        limit: int | None = None,
        channel_id: int | None = None,
        importance_level: ImportanceLevel | None = None,
        days: int | None = None,
    ) -> Any:
        return await self.get("/api/semantic/search", {
            "q": q,
            "similarity_threshold": similarity_threshold,
            "limit": limit,
            "channel_id": channel_id,
            "importance_level": importance_level,
            "days": days,
        })

    async def find_similar_messages(
        self,
        message_id: int,
        *,
        similarity_threshold: float | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.get(f"/api/semantic/similar/{_seg(message_id)}", {
            "similarity_threshold": similarity_threshold,
            "limit": limit,
        })

    async def get_tags(self, *, tag_type: str | None = None, limit: int | None = None) -> Any:
        return await self.get("/api/semantic/tags", {"tag_type": tag_type, "limit": limit})

    async def search_by_tags(
        self,
        *,
        tags: str,
        match_all: bool | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.get("/api/semantic/tags/search", {
            "tags": tags,
            "match_all": match_all,
            "limit": limit,
        })

    # ── Unified search ────────────────────────────────────────────────────

    async def unified_search(
        self,
        *,
        q: str,
        mode: SearchMode | None = None,
        types: str | None = None,
        limit_per_type: int | None = None,
        days: int | None = None,
        location: str | None = None,
        lat: float | None = None,
        lng: float | None = None,
        radius_km: float | None = None,
        bounds: str | None = None,
    ) -> Any:
        return await self.get("/api/search", {
            "q": q,
            "mode": mode,
            "types": types,
            "limit_per_type": limit_per_type,
            "days": days,
            "location": location,
            "lat": lat,
            "lng": lng,
            "radius_km": radius_km,
            "bounds": bounds,
        })

    # ── Channels ──────────────────────────────────────────────────────────

    async def list_channels(
        self,
        *,
        active_only: bool | None = None,
        rule: str | None = None,
        folder: str | None = None,
        verified_only: bool | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.get("/api/channels", {
            "active_only": active_only,
            "rule": rule,
            "folder": folder,
            "verified_only": verified_only,
            "limit": limit,
        })

    async def get_channel(self, channel_id: int) -> Any:
        return await self.get(f"/api/channels/{_seg(channel_id)}")

    async def get_channel_stats(self, channel_id: int) -> Any:
        return await self.get(f"/api/channels/{_seg(channel_id)}/stats")

    async def get_channel_network(
        self,
        channel_id: int,
        *,
        similarity_threshold: float | None = None,
        max_messages: int | None = None,
        time_window: str | None = None,
        include_clusters: bool | None = None,
    ) -> Any:
        return await self.get(f"/api/channels/{_seg(channel_id)}/network", {
            "similarity_threshold": similarity_threshold,
            "max_messages": max_messages,
            "time_window": time_window,
            "include_clusters": include_clusters,
        })

    # ── Social graph ──────────────────────────────────────────────────────

    async def get_message_social_graph(
        self,
        message_id: int,
        *,
        include_forwards: bool | None = None,
        include_replies: bool | None = None,
        max_depth: int | None = None,
        max_comments: int | None = None,
    ) -> Any:
        return await self.get(f"/api/social-graph/messages/{_seg(message_id)}", {
            "include_forwards": include_forwards,
            "include_replies": include_replies,
            "max_depth": max_depth,
            "max_comments": max_comments,
        })

    async def get_channel_influence(self, channel_id: int) -> Any:
        return await self.get(f"/api/social-graph/channels/{_seg(channel_id)}/influence")

    async def get_influence_network(
        self,
        *,
        min_forwards: int | None = None,
        days: int | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.get("/api/social-graph/influence-network", {
            "min_forwards": min_forwards,
            "days": days,
            "limit": limit,
        })

    async def get_engagement_timeline(self, message_id: int) -> Any:
        return await self.get(
            f"/api/social-graph/messages/{_seg(message_id)}/engagement-timeline"
        )

    async def get_message_comments(
        self,
        message_id: int,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.get(f"/api/social-graph/messages/{_seg(message_id)}/comments", {
            "limit": limit,
            "offset": offset,
        })

    async def get_top_forwarded(self, *, days: int | None = None, limit: int | None = None) -> Any:
        return await self.get("/api/social-graph/virality/top-forwarded", {
            "days": days,
            "limit": limit,
        })

    async def get_top_influencers(self, *, days: int | None = None, limit: int | None = None) -> Any:
        return await self.get("/api/social-graph/influencers", {"days": days, "limit": limit})

    # ── Entities ──────────────────────────────────────────────────────────

    async def search_entities(
        self,
        *,
        q: str,
        source: str | None = None,
        entity_type: str | None = None,
        limit: int | None = None,
    ) -> Any:
        return await self.get("/api/entities/search", {
            "q": q,
            "source": source,
            "entity_type": entity_type,
            "limit": limit,
        })

    async def get_entity(
        self, source: str, entity_id: str, *, include_linked: bool | None = None
    ) -> Any:
        return await self.get(
            f"/api/entities/{_seg(source)}/{_seg(entity_id)}",
            {"include_linked": include_linked},
        )

    async def get_entity_relationships(
        self, source: str, entity_id: str, *, refresh: bool | None = None
    ) -> Any:
        return await self.get(
            f"/api/entities/{_seg(source)}/{_seg(entity_id)}/relationships",
            {"refresh": refresh},
        )

    async def get_entity_messages(
        self,
        source: str,
        entity_id: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.get(
            f"/api/entities/{_seg(source)}/{_seg(entity_id)}/messages",
            {"limit": limit, "offset": offset},
        )

    # ── Events / clusters ─────────────────────────────────────────────────

    async def list_events(
        self,
        *,
        page: int | None = None,
        page_size: int | None = None,
        tab: EventTab | None = None,
        event_type: str | None = None,
        tier_status: str | None = None,
        search: str | None = None,
        search_mode: SearchMode | None = None,
        similarity_threshold: float | None = None,
    ) -> Any:
        return await self.get("/api/events", {
            "page": page,
            "page_size": page_size,
            "tab": tab,
            "event_type": event_type,
            "tier_status": tier_status,
            "search": search,
            "search_mode": search_mode,
            "similarity_threshold": similarity_threshold,
        })

    async def get_event_stats(self) -> Any:
        return await self.get("/api/events/stats")

    async def get_event(
        self,
        event_id: int,
        *,
        include_messages: bool | None = None,
        include_sources: bool | None = None,
        message_limit: int | None = None,
    ) -> Any:
        return await self.get(f"/api/events/{_seg(event_id)}", {
            "include_messages": include_messages,
            "include_sources": include_sources,
            "message_limit": message_limit,
        })

    async def get_event_timeline(self, event_id: int) -> Any:
        return await self.get(f"/api/events/{_seg(event_id)}/timeline")

    async def get_events_for_message(self, message_id: int) -> Any:
        return await self.get(f"/api/events/message/{_seg(message_id)}")

    # ── Analytics ─────────────────────────────────────────────────────────

    async def get_timeline_stats(
        self,
        *,
        granularity: Granularity | None = None,
        channel_id: int | None = None,
        topic: str | None = None,
        importance_level: ImportanceLevel | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        days: int | None = None,
    ) -> Any:
        return await self.get("/api/analytics/timeline", {
            "granularity": granularity,
            "channel_id": channel_id,
            "topic": topic,
            "importance_level": importance_level,
            "date_from": date_from,
            "date_to": date_to,
            "days": days,
        })

    async def get_topic_distribution(
        self, *, days: int | None = None, limit: int | None = None
    ) -> Any:
        return await self.get("/api/analytics/distribution/topics", {"days": days, "limit": limit})

    async def get_language_distribution(self, *, days: int | None = None) -> Any:
        return await self.get("/api/analytics/distribution/languages", {"days": days})

    async def get_channel_analytics(
        self, *, days: int | None = None, limit: int | None = None
    ) -> Any:
        return await self.get("/api/analytics/channels/activity", {"days": days, "limit": limit})

    async def get_heatmap(self, *, days: int | None = None) -> Any:
        return await self.get("/api/analytics/heatmap", {"days": days})

    async def get_entity_analytics(
        self, *, days: int | None = None, limit: int | None = None
    ) -> Any:
        return await self.get("/api/analytics/entities", {"days": days, "limit": limit})

    async def get_media_analytics(self) -> Any:
        return await self.get("/api/analytics/media")

    # ── Map / geolocation ─────────────────────────────────────────────────

    async def get_map_messages(
        self,
        *,
        bounds: str | None = None,
        zoom: int | None = None,
        cluster: bool | None = None,
        cluster_grid_size: float | None = None,
        days: int | None = None,
        include_confidence: bool | None = None,
    ) -> Any:
        return await self.get("/api/map/messages", {
            "bounds": bounds,
            "zoom": zoom,
            "cluster": cluster,
            "cluster_grid_size": cluster_grid_size,
            "days": days,
            "include_confidence": include_confidence,
        })

    async def get_map_clusters(
        self,
        *,
        bounds: str | None = None,
        zoom: int | None = None,
        tier_status: str | None = None,
        days: int | None = None,
    ) -> Any:
        return await self.get("/api/map/clusters", {
            "bounds": bounds,
            "zoom": zoom,
            "tier_status": tier_status,
            "days": days,
        })

    async def get_map_events(self, *, bounds: str | None = None) -> Any:
        return await self.get("/api/map/events", {"bounds": bounds})

    async def get_map_heatmap(
        self,
        *,
        zoom: int | None = None,
        bounds: str | None = None,
        grid_size: float | None = None,
    ) -> Any:
        return await self.get("/api/map/heatmap", {
            "zoom": zoom,
            "bounds": bounds,
            "grid_size": grid_size,
        })

    async def suggest_locations(self, *, q: str, limit: int | None = None) -> Any:
        return await self.get("/api/map/locations/suggest", {"q": q, "limit": limit})

    async def reverse_geocode(self, *, lat: float, lng: float) -> Any:
        return await self.get("/api/map/locations/reverse", {"lat": lat, "lng": lng})

    # ── Stream (unified intelligence feed) ────────────────────────────────

    async def get_unified_stream(
        self,
        *,
        limit: int | None = None,
        sources: str | None = None,
        categories: str | None = None,
        importance_level: ImportanceLevel | None = None,
        hours: int | None = None,
    ) -> Any:
        return await self.get("/api/stream/unified", {
            "limit": limit,
            "sources": sources,
            "categories": categories,
            "importance_level": importance_level,
            "hours": hours,
        })

    # ── Validation (RSS cross-reference) ──────────────────────────────────

    async def validate_message(self, message_id: int) -> Any:
        return await self.get(f"/api/validation/messages/{_seg(message_id)}")

    async def get_correlations(self, message_id: int) -> Any:
        return await self.get(f"/api/validation/messages/{_seg(message_id)}/correlations")

    # ── Comments ──────────────────────────────────────────────────────────

    async def get_comment(self, comment_id: int) -> Any:
        return await self.get(f"/api/comments/{_seg(comment_id)}")

    async def translate_comment(self, comment_id: int) -> Any:
        return await self.post(f"/api/comments/{_seg(comment_id)}/translate")

    # ── Media ─────────────────────────────────────────────────────────────

    async def get_media_gallery(
        self,
        *,
        channel_id: int | None = None,
        media_type: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Any:
        return await self.get("/api/media/gallery", {
            "channel_id": channel_id,
            "media_type": media_type,
            "date_from": date_from,
            "date_to": date_to,
            "limit": limit,
            "offset": offset,
        })

    # ── Admin (read-only stats & monitoring) ──────────────────────────────

    async def get_admin_dashboard(self) -> Any:
        return await self.get("/api/admin/dashboard")

    async def get_admin_stats_overview(self) -> Any:
        return await self.get("/api/admin/stats/overview")

    async def get_admin_stats_quality(self) -> Any:
        return await self.get("/api/admin/stats/quality")

    async def get_admin_stats_processing(self, *, hours: int | None = None) -> Any:
        return await self.get("/api/admin/stats/processing", {"hours": hours})

    async def get_admin_stats_storage(self) -> Any:
        return await self.get("/api/admin/stats/storage")

    async def get_admin_workers_stats(self) -> Any:
        return await self.get("/api/admin/system/workers/stats")

    async def get_admin_enrichment_tasks(self) -> Any:
        return await self.get("/api/admin/system/enrichment/tasks")

    async def get_admin_cache_stats(self) -> Any:
        return await self.get("/api/admin/system/cache/stats")

    async def get_admin_audit_stats(self) -> Any:
        return await self.get("/api/admin/system/audit/stats")

    async def get_admin_spam_stats(self) -> Any:
        return await self.get("/api/admin/spam/stats")

    async def get_admin_channels_stats(self) -> Any:
        return await self.get("/api/admin/channels/stats")

    async def get_admin_entities_stats(self) -> Any:
        return await self.get("/api/admin/entities/stats")

    async def get_admin_feeds_stats(self) -> Any:
        return await self.get("/api/admin/feeds/rss/stats")

    async def get_admin_prompts_stats(self) -> Any:
        return await self.get("/api/admin/prompts/stats")

    async def get_admin_comments_stats(self) -> Any:
        return await self.get("/api/admin/comments/stats")

    async def get_admin_viral_posts(self) -> Any:
        return await self.get("/api/admin/comments/viral")

    # ── System health ─────────────────────────────────────────────────────

    async def get_health(self) -> Any:
        return await self.get("/health")

    async def get_hardware_config(self) -> Any:
        return await self.get("/api/health/hardware")

    async def get_system_status(self) -> Any:
        return await self.get("/api/system/status")

    async def get_metrics_overview(self) -> Any:
        return await self.get("/api/metrics/overview")

    async def get_metrics_llm(self) -> Any:
        return await self.get("/api/metrics/llm")

    async def get_metrics_pipeline(self) -> Any:
        return await self.get("/api/metrics/pipeline")

    async def get_metrics_services(self) -> Any:
        return await self.get("/api/metrics/services")

    # ── Models (LLM configuration) ────────────────────────────────────────

    async def list_models(self) -> Any:
        return await self.get("/api/models")

    async def get_model_health(self) -> Any:
        return await self.get("/api/models/health")
