"""MCP tool catalogue and dispatch.

Importing this package registers every tool module with
:data:`osint_mcp.registry.REGISTRY`.  ``TOOL_DEFINITIONS`` is the
advertised catalogue; :func:`dispatch` routes a call to its handler.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from ..errors import OsintMcpError
from ..registry import REGISTRY
from . import analytics, channels, entities, messages, platform  # noqa: F401

if TYPE_CHECKING:
    from ..client import OsintApiClient

logger = logging.getLogger(__name__)

TOOL_DEFINITIONS: list[dict[str, Any]] = REGISTRY.definitions()


async def dispatch(name: str, arguments: dict[str, Any] | None, client: OsintApiClient) -> Any:
    """Validate *arguments* for tool *name* and make its single API call.

    Raises :class:`~osint_mcp.errors.UnknownToolError` for unregistered
    names and :class:`~osint_mcp.errors.InvalidArgumentsError` when the
    argument bag does not fit the tool's schema.  API failures propagate
    unchanged.
    """
    start = time.perf_counter()
    logger.info("[mcp:call]   %s  args=%s", name, _summarise(arguments or {}))
    try:
        spec = REGISTRY.get(name)
        args = spec.parse(arguments)
        result = await spec.handler(client, args)
    except OsintMcpError as exc:
        _log_failure(name, exc.kind, exc, start)
        raise
    except Exception as exc:
        _log_failure(name, type(exc).__name__, exc, start)
        raise
    logger.info("[mcp:result] %s  OK (%dms)", name, _elapsed_ms(start))
    return result


def _summarise(args: dict[str, Any], max_len: int = 200) -> str:
    """One-line summary of MCP tool arguments."""
    raw = ", ".join(f"{k}={v!r}" for k, v in args.items())
    return raw[:max_len] + ("…" if len(raw) > max_len else "")


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _log_failure(name: str, kind: str, exc: Exception, start: float) -> None:
    logger.warning(
        "[mcp:result] %s  ERROR %s (%dms): %s", name, kind, _elapsed_ms(start), exc
    )


__all__ = ["TOOL_DEFINITIONS", "dispatch"]
