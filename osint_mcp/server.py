"""MCP server wiring: tools, resources, prompts, and the stdio entry point."""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import (
    CallToolResult,
    GetPromptResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    Resource,
    TextContent,
    Tool,
)

from .client import ApiClientConfig, OsintApiClient
from .config import SERVER_NAME, VERSION, settings
from .errors import OsintMcpError
from .logging_setup import configure_logging
from .prompts import PROMPTS, get_prompt_content
from .prompts import get_prompt as find_prompt
from .resources import MIME_TYPE, RESOURCES, get_resource_content
from .tools import TOOL_DEFINITIONS, dispatch

logger = logging.getLogger(__name__)

# ── Server instance ───────────────────────────────────────────────────────

server = Server(SERVER_NAME, version=VERSION)

_client: OsintApiClient | None = None


def get_client() -> OsintApiClient:
    """Lazy-init the shared API client from settings."""
    global _client
    if _client is None:
        _client = OsintApiClient(ApiClientConfig.from_settings(settings))
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def _text(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


async def run_tool(
    name: str,
    arguments: dict[str, Any] | None,
    client: OsintApiClient | None = None,
) -> CallToolResult:
    """Run one tool call and wrap the outcome as an MCP result.

    Success yields the API body as indented JSON.  Any failure yields a
    single ``Error: <message>`` block with ``isError`` set; nothing is
    raised to the protocol layer.
    """
    try:
        result = await dispatch(name, arguments, client or get_client())
        text = json.dumps(result, indent=2, ensure_ascii=False, default=str)
    except OsintMcpError as exc:
        return CallToolResult(content=_text(f"Error: {exc.message}"), isError=True)
    except Exception as exc:
        logger.exception("Unexpected failure in tool %s", name)
        return CallToolResult(content=_text(f"Error: {exc}"), isError=True)
    return CallToolResult(content=_text(text), isError=False)


# ── Tools ─────────────────────────────────────────────────────────────────


@server.list_tools()
async def list_tools() -> list[Tool]:
    """Declare all available tools."""
    return [Tool(**defn) for defn in TOOL_DEFINITIONS]


# Arguments are validated by the tool's own model so that schema failures
# come back in the same ``Error: ...`` shape as every other failure.
@server.call_tool(validate_input=False)
async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    return await run_tool(name, arguments)


# ── Resources ─────────────────────────────────────────────────────────────


@server.list_resources()
async def list_resources() -> list[Resource]:
    return [
        Resource(
            uri=entry.uri,
            name=entry.name,
            description=entry.description,
            mimeType=entry.mime_type,
        )
        for entry in RESOURCES
    ]


@server.read_resource()
async def read_resource(uri: Any) -> list[ReadResourceContents]:
    return [ReadResourceContents(content=get_resource_content(str(uri)), mime_type=MIME_TYPE)]


# ── Prompts ───────────────────────────────────────────────────────────────


@server.list_prompts()
async def list_prompts() -> list[Prompt]:
    return [
        Prompt(
            name=template.name,
            description=template.description,
            arguments=[
                PromptArgument(name=arg.name, description=arg.description, required=arg.required)
                for arg in template.arguments
            ],
        )
        for template in PROMPTS
    ]


@server.get_prompt()
async def get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
    template = find_prompt(name)
    return GetPromptResult(
        description=template.description if template else None,
        messages=[
            PromptMessage(
                role="user",
                content=TextContent(type="text", text=get_prompt_content(name, arguments)),
            )
        ],
    )


# ── Entry point ───────────────────────────────────────────────────────────


async def main() -> None:
    """Run the MCP server over stdio until stdin closes."""
    configure_logging(settings.LOG_LEVEL)
    logger.info("OSINT MCP server %s running on stdio", VERSION)
    logger.info("API: %s", settings.OSINT_API_URL)
    if not settings.has_credentials:
        logger.warning(
            "No credentials configured (OSINT_JWT_TOKEN / OSINT_API_KEY / "
            "OSINT_ORY_USER_ID); requests will be anonymous"
        )
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await close_client()
