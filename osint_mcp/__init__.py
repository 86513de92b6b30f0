"""OSINT MCP server package.

Exposes the OSINT Intelligence Platform REST API (Telegram messages,
channels, entities, events, analytics, maps, and platform health) as MCP
tools, plus reference resources and workflow prompts, over stdio.

Usage::

    # As a module:
    python -m osint_mcp

    # As the installed console script:
    osint-mcp-server

    # Or import and run:
    from osint_mcp import main
    asyncio.run(main())
"""

from .server import main  # noqa: F401

__all__ = ["main"]
