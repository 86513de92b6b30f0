"""Package entry point: allows ``python -m osint_mcp``."""

import asyncio
import logging
import sys

from .server import main

logger = logging.getLogger("osint_mcp")


def run() -> None:
    """Console-script entry: run until stdin closes, exit 1 on a fatal error."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    run()
