"""Run the explorer with uvicorn.

    python -m icon_explorer
    PORT=8080 icon-explorer
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from icon_explorer.core.config import get_settings
from icon_explorer.core.logging import configure_logging

logger = logging.getLogger("icon_explorer")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the icon explorer")
    parser.add_argument("--host", help="Bind address (default from settings)")
    parser.add_argument("--port", type=int, help="Port (default from PORT or settings)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Icon Explorer server running on http://localhost:%d (icons: %s)", port, settings.icons_dir)
    uvicorn.run(
        "icon_explorer.main:app",
        host=host,
        port=port,
        reload=args.reload or settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
