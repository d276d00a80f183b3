"""Console logging setup shared by the server entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single console handler on the root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    root = logging.getLogger()
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    if not any(getattr(handler, "_icon_explorer", False) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._icon_explorer = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(resolved)


__all__ = ["configure_logging", "LOG_FORMAT"]
