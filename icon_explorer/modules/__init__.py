"""Feature modules."""

from . import icons

__all__ = [
    "icons",
]
