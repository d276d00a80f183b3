"""In-memory cache of preview markup, shared by every card of a session."""

from __future__ import annotations

import asyncio
import logging
import xml.etree.ElementTree as ET
from typing import Iterable, Optional

from icon_explorer.modules.icons import Icon, IconError

from .sources import IconSource

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Process-wide: every ElementTree serialization in this process writes these
# namespaces as the default and "xlink" prefixes instead of ns0 and ns1.
ET.register_namespace("", SVG_NAMESPACE)
ET.register_namespace("xlink", XLINK_NAMESPACE)

FALLBACK_MARKUP = '<div class="icon-fallback">SVG</div>'


class InvalidMarkupError(ValueError):
    """Raised when fetched content has no usable <svg> element."""


def normalize_markup(text: str, size: int = 48) -> str:
    """Return the first ``<svg>`` element of ``text`` resized to ``size``."""
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise InvalidMarkupError(str(exc)) from exc

    svg = root if _local_name(root.tag) == "svg" else None
    if svg is None:
        svg = next((el for el in root.iter() if _local_name(el.tag) == "svg"), None)
    if svg is None:
        raise InvalidMarkupError("no <svg> element")

    svg.tail = None
    svg.set("width", str(size))
    svg.set("height", str(size))
    return ET.tostring(svg, encoding="unicode")


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


class MarkupCache:
    """Filename → preview markup, with de-duplication of concurrent loads.

    Entries are never evicted. A failed load is cached as the fallback
    placeholder so the page never retries it within the session.
    """

    def __init__(self, source: IconSource, preview_size: int = 48) -> None:
        self._source = source
        self._preview_size = preview_size
        self._entries: dict[str, str] = {}
        self._in_flight: dict[str, asyncio.Task[str]] = {}

    def __contains__(self, filename: str) -> bool:
        return filename in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, filename: str) -> Optional[str]:
        return self._entries.get(filename)

    def preview(self, filename: str) -> str:
        return self._entries.get(filename, FALLBACK_MARKUP)

    def loaded_count(self, filenames: Iterable[str]) -> int:
        return sum(1 for filename in filenames if filename in self._entries)

    async def load(self, icon: Icon) -> str:
        cached = self._entries.get(icon.filename)
        if cached is not None:
            return cached

        task = self._in_flight.get(icon.filename)
        if task is None:
            task = asyncio.create_task(self._load(icon))
            self._in_flight[icon.filename] = task
        return await task

    async def preload(self, icons: Iterable[Icon]) -> None:
        await asyncio.gather(*(self.load(icon) for icon in icons))

    async def _load(self, icon: Icon) -> str:
        try:
            text = await self._source.fetch_markup(icon)
            markup = normalize_markup(text, self._preview_size)
        except (IconError, InvalidMarkupError) as exc:
            logger.error("Error loading SVG %s: %s", icon.filename, exc)
            markup = FALLBACK_MARKUP
        finally:
            self._in_flight.pop(icon.filename, None)
        self._entries[icon.filename] = markup
        return markup
