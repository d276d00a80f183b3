"""Explorer session: the state behind one open explorer page."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from icon_explorer.modules.icons import Icon, IconError, IconGroupNotFoundError, IconNotFoundError

from .cache import MarkupCache
from .clipboard import ClipboardWriter
from .grouping import IconGroup, group_icons
from .search import SORT_NAME, SearchMode, filter_groups, sort_groups
from .sources import IconSource

logger = logging.getLogger(__name__)

VIEW_SIZES = ("small", "medium", "large")
DEFAULT_VIEW_SIZE = "medium"


@dataclass(frozen=True, slots=True)
class LoadProgress:
    loaded: int
    total: int

    @property
    def percentage(self) -> int:
        if self.total == 0:
            return 100
        return round(self.loaded / self.total * 100)

    @property
    def label(self) -> str:
        return f"{self.percentage}% ({self.loaded}/{self.total})"


class ExplorerSession:
    """Holds the icon list, the groups, the markup cache and the filter state.

    Every mutation is followed by the caller re-rendering from this object; it
    is only touched from the event loop, so it carries no locks.
    """

    def __init__(self, source: IconSource, cache: Optional[MarkupCache] = None, *, preview_size: int = 48) -> None:
        self.source = source
        self.cache = cache or MarkupCache(source, preview_size=preview_size)
        self.icons: list[Icon] = []
        self.groups: dict[str, IconGroup] = {}
        self.filtered: list[IconGroup] = []
        self.query = ""
        self.regex_mode = False
        self.sort_key = SORT_NAME
        self.view_size = DEFAULT_VIEW_SIZE
        self.loaded = False
        self.load_error: Optional[IconError] = None
        self._load_task: Optional[asyncio.Task[None]] = None

    @property
    def search_mode(self) -> SearchMode:
        return "regex" if self.regex_mode else "plain"

    async def load(self) -> None:
        """Reload the listing, rebuild every group and preload all previews."""
        try:
            icons = await self.source.list_icons()
        except IconError as exc:
            logger.error("Error loading icons: %s", exc)
            self.icons = []
            self.groups = {}
            self.filtered = []
            self.load_error = exc
            self.loaded = False
            return

        self.icons = icons
        self.groups = group_icons(icons)
        self.load_error = None
        await self.cache.preload(icons)
        self.loaded = True
        logger.info(
            "Loaded %d icons in %d groups, previews %s",
            len(icons),
            len(self.groups),
            self.progress().label,
        )
        self.apply_filter()

    @property
    def loading(self) -> bool:
        return self._load_task is not None and not self._load_task.done()

    def start_load(self) -> asyncio.Task[None]:
        """Start a reload in the background unless one is already running."""
        if self._load_task is None or self._load_task.done():
            self._load_task = asyncio.create_task(self.load())
        return self._load_task

    async def ensure_loaded(self) -> None:
        if self.loading:
            await self._load_task
        elif not self.loaded:
            await self.load()

    def apply_filter(
        self,
        query: Optional[str] = None,
        regex_mode: Optional[bool] = None,
        sort_key: Optional[str] = None,
        view_size: Optional[str] = None,
    ) -> list[IconGroup]:
        if query is not None:
            self.query = query
        if regex_mode is not None:
            self.regex_mode = regex_mode
        if sort_key is not None:
            self.sort_key = sort_key
        if view_size is not None:
            self.view_size = view_size if view_size in VIEW_SIZES else DEFAULT_VIEW_SIZE

        matched = filter_groups(self.groups.values(), self.query, self.search_mode)
        self.filtered = sort_groups(matched, self.sort_key)
        return self.filtered

    def get_group(self, base_name: str) -> IconGroup:
        group = self.groups.get(base_name)
        if group is None:
            raise IconGroupNotFoundError(detail=base_name)
        return group

    def select_variant(self, base_name: str, variant: str) -> IconGroup:
        group = self.get_group(base_name)
        if not group.select(variant):
            logger.warning("Icon %s has no %s variant", base_name, variant)
        return group

    def preview_markup(self, group: IconGroup) -> str:
        return self.cache.preview(group.filename)

    async def copy_markup(
        self, base_name: str, clipboard: ClipboardWriter, filename: Optional[str] = None
    ) -> bool:
        """Copy the raw markup of one variant of a group.

        ``filename`` names the variant the page is showing; it must belong to
        the group. Without it the group's selected variant is copied.
        """
        try:
            group = self.get_group(base_name)
            icon = group.selected if filename is None else group.find(filename)
            if icon is None:
                raise IconNotFoundError(detail=f"{filename} is not a variant of {base_name}")
            text = await self.source.fetch_markup(icon)
            await clipboard.write_text(text)
        except (IconError, OSError) as exc:
            logger.error("Failed to copy SVG %s: %s", base_name, exc)
            return False
        return True

    def progress(self) -> LoadProgress:
        return LoadProgress(
            loaded=self.cache.loaded_count(icon.filename for icon in self.icons),
            total=len(self.icons),
        )

    def stats_text(self) -> str:
        total_groups = len(self.groups)
        showing = len(self.filtered)
        total_icons = len(self.icons)
        if showing == total_groups:
            return f"Showing all {total_groups} icons ({total_icons} total variants)"
        return f"Showing {showing} of {total_groups} icons ({total_icons} total variants)"
