"""Grouping, search, caching and rendering behind the explorer page."""

from .cache import FALLBACK_MARKUP, MarkupCache, normalize_markup
from .clipboard import BufferedClipboard, ClipboardWriter
from .grouping import IconGroup, group_icons
from .rendering import ExplorerRenderer
from .search import build_matcher, filter_groups, sort_groups
from .session import ExplorerSession, LoadProgress
from .sources import HttpIconSource, IconSource, LocalIconSource
from .variants import DEFAULT_VARIANT, VARIANTS, parse_icon_name, should_prefer_variant

__all__ = [
    "BufferedClipboard",
    "ClipboardWriter",
    "DEFAULT_VARIANT",
    "ExplorerRenderer",
    "ExplorerSession",
    "FALLBACK_MARKUP",
    "HttpIconSource",
    "IconGroup",
    "IconSource",
    "LoadProgress",
    "LocalIconSource",
    "MarkupCache",
    "VARIANTS",
    "build_matcher",
    "filter_groups",
    "group_icons",
    "normalize_markup",
    "parse_icon_name",
    "should_prefer_variant",
    "sort_groups",
]
