"""Search matchers and ordering for icon groups."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Literal, Protocol, Sequence

from icon_explorer.modules.icons import InvalidPatternError

from .grouping import IconGroup

logger = logging.getLogger(__name__)

SearchMode = Literal["plain", "regex"]

SORT_NAME = "name"
SORT_NAME_DESC = "name-desc"
SORT_SIZE = "size"
SORT_KEYS = (SORT_NAME, SORT_NAME_DESC, SORT_SIZE)


class Matcher(Protocol):
    def matches(self, name: str) -> bool:
        ...


class SubstringMatcher:
    def __init__(self, query: str) -> None:
        self._needle = query.lower()

    def matches(self, name: str) -> bool:
        return self._needle in name.lower()


class PatternMatcher:
    def __init__(self, query: str) -> None:
        try:
            self._pattern = re.compile(query, re.IGNORECASE)
        except re.error as exc:
            raise InvalidPatternError(detail=f"{query!r}: {exc}") from exc

    def matches(self, name: str) -> bool:
        return self._pattern.search(name) is not None


class NothingMatcher:
    def matches(self, name: str) -> bool:
        return False


def build_matcher(query: str, mode: SearchMode = "plain") -> Matcher:
    """Return the matcher for ``query``.

    A regex that fails to compile yields a matcher that accepts nothing, and
    a blank regex accepts everything.
    """
    if mode == "regex":
        if not query.strip():
            return SubstringMatcher("")
        try:
            return PatternMatcher(query)
        except InvalidPatternError as exc:
            logger.debug("Invalid search pattern, showing no results: %s", exc)
            return NothingMatcher()
    return SubstringMatcher(query)


def filter_groups(
    groups: Iterable[IconGroup], query: str = "", mode: SearchMode = "plain"
) -> list[IconGroup]:
    matcher = build_matcher(query, mode)
    return [group for group in groups if matcher.matches(group.base_name)]


def sort_groups(groups: Sequence[IconGroup], key: str) -> list[IconGroup]:
    if key == SORT_NAME:
        return sorted(groups, key=_name_key)
    if key == SORT_NAME_DESC:
        return sorted(groups, key=_name_key, reverse=True)
    if key == SORT_SIZE:
        return sorted(groups, key=lambda group: group.size)
    return list(groups)


def _name_key(group: IconGroup) -> tuple[str, str]:
    return group.base_name.casefold(), group.base_name
