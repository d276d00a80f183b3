"""Group icon files into logical icons with selectable variants."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from icon_explorer.modules.icons import Icon

from .variants import order_variants, parse_icon_name, should_prefer_variant, variant_label

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IconGroup:
    base_name: str
    variants: dict[str, Icon] = field(default_factory=dict)
    selected_variant: str | None = None

    @property
    def selected(self) -> Icon:
        if self.selected_variant is None:
            raise LookupError(f"icon group {self.base_name!r} has no variants")
        return self.variants[self.selected_variant]

    @property
    def filename(self) -> str:
        return self.selected.filename

    @property
    def size(self) -> int:
        return self.selected.size

    @property
    def dimensions(self) -> str:
        return self.selected.dimensions

    @property
    def url(self) -> str:
        return self.selected.url

    @property
    def download_url(self) -> str:
        return self.selected.download_url

    def add(self, variant: str, icon: Icon) -> bool:
        """Register ``icon`` under ``variant``; the first icon seen for a variant is kept."""
        if variant in self.variants:
            logger.debug(
                "Ignoring %s: variant %s of %s already provided by %s",
                icon.filename,
                variant,
                self.base_name,
                self.variants[variant].filename,
            )
            return False
        self.variants[variant] = icon
        if should_prefer_variant(variant, self.selected_variant):
            self.selected_variant = variant
        return True

    def select(self, variant: str) -> bool:
        if variant not in self.variants:
            return False
        self.selected_variant = variant
        return True

    def find(self, filename: str) -> Icon | None:
        return next((icon for icon in self.variants.values() if icon.filename == filename), None)

    def variant_options(self) -> list[tuple[str, str]]:
        """``(variant, label)`` pairs ordered by preference."""
        return [(variant, variant_label(variant)) for variant in order_variants(self.variants)]


def group_icons(icons: Iterable[Icon]) -> dict[str, IconGroup]:
    groups: dict[str, IconGroup] = {}
    for icon in icons:
        base_name, variant = parse_icon_name(icon.filename)
        group = groups.get(base_name)
        if group is None:
            group = groups[base_name] = IconGroup(base_name=base_name)
        group.add(variant, icon)
    return groups
