"""Server-side rendering of explorer cards and grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi.templating import Jinja2Templates

from .grouping import IconGroup
from .session import DEFAULT_VIEW_SIZE, ExplorerSession

GRID_COLUMN_WIDTHS = {"small": 150, "medium": 200, "large": 280}

LOAD_ERROR_MESSAGE = (
    "Failed to load icons. Please make sure the server is running and the icons "
    "directory contains SVG files."
)
NO_RESULTS_MESSAGE = "No icons found matching your search criteria."


@dataclass(frozen=True, slots=True)
class VariantOption:
    value: str
    label: str
    selected: bool


@dataclass(frozen=True, slots=True)
class CardView:
    base_name: str
    filename: str
    preview: str
    details: str
    url: str
    download_url: str
    options: tuple[VariantOption, ...]


def format_details(group: IconGroup) -> str:
    return f"{group.dimensions} • {group.size / 1024:.1f} KB"


def grid_column_width(view_size: str) -> int:
    return GRID_COLUMN_WIDTHS.get(view_size, GRID_COLUMN_WIDTHS[DEFAULT_VIEW_SIZE])


class ExplorerRenderer:
    def __init__(
        self, templates: Jinja2Templates, *, copy_feedback_ms: int = 1500, asset_base_url: str = ""
    ) -> None:
        self.templates = templates
        self.copy_feedback_ms = copy_feedback_ms
        # Prefix for icon and download links when the icons live on another server.
        self.asset_base_url = asset_base_url.rstrip("/")

    def card_view(self, session: ExplorerSession, group: IconGroup) -> CardView:
        return CardView(
            base_name=group.base_name,
            filename=group.filename,
            preview=session.preview_markup(group),
            details=format_details(group),
            url=self.asset_base_url + group.url,
            download_url=self.asset_base_url + group.download_url,
            options=tuple(
                VariantOption(value=value, label=label, selected=value == group.selected_variant)
                for value, label in group.variant_options()
            ),
        )

    def context(self, session: ExplorerSession) -> dict[str, Any]:
        return {
            "cards": [self.card_view(session, group) for group in session.filtered],
            "stats": session.stats_text() if session.load_error is None else "",
            "load_error": LOAD_ERROR_MESSAGE if session.load_error is not None else None,
            "no_results": NO_RESULTS_MESSAGE,
            "query": session.query,
            "regex_mode": session.regex_mode,
            "sort_key": session.sort_key,
            "view_size": session.view_size,
            "column_width": grid_column_width(session.view_size),
            "copy_feedback_ms": self.copy_feedback_ms,
            "loading": session.loading,
            "progress": session.progress(),
        }

    def render_results(self, session: ExplorerSession) -> str:
        return self._render("partials/results.html", self.context(session))

    def render_card(self, session: ExplorerSession, group: IconGroup) -> str:
        return self._render(
            "partials/card.html",
            {"card": self.card_view(session, group), "copy_feedback_ms": self.copy_feedback_ms},
        )

    def render_card_bindings(self, session: ExplorerSession, group: IconGroup) -> str:
        """Render only the parts of a card that follow the selected variant."""
        return self._render(
            "partials/card_bindings.html",
            {"card": self.card_view(session, group), "copy_feedback_ms": self.copy_feedback_ms},
        )

    def _render(self, name: str, context: dict[str, Any]) -> str:
        return self.templates.get_template(name).render(context)
