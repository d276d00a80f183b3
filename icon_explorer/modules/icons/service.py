"""Icon service handling directory listing and downloads."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .exceptions import IconDirectoryError, IconNotFoundError, InvalidIconRequestError
from .models import UNKNOWN_DIMENSIONS, Icon, IconDownload, has_supported_extension

logger = logging.getLogger(__name__)

VIEWBOX_PATTERN = re.compile(r"""viewBox=["']([^"']+)["']""")


@dataclass(slots=True)
class IconService:
    icons_dir: Path

    @classmethod
    def from_settings(cls, settings) -> "IconService":
        return cls(Path(settings.icons_dir))

    async def list_icons(self) -> list[Icon]:
        """Read every SVG file in the icons directory.

        Files are read concurrently. A file that disappears or cannot be read
        while the listing runs is skipped; only a failure to enumerate the
        directory itself fails the whole listing.
        """
        try:
            entries = await asyncio.to_thread(self._scan_directory)
        except OSError as exc:
            logger.error("Error reading icons directory %s: %s", self.icons_dir, exc)
            raise IconDirectoryError(detail=str(exc)) from exc

        results = await asyncio.gather(*(self._load_icon(path) for path in entries))
        icons = [icon for icon in results if icon is not None]
        logger.debug("Listed %d icons from %s", len(icons), self.icons_dir)
        return icons

    async def download_icon(self, filename: str) -> IconDownload:
        path = self.resolve_path(filename)
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            logger.error("Error downloading icon %s: %s", filename, exc)
            raise IconNotFoundError(detail=filename) from exc
        return IconDownload(filename=filename, content=content)

    async def read_icon_text(self, filename: str) -> str:
        download = await self.download_icon(filename)
        return download.content.decode("utf-8", errors="replace")

    def resolve_path(self, filename: str) -> Path:
        if not has_supported_extension(filename):
            raise InvalidIconRequestError(detail=filename)
        if Path(filename).name != filename or filename in {".", ".."}:
            raise InvalidIconRequestError("Invalid icon file name", detail=filename)
        return self.icons_dir / filename

    def _scan_directory(self) -> list[Path]:
        return [
            entry
            for entry in self.icons_dir.iterdir()
            if has_supported_extension(entry.name) and entry.is_file()
        ]

    async def _load_icon(self, path: Path) -> Optional[Icon]:
        try:
            return await asyncio.to_thread(_read_icon, path)
        except OSError as exc:
            logger.warning("Skipping unreadable icon %s: %s", path.name, exc)
            return None


def _read_icon(path: Path) -> Icon:
    stat = path.stat()
    content = path.read_text(encoding="utf-8", errors="replace")
    return Icon(
        filename=path.name,
        size=stat.st_size,
        last_modified=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        dimensions=extract_dimensions(content),
    )


def extract_dimensions(content: str) -> str:
    """Return ``"W×H"`` taken from the first ``viewBox`` declaration."""
    match = VIEWBOX_PATTERN.search(content)
    if not match:
        return UNKNOWN_DIMENSIONS
    parts = match.group(1).split()
    if len(parts) < 4:
        return UNKNOWN_DIMENSIONS
    return f"{parts[2]}×{parts[3]}"
