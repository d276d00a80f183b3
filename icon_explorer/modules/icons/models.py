"""Domain models for icon files."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import PurePath
from urllib.parse import quote

SUPPORTED_EXTENSION = ".svg"
SVG_MEDIA_TYPE = "image/svg+xml"
UNKNOWN_DIMENSIONS = "Unknown"


@dataclass(frozen=True, slots=True)
class Icon:
    filename: str
    size: int
    last_modified: datetime
    dimensions: str = UNKNOWN_DIMENSIONS

    @property
    def name(self) -> str:
        return PurePath(self.filename).stem

    @property
    def url(self) -> str:
        return f"/icons/{quote(self.filename)}"

    @property
    def download_url(self) -> str:
        return f"/api/download/{quote(self.filename)}"


@dataclass(frozen=True, slots=True)
class IconDownload:
    filename: str
    content: bytes
    media_type: str = SVG_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


def has_supported_extension(filename: str) -> bool:
    return PurePath(filename).suffix.lower() == SUPPORTED_EXTENSION
