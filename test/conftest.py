"""Pytest configuration and fixtures

Provides a temporary icons directory populated with a handful of SVG files,
settings pointing at it, and a TestClient for the full application.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from icon_explorer.core.config import Settings
from icon_explorer.main import create_app
from icon_explorer.modules.icons import Icon, IconDirectoryError, IconNotFoundError

ARROW_FILLED = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0h24v24H0z"/></svg>'
ARROW_STROKE = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1h22v22H1z" fill="none" stroke="#000"/></svg>'
CALENDAR = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 32 32"><rect width="32" height="32"/></svg>'
HOME_DUO = '<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20"><circle r="4"/></svg>'


@pytest.fixture
def icons_dir(tmp_path):
    """Create a temporary icons directory with test files."""
    directory = tmp_path / "icons"
    directory.mkdir()

    (directory / "arrow-filled.svg").write_text(ARROW_FILLED, encoding="utf-8")
    (directory / "arrow-stroke.svg").write_text(ARROW_STROKE, encoding="utf-8")
    (directory / "calendar.svg").write_text(CALENDAR, encoding="utf-8")
    (directory / "home-duo_solid.svg").write_text(HOME_DUO, encoding="utf-8")

    # Should be excluded from listing and rejected on download
    (directory / "readme.txt").write_text("not an icon", encoding="utf-8")
    (directory / "photo.png").write_bytes(b"\x89PNG\r\n\x1a\n" + b"\x00" * 16)
    (directory / "nested.svg").mkdir()

    return directory


@pytest.fixture
def settings(icons_dir):
    return Settings(storage={"icons_dir": icons_dir})


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a TestClient for the explorer server."""
    return TestClient(app)


@pytest.fixture
def missing_dir_client(tmp_path):
    """Create a TestClient where the icons directory does not exist."""
    settings = Settings(storage={"icons_dir": tmp_path / "nonexistent"})
    return TestClient(create_app(settings))


def _make_icon(filename: str, size: int = 100, dimensions: str = "24×24") -> Icon:
    return Icon(
        filename=filename,
        size=size,
        last_modified=datetime(2024, 1, 1, tzinfo=timezone.utc),
        dimensions=dimensions,
    )


class FakeIconSource:
    """In-memory icon source that counts every listing and markup fetch."""

    def __init__(self, icons=None, markup=None, fail_listing=False):
        self.icons = list(icons or [])
        self.markup = dict(markup or {})
        self.fail_listing = fail_listing
        self.list_calls = 0
        self.fetch_calls: dict[str, int] = {}

    async def list_icons(self):
        self.list_calls += 1
        if self.fail_listing:
            raise IconDirectoryError()
        return list(self.icons)

    async def fetch_markup(self, icon):
        self.fetch_calls[icon.filename] = self.fetch_calls.get(icon.filename, 0) + 1
        if icon.filename not in self.markup:
            raise IconNotFoundError(detail=icon.filename)
        return self.markup[icon.filename]


@pytest.fixture
def make_icon():
    """Factory for Icon records with fixed timestamps."""
    return _make_icon


@pytest.fixture
def fake_source_factory():
    """Factory for FakeIconSource instances."""
    return FakeIconSource
