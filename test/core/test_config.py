"""Tests for settings and logging setup."""

import logging
from pathlib import Path

from icon_explorer.core.config import Settings
from icon_explorer.core.logging import configure_logging


def test_default_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings().port == 3000


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8123")
    assert Settings().port == 8123


def test_nested_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE__ICONS_DIR", str(tmp_path))
    monkeypatch.setenv("UI__COPY_FEEDBACK_MS", "900")
    settings = Settings()
    assert settings.icons_dir == tmp_path
    assert settings.copy_feedback_ms == 900


def test_relative_icons_dir_resolves_against_cwd(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings(storage={"icons_dir": Path("public/icons")})
    assert settings.icons_dir == (tmp_path / "public" / "icons").resolve()


def test_packaged_web_directories_exist():
    settings = Settings()
    assert (settings.template_dir / "index.html").is_file()
    assert (settings.static_dir / "app.js").is_file()


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    before = len(root.handlers)
    configure_logging("DEBUG")
    configure_logging("WARNING")
    assert len(root.handlers) <= before + 1
    assert root.level == logging.WARNING


def test_remote_url_from_environment(monkeypatch):
    monkeypatch.setenv("SOURCE__REMOTE_URL", "http://icons.example/")
    assert Settings().remote_url == "http://icons.example"


def test_local_source_by_default(monkeypatch):
    monkeypatch.delenv("SOURCE__REMOTE_URL", raising=False)
    settings = Settings()
    assert settings.remote_url is None
    assert settings.initial_load_wait == 2.0
