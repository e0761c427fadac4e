"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from butterfly_gallery.config import Settings, get_settings
from butterfly_gallery.log import configure_logging


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Test defaults and environment overrides."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        settings = Settings()
        assert settings.app_name == "butterfly-gallery"
        assert settings.gallery_urls == []
        assert settings.data_dir == Path("data")
        assert settings.cache_hours == 6
        assert settings.api_port == 8000

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUTTERFLY_GALLERY_DATA_DIR", "/tmp/sightings")
        monkeypatch.setenv("BUTTERFLY_GALLERY_CACHE_HOURS", "12")
        settings = Settings()
        assert settings.data_dir == Path("/tmp/sightings")
        assert settings.cache_hours == 12

    def test_gallery_urls_json_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(
            "BUTTERFLY_GALLERY_GALLERY_URLS",
            '["https://example.org/a.html", "https://example.org/b.html"]',
        )
        assert Settings().gallery_urls == [
            "https://example.org/a.html",
            "https://example.org/b.html",
        ]

    def test_rejects_bad_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUTTERFLY_GALLERY_APP_ENV", "staging")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_negative_cache_hours(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BUTTERFLY_GALLERY_CACHE_HOURS", "-1")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test loguru sink configuration."""

    @pytest.fixture(autouse=True)
    def restore_default_sink(self) -> Iterator[None]:
        yield
        logger.remove()
        logger.add(sys.stderr)

    def test_debug_messages_emitted(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("debug")
        logger.debug("rejected match")
        assert "rejected match" in capsys.readouterr().err

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging("WARNING")
        logger.info("progress")
        logger.warning("page not HTML")
        err = capsys.readouterr().err
        assert "progress" not in err
        assert "page not HTML" in err
