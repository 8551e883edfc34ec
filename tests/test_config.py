"""Tests for settings loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from viewcache.config import load_settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("VIEWCACHE_BASE_URL", "VIEWCACHE_API_TOKEN", "VIEWCACHE_PAGE_SIZE", "VIEWCACHE_CACHE_DIR"):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()

        assert settings.base_url is None
        assert settings.api_token is None
        assert settings.page_size == 10
        assert settings.cache_dir == Path.home() / ".viewcache" / "cache"

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VIEWCACHE_BASE_URL", "https://api.example.com")
        monkeypatch.setenv("VIEWCACHE_API_TOKEN", "secret")
        monkeypatch.setenv("VIEWCACHE_PAGE_SIZE", "25")
        monkeypatch.setenv("VIEWCACHE_CACHE_DIR", str(tmp_path / "cache"))

        settings = load_settings()

        assert settings.base_url == "https://api.example.com"
        assert settings.api_token.get_secret_value() == "secret"
        assert "secret" not in repr(settings)
        assert settings.page_size == 25
        assert settings.cache_dir == tmp_path / "cache"

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("VIEWCACHE_BASE_URL", raising=False)
        (tmp_path / ".env").write_text("VIEWCACHE_BASE_URL=https://env.example.com\n", encoding="utf-8")

        assert load_settings().base_url == "https://env.example.com"

    def test_rejects_non_positive_page_size(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VIEWCACHE_PAGE_SIZE", "0")

        with pytest.raises(ValidationError):
            load_settings()
