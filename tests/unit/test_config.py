"""Unit tests for environment-driven settings."""

import pytest

from docsync.errors import ConfigError


class TestGetSettings:
    def test_numeric_overrides(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DOCSYNC_NUM_SUPPORTED_VERSIONS", "3")
        monkeypatch.setenv("DOCSYNC_HTTP_TIMEOUT", "12.5")
        cfg = fresh_settings()
        assert cfg.num_supported_versions == 3
        assert cfg.http_timeout == 12.5

    def test_cached(self, fresh_settings):
        assert fresh_settings() is fresh_settings()

    def test_non_numeric_versions(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DOCSYNC_NUM_SUPPORTED_VERSIONS", "four")
        with pytest.raises(ConfigError) as exc_info:
            fresh_settings()
        assert exc_info.value.code == "CONFIG_INVALID"

    def test_zero_versions(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("DOCSYNC_NUM_SUPPORTED_VERSIONS", "0")
        with pytest.raises(ConfigError, match="at least 1"):
            fresh_settings()
