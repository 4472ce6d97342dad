"""Tests for settings parsing."""

import pydantic
import pytest

from app.core.config import EnvironmentMode, Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("API_PORT", "ENV_MODE", "STATUS_UPDATE_CRON"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_port == 5000
        assert settings.status_update_cron == "* * * * *"
        assert settings.env_mode is EnvironmentMode.DEVELOPMENT
        assert settings.is_development

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ENV_MODE", "PRODUCTION")
        monkeypatch.setenv("STATUS_UPDATE_CRON", "*/5 * * * *")
        settings = Settings(_env_file=None)

        assert settings.is_production
        assert settings.status_update_cron == "*/5 * * * *"

    def test_rejects_unknown_env_mode(self):
        with pytest.raises(pydantic.ValidationError, match="Invalid env_mode"):
            Settings(_env_file=None, env_mode="qa")

    def test_rejects_bad_cron(self):
        with pytest.raises(pydantic.ValidationError, match="Invalid status_update_cron"):
            Settings(_env_file=None, status_update_cron="every minute")
