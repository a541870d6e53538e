"""Tests for server settings."""

from infogenius.configs import Settings
from infogenius.configs.base import BaseSettings


class TestServerSettings:
    """Test environment-driven server options."""

    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "HOST", "PORT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = BaseSettings(_env_file=None)

        assert (settings.host, settings.port, settings.log_level) == ("0.0.0.0", 8000, "INFO")
        assert settings.reload is True

    def test_production_disables_reload(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("PORT", "9000")

        settings = Settings(_env_file=None)

        assert settings.reload is False
        assert settings.port == 9000
