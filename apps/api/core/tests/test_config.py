"""Tests for core config module."""

import pytest

from packages.notification_engine import SourceStyle


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_SECRET", "SOURCE_STYLE", "SUPABASE_URL", "SUPABASE_SERVICE_KEY", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Test Pydantic Settings loads env vars correctly."""

    def test_settings_defaults(self):
        """Settings should have sensible defaults."""
        from apps.api.core.config import Settings
        settings = Settings(_env_file=None)
        assert settings.LOG_LEVEL == "INFO"
        assert settings.ENVIRONMENT == "development"
        assert settings.SOURCE_STYLE is SourceStyle.BANK_SMS
        assert settings.STORE_ORIGINAL_MESSAGE is True
        assert settings.EXPENSES_TABLE == "expenses"
        assert settings.supabase_enabled is False

    def test_settings_loads_source_style(self, monkeypatch):
        monkeypatch.setenv("SOURCE_STYLE", "wallet_notification")

        from apps.api.core.config import Settings
        settings = Settings(_env_file=None)
        assert settings.SOURCE_STYLE is SourceStyle.WALLET_NOTIFICATION

    def test_settings_rejects_unknown_style(self, monkeypatch):
        monkeypatch.setenv("SOURCE_STYLE", "email")

        from apps.api.core.config import Settings
        with pytest.raises(Exception):
            Settings(_env_file=None)

    def test_supabase_needs_url_and_key(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")

        from apps.api.core.config import Settings
        assert Settings(_env_file=None).supabase_enabled is False

        monkeypatch.setenv("SUPABASE_SERVICE_KEY", "service-key")
        assert Settings(_env_file=None).supabase_enabled is True


class TestSecretPolicy:
    def test_development_without_secret_is_open(self):
        from apps.api.core.config import Settings
        assert Settings(_env_file=None).secret_required is False

    def test_configured_secret_is_always_required(self, monkeypatch):
        monkeypatch.setenv("API_SECRET", "s3cret")

        from apps.api.core.config import Settings
        assert Settings(_env_file=None).secret_required is True

    def test_production_requires_secret_even_when_unset(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")

        from apps.api.core.config import Settings
        settings = Settings(_env_file=None)
        assert settings.secret_required is True
        assert settings.is_production is True
