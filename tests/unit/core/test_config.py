"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from common.core.config import Settings
from common.core.constants import Environment


class TestSettings:
    """Test that settings are read from the environment."""

    def test_defaults(self, monkeypatch):
        """Test defaults when only the Razorpay credentials are set."""
        monkeypatch.delenv("SUBSCRIPTION_TOTAL_COUNT", raising=False)
        monkeypatch.delenv("ENTITLEMENT_COLLECTION", raising=False)
        monkeypatch.delenv("WEBHOOK_EVENT_COLLECTION", raising=False)

        settings = Settings(_env_file=None)

        assert settings.subscription_total_count == 120
        assert settings.entitlement_collection == "creatorApplications"
        assert settings.entitlement_user_field == "userId"
        assert settings.webhook_event_collection == "razorpayWebhookEvents"
        assert settings.axiom_token is None

    def test_secrets_are_masked(self, monkeypatch):
        """Test that secrets never show up in the settings repr."""
        monkeypatch.setenv("RAZORPAY_KEY_SECRET", "super-secret-key")
        monkeypatch.setenv("RAZORPAY_WEBHOOK_SECRET", "super-secret-hook")

        settings = Settings(_env_file=None)

        assert "super-secret" not in repr(settings)
        assert settings.razorpay_key_secret.get_secret_value() == "super-secret-key"
        assert (
            settings.razorpay_webhook_secret.get_secret_value() == "super-secret-hook"
        )

    def test_missing_razorpay_credentials(self, monkeypatch):
        """Test that the service refuses to start without Razorpay credentials."""
        monkeypatch.delenv("RAZORPAY_KEY_ID", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("SUBSCRIPTION_TOTAL_COUNT", "12")
        monkeypatch.setenv("ENTITLEMENT_COLLECTION", "applications")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.subscription_total_count == 12
        assert settings.entitlement_collection == "applications"
        assert settings.environment == Environment.PRODUCTION

    def test_cors_origins_by_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "local")
        assert "http://localhost:3000" in Settings(_env_file=None).cors_allowed_origins

        monkeypatch.setenv("ENVIRONMENT", "production")
        assert all(
            origin.startswith("https://")
            for origin in Settings(_env_file=None).cors_allowed_origins
        )

    def test_frozen(self):
        settings = Settings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.subscription_total_count = 1

    def test_unknown_settings_ignored(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings(_env_file=None)

        assert "debug" not in Settings.model_fields
        assert not hasattr(settings, "debug")
