from functools import lru_cache
from typing import List, Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.core.constants import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore", frozen=True
    )

    # Environment Profile
    environment: Environment = Environment.LOCAL

    # API Settings
    app_name: str = "creator-billing-api"
    api_version: str = "1.0.0"

    # Razorpay (payments)
    razorpay_key_id: str
    razorpay_key_secret: SecretStr
    razorpay_webhook_secret: SecretStr
    # Number of billing cycles requested for every new subscription
    subscription_total_count: int = 120

    # Firebase (Firestore + Auth, uses Workload Identity when no credentials file)
    firebase_project_id: Optional[str] = None
    google_application_credentials: Optional[str] = None

    # Firestore collections
    entitlement_collection: str = "creatorApplications"
    entitlement_user_field: str = "userId"
    webhook_event_collection: str = "razorpayWebhookEvents"

    # Rate limiting (redis://... in production, memory:// locally)
    rate_limit_storage_uri: str = "memory://"
    create_subscription_rate_limit: str = "10/minute"

    # OpenTelemetry
    otel_service_name: str = "creator-billing-api"

    # Axiom (exporting is skipped when no token is configured)
    axiom_token: Optional[SecretStr] = None
    axiom_dataset: Optional[str] = None

    @property
    def cors_allowed_origins(self) -> List[str]:
        """Auto-select CORS origins based on environment."""
        if self.environment == Environment.LOCAL:
            return [
                "http://localhost:3000",
                "http://localhost:3001",
            ]
        return [
            "https://spinii.in",
            "https://www.spinii.in",
        ]


@lru_cache
def get_settings() -> Settings:
    """Build the process-wide settings once and reuse them."""
    return Settings()
