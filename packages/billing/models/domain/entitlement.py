"""
Domain models for creator entitlements.

The entitlement fields live on the creator application document in Firestore,
which is created by the creator onboarding flow. This service only reads and
updates them, so stored values it does not recognise are read as-is or as
unset instead of failing the whole document.
"""

from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from packages.billing.models.domain.enums import SubscriptionStatus


class Entitlement(BaseModel):
    """
    Subscription state of one creator application.

    Field names map to the camelCase keys of the Firestore document.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str  # Firestore document id
    user_id: str

    # None when the application has never been subscribed. Kept as the raw
    # stored string since other flows may write statuses we never set.
    subscription_status: Optional[str] = None
    subscription_expires_at: Optional[datetime] = None

    # Razorpay subscription id recorded at checkout
    subscription_id: Optional[str] = None

    @field_validator("subscription_expires_at", mode="wrap")
    @classmethod
    def unreadable_expiry(cls, v, handler):
        try:
            return handler(v)
        except ValidationError:
            return None

    @field_validator("subscription_status", "subscription_id", mode="before")
    @classmethod
    def non_string_as_unset(cls, v):
        return v if isinstance(v, str) else None

    def is_subscribed(self, now: Optional[datetime] = None) -> bool:
        """Active status and an expiry still in the future."""
        if self.subscription_status != SubscriptionStatus.ACTIVE:
            return False
        if self.subscription_expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        expires_at = self.subscription_expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return expires_at > now


class EntitlementUpdateModel(BaseModel):
    """Fields written to the application document on a successful charge."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True
    )

    subscription_status: SubscriptionStatus
    subscription_expires_at: datetime
