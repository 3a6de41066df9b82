"""Domain models for billing."""

from packages.billing.models.domain.enums import (
    SubscriptionStatus,
    RazorpayWebhookType,
)
from packages.billing.models.domain.entitlement import (
    Entitlement,
    EntitlementUpdateModel,
)
from packages.billing.models.domain.subscription import SubscriptionCreateModel
from packages.billing.models.domain.razorpay_webhooks import (
    RazorpayNotes,
    RazorpaySubscriptionEntity,
    RazorpaySubscriptionPayload,
    RazorpayWebhookEvent,
)

__all__ = [
    # Enums
    "SubscriptionStatus",
    "RazorpayWebhookType",
    # Entitlements
    "Entitlement",
    "EntitlementUpdateModel",
    # Subscriptions
    "SubscriptionCreateModel",
    # Webhooks
    "RazorpayNotes",
    "RazorpaySubscriptionEntity",
    "RazorpaySubscriptionPayload",
    "RazorpayWebhookEvent",
]
