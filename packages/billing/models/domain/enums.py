"""
Billing enums - strongly typed enumerations for subscription and webhook states.
"""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """
    Entitlement status stored on a creator application.

    A record without the field has never been subscribed (unset).
    Flow: unset/inactive -> active on every successful charge.
    """

    ACTIVE = "active"  # Paid access until subscriptionExpiresAt
    INACTIVE = "inactive"  # No paid access


class RazorpayWebhookType(str, Enum):
    """Razorpay webhook event types for subscriptions."""

    SUBSCRIPTION_AUTHENTICATED = "subscription.authenticated"
    SUBSCRIPTION_ACTIVATED = "subscription.activated"
    SUBSCRIPTION_CHARGED = "subscription.charged"
    SUBSCRIPTION_PENDING = "subscription.pending"
    SUBSCRIPTION_HALTED = "subscription.halted"
    SUBSCRIPTION_CANCELLED = "subscription.cancelled"
    SUBSCRIPTION_COMPLETED = "subscription.completed"
    SUBSCRIPTION_PAUSED = "subscription.paused"
    SUBSCRIPTION_RESUMED = "subscription.resumed"
    SUBSCRIPTION_UPDATED = "subscription.updated"
