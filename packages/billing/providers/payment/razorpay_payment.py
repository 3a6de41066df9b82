"""
Razorpay implementation of payment provider.
"""

import asyncio
import hashlib
import hmac
from typing import Any, Dict, Optional

import razorpay

from common.core.config import Settings
from common.core.exceptions import PaymentProviderError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.billing.models.domain.subscription import SubscriptionCreateModel
from packages.billing.providers.payment.interface import PaymentProviderInterface

logger = get_logger(__name__)


class RazorpayPaymentProvider(PaymentProviderInterface):
    """Razorpay-based payment implementation."""

    def __init__(self, settings: Settings, client: Optional[razorpay.Client] = None):
        """Initialize Razorpay with API credentials."""
        self.client = client or razorpay.Client(
            auth=(
                settings.razorpay_key_id,
                settings.razorpay_key_secret.get_secret_value(),
            )
        )
        self._webhook_secret = settings.razorpay_webhook_secret.get_secret_value().encode(
            "utf-8"
        )
        self.total_count = settings.subscription_total_count

    @trace_span
    async def create_subscription(self, user_id: str, plan_id: str) -> Dict[str, Any]:
        """Create a Razorpay subscription tagged with the Firebase uid."""
        request = SubscriptionCreateModel(
            plan_id=plan_id,
            total_count=self.total_count,
            quantity=1,
            notes={"firebase_user_id": user_id},
        )

        try:
            # The SDK is synchronous (requests based)
            subscription = await asyncio.to_thread(
                self.client.subscription.create, data=request.model_dump()
            )
        except Exception as e:
            logger.error(
                f"Failed to create Razorpay subscription: {str(e)}",
                extra={"user_id": user_id, "plan_id": plan_id, "error": str(e)},
            )
            raise PaymentProviderError("Failed to create subscription") from e

        logger.info(
            "Created Razorpay subscription",
            extra={
                "user_id": user_id,
                "plan_id": plan_id,
                "subscription_id": subscription.get("id"),
            },
        )
        return subscription

    def verify_webhook_signature(self, payload: bytes, signature: str) -> bool:
        """Hex HMAC-SHA256 of the raw body, compared in constant time."""
        expected = hmac.new(self._webhook_secret, payload, hashlib.sha256).hexdigest()
        return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))
