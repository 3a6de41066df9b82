"""
Service for creating Razorpay subscriptions.
"""

from typing import Any, Dict, Optional

from common.core.exceptions import ValidationError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.billing.providers.payment.interface import PaymentProviderInterface

logger = get_logger(__name__)


class SubscriptionService:
    """Service for subscription creation."""

    def __init__(self, payment: PaymentProviderInterface):
        self.payment = payment

    @trace_span
    async def create_subscription(
        self, user_id: Optional[str], plan_id: Optional[str]
    ) -> Dict[str, Any]:
        """
        Create a recurring subscription for a creator.

        The provider is not contacted unless both identifiers are present.
        """
        if not user_id or not plan_id:
            raise ValidationError("User ID and Plan ID are required")

        logger.info(
            f"Creating subscription for user {user_id}",
            extra={"user_id": user_id, "plan_id": plan_id},
        )
        return await self.payment.create_subscription(user_id=user_id, plan_id=plan_id)
