"""
Interface for payment providers.

Abstracts payment processing away from specific platforms (Razorpay, Stripe, etc.)
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class PaymentProviderInterface(ABC):
    """Abstract interface for payment providers."""

    @abstractmethod
    async def create_subscription(self, user_id: str, plan_id: str) -> Dict[str, Any]:
        """
        Create a recurring subscription for a subscriber.

        Args:
            user_id: Subscriber identifier, echoed back in webhook notes
            plan_id: Provider plan identifier

        Returns:
            The provider's subscription object, unmodified

        Raises:
            PaymentProviderError: If the provider call fails
        """
        pass

    @abstractmethod
    def verify_webhook_signature(self, payload: bytes, signature: str) -> bool:
        """
        Check a webhook signature against the raw request body.

        Args:
            payload: Exact request body bytes
            signature: Signature header sent by the provider

        Returns:
            True if the signature matches, False otherwise
        """
        pass
