"""
Factory for getting payment provider instance.
"""

from fastapi import Depends

from common.core.config import Settings, get_settings
from packages.billing.providers.payment.interface import PaymentProviderInterface
from packages.billing.providers.payment.razorpay_payment import RazorpayPaymentProvider


def get_payment_provider(
    settings: Settings = Depends(get_settings),
) -> PaymentProviderInterface:
    """
    Get payment provider instance based on configuration.

    Currently only Razorpay is supported.

    Returns:
        PaymentProviderInterface: Configured payment provider
    """
    return RazorpayPaymentProvider(settings)
