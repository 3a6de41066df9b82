from enum import Enum


class Environment(str, Enum):
    """Environment profiles."""

    LOCAL = "local"
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


# Razorpay request headers
RAZORPAY_SIGNATURE_HEADER = "x-razorpay-signature"
RAZORPAY_EVENT_ID_HEADER = "x-razorpay-event-id"
