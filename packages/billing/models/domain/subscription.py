"""
Domain models for Razorpay subscriptions.
"""

from typing import Dict
from pydantic import BaseModel, Field


class SubscriptionCreateModel(BaseModel):
    """Request body sent to Razorpay's subscription create API."""

    plan_id: str
    total_count: int = Field(..., ge=1)
    quantity: int = 1
    # Carries the Firebase uid back to us in webhook payloads
    notes: Dict[str, str] = Field(default_factory=dict)
