"""
API schemas for billing operations.

Request and response models for billing endpoints.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Subscription Schemas
# ============================================================================


class CreateSubscriptionRequest(BaseModel):
    """Request to create a Razorpay subscription for a creator."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: Optional[str] = Field(default=None, description="Firebase uid")
    plan_id: Optional[str] = Field(default=None, description="Razorpay plan id")


# ============================================================================
# Entitlement Schemas
# ============================================================================


class EntitlementStatusResponse(BaseModel):
    """Current entitlement of the signed-in creator."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    subscription_status: Optional[str] = None
    subscription_expires_at: Optional[datetime] = None
    is_subscribed: bool = Field(..., description="Whether creator features are unlocked")


# ============================================================================
# Generic Responses
# ============================================================================


class WebhookAckResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    error: str
