"""
Domain models for Razorpay webhook payloads.

Only the envelope is parsed eagerly so that unknown event types are accepted.
Event-specific payloads are validated by the handler that needs them.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RazorpayNotes(BaseModel):
    """Subscription notes (we store the Firebase uid here)."""

    model_config = ConfigDict(extra="allow")

    firebase_user_id: Optional[str] = None


class RazorpaySubscriptionEntity(BaseModel):
    """Razorpay subscription object as embedded in webhook payloads."""

    id: Optional[str] = None
    plan_id: Optional[str] = None
    status: Optional[str] = None
    paid_count: Optional[int] = None
    current_end: Optional[int] = None
    notes: RazorpayNotes = Field(default_factory=RazorpayNotes)

    @field_validator("notes", mode="before")
    @classmethod
    def empty_notes(cls, v):
        # Razorpay serializes an empty notes map as []
        if v is None or v == []:
            return {}
        return v


class RazorpaySubscriptionWrapper(BaseModel):
    entity: RazorpaySubscriptionEntity


class RazorpaySubscriptionPayload(BaseModel):
    """Payload of subscription.* events."""

    subscription: RazorpaySubscriptionWrapper


class RazorpayWebhookEvent(BaseModel):
    """Razorpay webhook envelope."""

    entity: Optional[str] = None
    account_id: Optional[str] = None
    event: Optional[str] = None
    contains: List[str] = Field(default_factory=list)
    payload: Dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[int] = None

    def subscription_payload(self) -> RazorpaySubscriptionPayload:
        """Parse the payload of a subscription.* event (raises ValidationError)."""
        return RazorpaySubscriptionPayload.model_validate(self.payload)
