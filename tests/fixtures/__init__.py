# Test data and fixtures

import hashlib
import hmac
import json
from typing import Any, Dict, List, Optional

from packages.billing.models.domain.entitlement import (
    Entitlement,
    EntitlementUpdateModel,
)

TEST_RAZORPAY_KEY_ID = "rzp_test_key"
TEST_RAZORPAY_KEY_SECRET = "test_key_secret"
TEST_WEBHOOK_SECRET = "test_webhook_secret"

SAMPLE_PLAN_ID = "plan_Qo6eS0ArfWDhNg"

# Razorpay subscription object as returned by the create API
SAMPLE_SUBSCRIPTION = {
    "id": "sub_00000000000001",
    "entity": "subscription",
    "plan_id": SAMPLE_PLAN_ID,
    "status": "created",
    "quantity": 1,
    "total_count": 120,
    "paid_count": 0,
    "notes": {"firebase_user_id": "U1"},
    "short_url": "https://rzp.io/i/z3b1R61A9",
}


def charged_event(user_id: Optional[str] = "U1", notes: Any = None) -> Dict[str, Any]:
    """subscription.charged webhook body."""
    if notes is None:
        notes = {"firebase_user_id": user_id} if user_id else {}
    return {
        "entity": "event",
        "account_id": "acc_BFQ7uQEaa7j2z7",
        "event": "subscription.charged",
        "contains": ["subscription", "payment"],
        "payload": {
            "subscription": {
                "entity": {
                    "id": "sub_00000000000001",
                    "plan_id": SAMPLE_PLAN_ID,
                    "status": "active",
                    "paid_count": 1,
                    "notes": notes,
                }
            },
            "payment": {"entity": {"id": "pay_00000000000001", "amount": 24900}},
        },
        "created_at": 1567674606,
    }


def encode_body(body: Dict[str, Any]) -> bytes:
    return json.dumps(body).encode("utf-8")


def sign_payload(payload: bytes, secret: str = TEST_WEBHOOK_SECRET) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


class FakeEntitlementRepository:
    """In-memory stand-in for EntitlementRepository keyed by document id."""

    def __init__(self):
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.updates: List[tuple] = []
        self.fail_with: Optional[Exception] = None

    def add(self, document_id: str, **fields) -> None:
        self.documents[document_id] = dict(fields)

    async def find_by_user_id(self, user_id: str, limit: int = 2) -> List[Entitlement]:
        if self.fail_with:
            raise self.fail_with
        matches = [
            Entitlement.model_validate({**data, "userId": user_id, "id": doc_id})
            for doc_id, data in self.documents.items()
            if data.get("userId") == user_id
        ]
        return matches[:limit]

    async def update_subscription(
        self, document_id: str, update_data: EntitlementUpdateModel
    ) -> None:
        fields = update_data.model_dump(by_alias=True)
        self.documents[document_id].update(fields)
        self.updates.append((document_id, fields))


class FakeWebhookEventRepository:
    """In-memory stand-in for WebhookEventRepository."""

    def __init__(self):
        self.events: Dict[str, Optional[str]] = {}
        self.fail_with: Optional[Exception] = None

    async def exists(self, event_id: str) -> bool:
        return event_id in self.events

    async def record(self, event_id: str, event_type: Optional[str]) -> bool:
        if self.fail_with:
            raise self.fail_with
        if event_id in self.events:
            return False
        self.events[event_id] = event_type
        return True
