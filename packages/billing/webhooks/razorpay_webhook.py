"""
Razorpay webhook handler for subscription events.

Handles events from Razorpay payment platform:
- subscription.charged: extend the creator's entitlement by one month

Every other event type is acknowledged and ignored so Razorpay does not retry it.
"""

from typing import Optional

from fastapi import Request, status

from common.core.constants import RAZORPAY_EVENT_ID_HEADER, RAZORPAY_SIGNATURE_HEADER
from common.core.exceptions import ApiError
from common.core.otel_axiom_exporter import get_logger, log_span_event
from packages.billing.models.domain.enums import RazorpayWebhookType
from packages.billing.models.domain.razorpay_webhooks import RazorpayWebhookEvent
from packages.billing.providers.payment.interface import PaymentProviderInterface
from packages.billing.repositories.webhook_event_repository import (
    WebhookEventRepository,
)
from packages.billing.services.entitlement_service import EntitlementService

logger = get_logger(__name__)


async def handle_razorpay_webhook(
    request: Request,
    payment: PaymentProviderInterface,
    entitlement_service: EntitlementService,
    event_repo: WebhookEventRepository,
) -> dict[str, str]:
    """
    Handle incoming webhook from Razorpay.

    Validates webhook signature and routes to appropriate handler.
    """
    # Get raw body for signature verification
    payload_bytes = await request.body()
    signature = request.headers.get(RAZORPAY_SIGNATURE_HEADER)

    if not signature:
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Signature missing")

    if not payment.verify_webhook_signature(payload_bytes, signature):
        logger.error("Razorpay webhook signature verification failed")
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Invalid signature")

    event_id = request.headers.get(RAZORPAY_EVENT_ID_HEADER)

    try:
        event = RazorpayWebhookEvent.model_validate_json(payload_bytes)

        logger.info(
            f"Received Razorpay webhook: {event.event}",
            extra={"event_id": event_id, "event_type": event.event},
        )

        if event_id and await event_repo.exists(event_id):
            logger.info(
                f"Skipping already processed Razorpay event {event_id}",
                extra={"event_id": event_id, "event_type": event.event},
            )
            return {"status": "ok"}

        # Route to appropriate handler
        if event.event == RazorpayWebhookType.SUBSCRIPTION_CHARGED:
            await _handle_subscription_charged(event, entitlement_service)
        else:
            logger.info(f"Unhandled Razorpay webhook type: {event.event}")

        # Only successfully processed events are skipped on redelivery
        if event_id:
            await event_repo.record(event_id, event.event)

        return {"status": "ok"}

    except Exception as e:
        logger.error(
            f"Failed to process Razorpay webhook: {str(e)}",
            extra={"event_id": event_id, "error": str(e)},
        )
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Webhook processing error"
        ) from e


async def _handle_subscription_charged(
    event: RazorpayWebhookEvent, entitlement_service: EntitlementService
) -> None:
    """Handle subscription.charged event (one successful billing cycle)."""
    subscription = event.subscription_payload().subscription.entity
    user_id: Optional[str] = subscription.notes.firebase_user_id

    if not user_id:
        logger.warning(
            "Missing firebase_user_id in subscription notes",
            extra={"subscription_id": subscription.id},
        )
        return

    log_span_event(
        f"Razorpay subscription charged: {subscription.id}",
        {
            "subscription_id": str(subscription.id),
            "user_id": user_id,
            "paid_count": str(subscription.paid_count),
        },
    )

    await entitlement_service.extend_for_charge(user_id)

