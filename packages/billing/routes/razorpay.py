"""
Razorpay endpoints.

Public endpoints (no auth required): subscription creation is called from the
creator onboarding page, webhooks are signed by Razorpay.
"""

from fastapi import APIRouter, Depends, Request, status

from common.core.config import get_settings
from common.core.exceptions import ApiError, PaymentProviderError, ValidationError
from common.providers.rate_limiter.limiter import limiter
from packages.billing.dependencies import (
    get_entitlement_service,
    get_subscription_service,
    get_webhook_event_repository,
)
from packages.billing.models.schemas.billing import (
    CreateSubscriptionRequest,
    ErrorResponse,
    WebhookAckResponse,
)
from packages.billing.providers.payment.factory import get_payment_provider
from packages.billing.providers.payment.interface import PaymentProviderInterface
from packages.billing.repositories.webhook_event_repository import (
    WebhookEventRepository,
)
from packages.billing.services.entitlement_service import EntitlementService
from packages.billing.services.subscription_service import SubscriptionService
from packages.billing.webhooks.razorpay_webhook import handle_razorpay_webhook

router = APIRouter()

MISSING_IDS_MESSAGE = "User ID and Plan ID are required"


async def _parse_create_request(request: Request) -> CreateSubscriptionRequest:
    try:
        body = await request.json()
        return CreateSubscriptionRequest.model_validate(body)
    except ValueError:
        # Not JSON, not an object, or ids of the wrong type
        raise ApiError(status.HTTP_400_BAD_REQUEST, MISSING_IDS_MESSAGE)


@router.post(
    "/create-subscription",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@limiter.limit(lambda: get_settings().create_subscription_rate_limit)
async def create_subscription(
    request: Request,
    subscription_service: SubscriptionService = Depends(get_subscription_service),
):
    """
    Create a Razorpay subscription for a creator.

    Returns Razorpay's subscription object as-is; the client opens checkout
    with its id.
    """
    payload = await _parse_create_request(request)

    try:
        return await subscription_service.create_subscription(
            user_id=payload.user_id, plan_id=payload.plan_id
        )
    except ValidationError:
        raise ApiError(status.HTTP_400_BAD_REQUEST, MISSING_IDS_MESSAGE)
    except PaymentProviderError:
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to create subscription"
        )


@router.post(
    "/webhook",
    response_model=WebhookAckResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def razorpay_webhook(
    request: Request,
    payment: PaymentProviderInterface = Depends(get_payment_provider),
    entitlement_service: EntitlementService = Depends(get_entitlement_service),
    event_repo: WebhookEventRepository = Depends(get_webhook_event_repository),
) -> dict[str, str]:
    """
    Receive webhook events from Razorpay payment platform.

    No authentication required - webhook signature validated internally.
    """
    return await handle_razorpay_webhook(
        request, payment, entitlement_service, event_repo
    )
