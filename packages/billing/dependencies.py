"""FastAPI dependency wiring for the billing package."""

from fastapi import Depends

from common.core.config import Settings, get_settings
from common.providers.firebase.firestore import get_firestore_client
from packages.billing.providers.payment.factory import get_payment_provider
from packages.billing.providers.payment.interface import PaymentProviderInterface
from packages.billing.repositories.entitlement_repository import EntitlementRepository
from packages.billing.repositories.webhook_event_repository import (
    WebhookEventRepository,
)
from packages.billing.services.entitlement_service import EntitlementService
from packages.billing.services.subscription_service import SubscriptionService


def get_entitlement_repository(
    settings: Settings = Depends(get_settings),
) -> EntitlementRepository:
    return EntitlementRepository(
        get_firestore_client(),
        collection_name=settings.entitlement_collection,
        user_field=settings.entitlement_user_field,
    )


def get_webhook_event_repository(
    settings: Settings = Depends(get_settings),
) -> WebhookEventRepository:
    return WebhookEventRepository(
        get_firestore_client(), collection_name=settings.webhook_event_collection
    )


def get_subscription_service(
    payment: PaymentProviderInterface = Depends(get_payment_provider),
) -> SubscriptionService:
    return SubscriptionService(payment)


def get_entitlement_service(
    entitlement_repo: EntitlementRepository = Depends(get_entitlement_repository),
) -> EntitlementService:
    return EntitlementService(entitlement_repo)
