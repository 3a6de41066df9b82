"""
Service for creator entitlements.
"""

from datetime import datetime, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

from common.core.exceptions import ConflictError, NotFoundError
from common.core.otel_axiom_exporter import trace_span, get_logger
from packages.billing.models.domain.entitlement import (
    Entitlement,
    EntitlementUpdateModel,
)
from packages.billing.models.domain.enums import SubscriptionStatus
from packages.billing.repositories.entitlement_repository import EntitlementRepository

logger = get_logger(__name__)

# One charge buys one billing period
BILLING_PERIOD = relativedelta(months=1)


def next_expiry(now: datetime) -> datetime:
    """Expiry after a charge at ``now`` (day clamped to the end of short months)."""
    return now + BILLING_PERIOD


class EntitlementService:
    """Service for reading and extending entitlements."""

    def __init__(self, entitlement_repo: EntitlementRepository):
        self.entitlement_repo = entitlement_repo

    @trace_span
    async def extend_for_charge(
        self, user_id: str, now: Optional[datetime] = None
    ) -> Optional[Entitlement]:
        """
        Activate the user's entitlement for one more billing period.

        Only a unique match is updated. No match or several matches leave
        every record untouched.

        Returns:
            The updated entitlement, or None if nothing was updated
        """
        matches = await self.entitlement_repo.find_by_user_id(user_id)

        if not matches:
            logger.info(
                f"No creator application found for user {user_id}",
                extra={"user_id": user_id},
            )
            return None

        if len(matches) > 1:
            logger.warning(
                f"Multiple creator applications found for user {user_id}, skipping",
                extra={
                    "user_id": user_id,
                    "document_ids": [match.id for match in matches],
                },
            )
            return None

        entitlement = matches[0]
        now = now or datetime.now(timezone.utc)
        update_data = EntitlementUpdateModel(
            subscription_status=SubscriptionStatus.ACTIVE,
            subscription_expires_at=next_expiry(now),
        )
        await self.entitlement_repo.update_subscription(entitlement.id, update_data)

        logger.info(
            f"Extended subscription for user {user_id}",
            extra={
                "user_id": user_id,
                "document_id": entitlement.id,
                "old_status": entitlement.subscription_status,
                "expires_at": update_data.subscription_expires_at.isoformat(),
            },
        )

        return entitlement.model_copy(
            update={
                "subscription_status": SubscriptionStatus.ACTIVE,
                "subscription_expires_at": update_data.subscription_expires_at,
            }
        )

    @trace_span
    async def get_for_user(self, user_id: str) -> Entitlement:
        """Get the unique entitlement of a user."""
        matches = await self.entitlement_repo.find_by_user_id(user_id)
        if not matches:
            raise NotFoundError(f"No creator application found for user {user_id}")
        if len(matches) > 1:
            raise ConflictError(
                f"Multiple creator applications found for user {user_id}"
            )
        return matches[0]
