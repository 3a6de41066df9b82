"""
Entitlement API routes.

Protected endpoints for the signed-in creator's subscription state.
"""

from fastapi import APIRouter, Depends, status

from common.core.exceptions import ApiError, ConflictError, NotFoundError
from packages.auth.dependencies import get_current_user
from packages.auth.models.domain.authenticated_user import AuthenticatedUser
from packages.billing.dependencies import get_entitlement_service
from packages.billing.models.schemas.billing import (
    EntitlementStatusResponse,
    ErrorResponse,
)
from packages.billing.services.entitlement_service import EntitlementService

router = APIRouter()


@router.get(
    "/entitlement",
    response_model=EntitlementStatusResponse,
    response_model_by_alias=True,
    responses={
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def get_entitlement(
    current_user: AuthenticatedUser = Depends(get_current_user),
    entitlement_service: EntitlementService = Depends(get_entitlement_service),
):
    """
    Get subscription status for the signed-in creator.

    isSubscribed is true only while the status is active and the expiry lies
    in the future.
    """
    try:
        entitlement = await entitlement_service.get_for_user(current_user.user_id)
    except NotFoundError:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Creator application not found")
    except ConflictError:
        raise ApiError(
            status.HTTP_409_CONFLICT, "Multiple creator applications found"
        )

    return EntitlementStatusResponse(
        user_id=entitlement.user_id,
        subscription_status=entitlement.subscription_status,
        subscription_expires_at=entitlement.subscription_expires_at,
        is_subscribed=entitlement.is_subscribed(),
    )
