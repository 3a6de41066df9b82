from typing import Annotated, Optional
from fastapi import Depends, Header, status

from common.core.exceptions import ApiError
from common.core.otel_axiom_exporter import trace_span
from packages.auth.models.domain.authenticated_user import AuthenticatedUser
from packages.auth.providers.firebase_provider import FirebaseAuthProvider


def get_auth_provider() -> FirebaseAuthProvider:
    """Get FirebaseAuthProvider instance."""
    return FirebaseAuthProvider()


@trace_span
async def get_current_user(
    authorization: Annotated[Optional[str], Header()] = None,
    auth_provider: FirebaseAuthProvider = Depends(get_auth_provider),
) -> AuthenticatedUser:
    """Get current authenticated user from a Firebase ID token."""
    if not authorization or not authorization.startswith("Bearer "):
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED, "Authorization header missing or invalid"
        )

    token = authorization.split(" ", 1)[1]

    return await auth_provider.authenticate(token)
