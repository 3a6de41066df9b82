"""Firebase Auth provider implementation."""

from typing import Optional

import firebase_admin
from firebase_admin import auth as firebase_auth
from fastapi import status

from common.core.exceptions import ApiError
from common.core.otel_axiom_exporter import trace_span, get_logger
from common.providers.firebase.app import get_firebase_app
from packages.auth.models.domain.authenticated_user import AuthenticatedUser

logger = get_logger(__name__)


class FirebaseAuthProvider:
    """Verifies Firebase ID tokens issued to signed-in users."""

    def __init__(self, app: Optional[firebase_admin.App] = None):
        """Initialize Firebase provider."""
        self.app = app or get_firebase_app()

    @trace_span
    async def authenticate(self, token: str) -> AuthenticatedUser:
        """Verify an ID token and return the user it was issued to."""
        try:
            decoded_token = firebase_auth.verify_id_token(token, app=self.app)
        except firebase_auth.ExpiredIdTokenError:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Firebase token has expired")
        except firebase_auth.InvalidIdTokenError:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Invalid Firebase token")
        except Exception as e:
            logger.warning(f"Firebase token validation failed: {e}")
            raise ApiError(
                status.HTTP_401_UNAUTHORIZED, "Failed to validate Firebase token"
            )

        uid = decoded_token.get("uid")
        if not uid:
            raise ApiError(status.HTTP_401_UNAUTHORIZED, "Token missing 'uid' claim")

        return AuthenticatedUser(user_id=uid, email=decoded_token.get("email"))
