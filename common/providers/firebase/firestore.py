from typing import Optional

from firebase_admin import firestore_async
from google.cloud.firestore import AsyncClient

from common.core.otel_axiom_exporter import get_logger
from common.providers.firebase.app import get_firebase_app

logger = get_logger(__name__)

# Global instance
_firestore_client: Optional[AsyncClient] = None


def get_firestore_client() -> AsyncClient:
    """
    Get the shared async Firestore client.

    Returns:
        AsyncClient: Firestore client bound to the Firebase Admin app
    """
    global _firestore_client

    if _firestore_client is None:
        _firestore_client = firestore_async.client(app=get_firebase_app())
        logger.info("Initialized Firestore async client")

    return _firestore_client
