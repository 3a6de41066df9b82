"""Firebase Admin SDK app shared by Firestore and Auth."""

from typing import Optional

import firebase_admin
from firebase_admin import credentials

from common.core.config import get_settings
from common.core.otel_axiom_exporter import get_logger

logger = get_logger(__name__)

# Firebase Admin SDK initialization (uses Workload Identity automatically on GKE)
_firebase_app: Optional[firebase_admin.App] = None


def get_firebase_app() -> firebase_admin.App:
    """Get or initialize Firebase Admin app."""
    global _firebase_app
    if _firebase_app is None:
        settings = get_settings()

        # Load credentials explicitly if path is provided (local dev)
        # On GKE with Workload Identity, this will be None and ADC is used
        cred = None
        if settings.google_application_credentials:
            cred = credentials.Certificate(settings.google_application_credentials)

        options = {}
        if settings.firebase_project_id:
            options["projectId"] = settings.firebase_project_id

        _firebase_app = firebase_admin.initialize_app(credential=cred, options=options)
        logger.info(
            "Firebase Admin SDK initialized",
            extra={"project_id": settings.firebase_project_id},
        )
    return _firebase_app
