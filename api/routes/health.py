from fastapi import APIRouter, Depends, Request

from common.core.config import Settings, get_settings
from common.core.otel_axiom_exporter import get_logger
from common.providers.firebase.firestore import get_firestore_client
from common.providers.rate_limiter.limiter import limiter

logger = get_logger(__name__)

router = APIRouter()


@router.get("/")
async def health_check(request: Request):
    # No rate limiting or logging - k8s probes hit this every 5-10s
    return {"status": "healthy", "service": "creator-billing-api"}


@router.get("/firestore")
@limiter.limit("100/minute")
async def firestore_check(request: Request, settings: Settings = Depends(get_settings)):
    try:
        client = get_firestore_client()
        await client.collection(settings.entitlement_collection).limit(1).get()
        return {"status": "healthy", "firestore": "connected"}
    except Exception as e:
        logger.error(f"Firestore health check failed: {e}")
        return {"status": "unhealthy", "firestore": "disconnected"}
