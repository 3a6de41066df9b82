from fastapi import APIRouter

from api.routes import health
from packages.billing.routes import entitlements, razorpay

api_router = APIRouter()

# Health check (no auth required)
api_router.include_router(health.router, prefix="/health", tags=["health"])

# Razorpay subscription checkout and webhooks (no auth - signature verified internally)
api_router.include_router(razorpay.router, prefix="/razorpay", tags=["razorpay"])

# Entitlement status (Firebase auth enforced by the route dependency)
api_router.include_router(entitlements.router, prefix="/billing", tags=["billing"])
