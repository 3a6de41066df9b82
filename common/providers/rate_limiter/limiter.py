"""Global rate limiter instance for SlowAPI."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from common.core.config import get_settings

# Use a redis:// storage URI in production so limits hold across API pods.
# Webhook and health routes are exempt; limits are applied per route.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],
    storage_uri=get_settings().rate_limit_storage_uri,
)
