# Shared pytest configuration and fixtures for all test types
import os

from tests.fixtures import (
    TEST_RAZORPAY_KEY_ID,
    TEST_RAZORPAY_KEY_SECRET,
    TEST_WEBHOOK_SECRET,
)

# Settings are read once at import time, so the environment must be ready first
os.environ["ENVIRONMENT"] = "local"
os.environ["RAZORPAY_KEY_ID"] = TEST_RAZORPAY_KEY_ID
os.environ["RAZORPAY_KEY_SECRET"] = TEST_RAZORPAY_KEY_SECRET
os.environ["RAZORPAY_WEBHOOK_SECRET"] = TEST_WEBHOOK_SECRET
os.environ["RATE_LIMIT_STORAGE_URI"] = "memory://"
os.environ["CREATE_SUBSCRIPTION_RATE_LIMIT"] = "1000/minute"
os.environ.pop("AXIOM_TOKEN", None)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from api.main import app  # noqa: E402
from common.core.config import get_settings  # noqa: E402
from packages.auth.dependencies import get_current_user  # noqa: E402
from packages.auth.models.domain.authenticated_user import (  # noqa: E402
    AuthenticatedUser,
)
from packages.billing.dependencies import (  # noqa: E402
    get_entitlement_repository,
    get_webhook_event_repository,
)
from packages.billing.providers.payment.factory import (  # noqa: E402
    get_payment_provider,
)
from packages.billing.providers.payment.razorpay_payment import (  # noqa: E402
    RazorpayPaymentProvider,
)
from tests.fixtures import (  # noqa: E402
    SAMPLE_SUBSCRIPTION,
    FakeEntitlementRepository,
    FakeWebhookEventRepository,
)


@pytest.fixture
def test_settings():
    """Settings built from the test environment."""
    return get_settings()


@pytest.fixture
def razorpay_client():
    """Mock Razorpay SDK client."""
    client = MagicMock()
    client.subscription.create.return_value = dict(SAMPLE_SUBSCRIPTION)
    return client


@pytest.fixture
def payment_provider(test_settings, razorpay_client):
    """Razorpay provider with a mocked SDK client and the real signature check."""
    return RazorpayPaymentProvider(test_settings, client=razorpay_client)


@pytest.fixture
def entitlement_repo():
    """In-memory creator applications."""
    return FakeEntitlementRepository()


@pytest.fixture
def event_repo():
    """In-memory processed webhook events."""
    return FakeWebhookEventRepository()


@pytest.fixture
def test_user():
    """Signed-in creator."""
    return AuthenticatedUser(user_id="U1", email="creator@example.com")


@pytest_asyncio.fixture(scope="function")
async def client(payment_provider, entitlement_repo, event_repo, test_user):
    """Create a test client."""
    app.dependency_overrides[get_payment_provider] = lambda: payment_provider
    app.dependency_overrides[get_entitlement_repository] = lambda: entitlement_repo
    app.dependency_overrides[get_webhook_event_repository] = lambda: event_repo
    app.dependency_overrides[get_current_user] = lambda: test_user

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def anonymous_client(payment_provider, entitlement_repo, event_repo):
    """Test client without an authenticated user override."""
    app.dependency_overrides[get_payment_provider] = lambda: payment_provider
    app.dependency_overrides[get_entitlement_repository] = lambda: entitlement_repo
    app.dependency_overrides[get_webhook_event_repository] = lambda: event_repo

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
