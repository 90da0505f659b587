"""Test configuration and fixtures."""

import os

# Test defaults; must be set before any Settings() is created
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-please-ignore")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

import logfire  # noqa: E402
import pytest  # noqa: E402

from linkshare.config import AuthSettings, ListingSettings  # noqa: E402

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret and the cheapest bcrypt cost."""
    return AuthSettings(jwt_secret="unit-test-secret", bcrypt_rounds=4)


@pytest.fixture
def listing_settings() -> ListingSettings:
    """Default listing limits (take 1..50, default 30)."""
    return ListingSettings()
