"""
Pytest fixtures for Storefront Site API testing.

Environment variables are set at import time, before any storefront module
loads settings, so importing storefront.main never needs a real environment.
"""

import os

# ==================== CONFIGURATION ====================

TEST_ADMIN_SECRET = "test-admin-secret-for-unit-tests-32-chars-min"
TEST_ADMIN_PASSWORD = "correct-horse-battery-staple"

os.environ["STOREFRONT_ENVIRONMENT"] = "testing"
os.environ["STOREFRONT_ADMIN_SECRET"] = TEST_ADMIN_SECRET
os.environ["STOREFRONT_ADMIN_PASSWORD"] = TEST_ADMIN_PASSWORD
os.environ["STOREFRONT_RATE_LIMIT_BACKEND"] = "memory"
os.environ.pop("STOREFRONT_ADMIN_PASSWORD_HASH", None)
os.environ.pop("STOREFRONT_POS_API_KEY", None)
os.environ.pop("STOREFRONT_POS_CLIENT_ID", None)

import pytest  # noqa: E402

from storefront.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def admin_secret() -> str:
    return TEST_ADMIN_SECRET


@pytest.fixture
def admin_password() -> str:
    return TEST_ADMIN_PASSWORD
