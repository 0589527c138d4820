"""Root test fixtures shared across all test types.

Environment defaults are set before any application import: settings,
the password hasher and the rate limiter are all built at import time.
"""

import os

# Testing disables both rate limiting layers
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
# Cheap hashing keeps the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.poolsite.core import rate_limit
from src.poolsite.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def reset_rate_limit_buckets() -> None:
    """Reset global rate limit in-memory state."""
    rate_limit.reset_global_rate_limit()
    yield
    rate_limit.reset_global_rate_limit()
