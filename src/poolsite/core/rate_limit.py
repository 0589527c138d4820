"""Rate limiting configuration.

Provides two layers of rate limiting, both in-memory (per-process):
1. Global middleware: token bucket per client IP applied to every request
2. Endpoint decorators: slowapi limits on login and public contact submission
"""

import asyncio
import time
from collections import defaultdict

from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from src.poolsite.core.config import get_settings
from src.poolsite.core.logging import get_logger

logger = get_logger(__name__)

# Monitoring and docs endpoints are never throttled
EXEMPT_PATHS = frozenset({"/health", "/metrics", "/docs", "/openapi.json", "/redoc"})

_rate_limit_buckets: dict[str, dict[str, float]] = defaultdict(dict)
_rate_limit_lock = asyncio.Lock()


def get_rate_limit_key(request: Request) -> str:
    """Generate rate limit key from client IP only.

    Never include user-controlled headers in the key; rotating them would
    create unlimited new buckets.
    """
    return get_remote_address(request) or "unknown"


def create_limiter() -> Limiter:
    """Create the endpoint rate limiter. Disabled in testing environment."""
    settings = get_settings()

    if settings.app_env == "testing":
        logger.info("Rate limiter disabled (testing environment)")
        return Limiter(key_func=get_rate_limit_key, enabled=False)

    logger.info("Rate limiter using in-memory backend (not distributed)")
    return Limiter(key_func=get_rate_limit_key)


# Reads settings at import time; reconfiguration needs a restart.
limiter = create_limiter()


def reset_global_rate_limit() -> None:
    """Drop all token buckets (for testing)."""
    _rate_limit_buckets.clear()


async def _check_global_rate_limit(client_ip: str) -> bool:
    """Take one token from the client's bucket.

    Returns True if the request is allowed, False if rate limited.
    """
    settings = get_settings()
    burst = float(settings.global_rate_limit_requests)
    rate = burst / settings.global_rate_limit_window_seconds
    now = time.time()

    async with _rate_limit_lock:
        if client_ip not in _rate_limit_buckets:
            _rate_limit_buckets[client_ip] = {"tokens": burst, "last_update": now}

        bucket = _rate_limit_buckets[client_ip]
        elapsed = now - bucket["last_update"]

        # Replenish tokens based on time elapsed
        bucket["tokens"] = min(burst, bucket["tokens"] + elapsed * rate)
        bucket["last_update"] = now

        if bucket["tokens"] >= 1:
            bucket["tokens"] -= 1
            return True
        return False


async def global_rate_limit_middleware(
    request: Request,
    call_next: object,  # type: ignore[type-arg]
) -> JSONResponse:
    """Global per-IP rate limit for every route except EXEMPT_PATHS.

    Skipped entirely in the testing environment.
    """
    if request.url.path in EXEMPT_PATHS or get_settings().app_env == "testing":
        return await call_next(request)  # type: ignore[misc, operator, no-any-return]

    client_ip = get_rate_limit_key(request)

    if not await _check_global_rate_limit(client_ip):
        logger.warning(
            "Global rate limit exceeded",
            client_ip=client_ip,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=429,
            content={"detail": "Too many requests. Please slow down.", "retry_after": 1},
            headers={"Retry-After": "1"},
        )

    return await call_next(request)  # type: ignore[misc, operator, no-any-return]
