"""Request tracking middleware for graceful shutdown."""

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from src.poolsite.core.rate_limit import EXEMPT_PATHS
from src.poolsite.core.shutdown import request_tracker


async def request_tracking_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Track in-flight requests for graceful shutdown."""
    # Monitoring and docs requests never hold up shutdown
    if request.url.path in EXEMPT_PATHS:
        return await call_next(request)

    async with request_tracker.track_request():
        return await call_next(request)
