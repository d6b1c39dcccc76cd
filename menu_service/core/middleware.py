"""Request logging middleware."""
import logging
from datetime import datetime, timezone

from fastapi import Request

from menu_service.core import config

logger = logging.getLogger(__name__)

BODY_LOGGED_METHODS = ("POST", "PUT")


async def log_requests(request: Request, call_next):
    """Log method, path and timestamp of every request, plus the body of writes."""
    timestamp = datetime.now(timezone.utc).isoformat()
    logger.info(f"[REQUEST] {request.method} {request.url.path} - {timestamp}")

    if request.method in BODY_LOGGED_METHODS and config.settings.log_request_bodies:
        body = await request.body()
        logger.info(f"[REQUEST] Body: {body.decode('utf-8', errors='replace')}")

        # Hand the consumed body on to the route handler
        async def receive() -> dict[str, object]:
            return {"type": "http.request", "body": body, "more_body": False}

        request._receive = receive  # type: ignore[attr-defined]

    return await call_next(request)
