"""Request logging middleware.

Logs every request line, and for POST and PUT the body exactly as the caller
sent it. Runs ahead of validation, so defaults filled in later are never
reflected in the logged body.
"""

import json
import logging
from datetime import UTC, datetime

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

BODY_LOGGED_METHODS = ("POST", "PUT")


def format_request_body(raw_body: bytes) -> str:
    """Pretty-print a request body for the log.

    Args:
        raw_body: Body bytes as received

    Returns:
        str: Indented JSON, or the decoded text when the body is not JSON
    """
    text = raw_body.decode("utf-8", errors="replace")
    try:
        return json.dumps(json.loads(text), indent=2)
    except (ValueError, RecursionError):
        return text


def request_target(request: Request) -> str:
    """Path plus query string, as requested."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method and path of each request; never alters or rejects it."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        timestamp = datetime.now(UTC).isoformat()
        logger.info(
            f"{request.method} {request_target(request)}",
            extra={"request_time": timestamp, "method": request.method},
        )

        if request.method in BODY_LOGGED_METHODS:
            # Starlette caches the body, so downstream handlers can still read it
            body = await request.body()
            logger.info(f"Request Body: {format_request_body(body)}")

        return await call_next(request)
