"""
Request ID middleware for correlation tracking.

Every request gets a correlation ID:
- Reads X-Request-ID header from client (if provided)
- Generates UUID if header is missing
- Stores in request.state for access by other middleware/routes
- Includes in response headers for client-side correlation

The exception handlers in promocode_factory.main read request.state.request_id
so that 400/404 warnings for employee requests carry the same ID as the
access log lines, and error responses still return the X-Request-ID header.
"""

import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add request ID correlation to all requests.

    Flow:
    1. Check for X-Request-ID header in incoming request
    2. If present, use it; otherwise generate new UUID
    3. Store in request.state.request_id
    4. Add to response headers as X-Request-ID

    Usage in routes and exception handlers:
        request_id = getattr(request.state, "request_id", None)
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER)

        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id

        return response
