"""
Logging middleware for request/response tracking.

This middleware logs every HTTP request and response with:
- Request details (method, path, query params)
- Response status code
- Request latency in milliseconds
- Request correlation ID
- Exception details (if request failed)

Must be registered AFTER RequestIDMiddleware to access request_id.

Together with the DEBUG records emitted by InMemoryRepository and the INFO
records from EmployeeService (both tagged with entity_id), these lines let a
single employee request be followed from access log to store mutation.
Domain errors are already turned into 400/404 responses before they reach
this middleware, so they are logged as completed requests; only unexpected
exceptions produce "Request failed".
"""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from promocode_factory.core.logging_config import get_logger


logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests and responses.

    Example:
        app.add_middleware(LoggingMiddleware)
        app.add_middleware(RequestIDMiddleware)  # registered last, runs first

    Log output (JSON):
        {
            "timestamp": "2025-11-24T10:30:00.123456+00:00",
            "level": "INFO",
            "message": "Request completed",
            "method": "GET",
            "path": "/api/v1/employees",
            "status_code": 200,
            "latency_ms": 1.3,
            "request_id": "abc-123"
        }
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        method = request.method
        path = request.url.path
        query_params = str(request.query_params) if request.query_params else None

        # Set by RequestIDMiddleware
        request_id = getattr(request.state, "request_id", None)

        logger.info(
            "Request started",
            extra={
                "method": method,
                "path": path,
                "query_params": query_params,
                "request_id": request_id,
            }
        )

        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            latency_ms = (time.perf_counter() - start_time) * 1000

            logger.error(
                f"Request failed: {exc}",
                extra={
                    "method": method,
                    "path": path,
                    "latency_ms": round(latency_ms, 2),
                    "request_id": request_id,
                    "exception_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        latency_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "latency_ms": round(latency_ms, 2),
                "request_id": request_id,
            }
        )

        return response
