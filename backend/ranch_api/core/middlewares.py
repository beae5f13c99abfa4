"""
HTTP middlewares for the FastAPI application.
Implements security headers and request logging.
"""

import time

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from ranch_shared.config.logging import request_logger
from ranch_shared.config.settings import settings


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to all responses.

    Headers added:
    - X-Content-Type-Options: nosniff (prevent MIME sniffing)
    - X-Frame-Options: DENY (prevent clickjacking)
    - Referrer-Policy: strict-origin-when-cross-origin
    - Permissions-Policy: disable dangerous browser features
    - Content-Security-Policy: API responses are never rendered as pages
    - Strict-Transport-Security: HSTS in production
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
        response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"

        if settings.is_production:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every /api request."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)

        if request.url.path.startswith("/api"):
            duration_ms = round((time.perf_counter() - start) * 1000, 1)
            request_logger.info(
                f"{request.method} {request.url.path} {response.status_code}",
                method=request.method,
                path=request.url.path,
                status=response.status_code,
                duration_ms=duration_ms,
            )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register HTTP middlewares on the FastAPI application.

    Middlewares run in reverse order of registration.
    """
    app.add_middleware(SecurityHeadersMiddleware)
    if settings.enable_request_logging:
        app.add_middleware(RequestLoggingMiddleware)
