"""
Request correlation.

Every request gets an X-Request-ID. A well-formed id sent by the client (or
by the proxy in front of the API) is kept; anything else is replaced by a
fresh one so arbitrary header content never reaches the logs.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from ranch_shared.config.logging import request_logger as logger


HEADER_NAME = "X-Request-ID"
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(incoming: str | None) -> str:
    """Client id when it is a short token, otherwise a new uuid4 hex."""
    if incoming and _VALID_REQUEST_ID.match(incoming):
        return incoming
    if incoming:
        logger.debug("Replacing malformed request id", length=len(incoming))
    return uuid.uuid4().hex


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Sets the request id for the duration of the request and echoes it back."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request.headers.get(HEADER_NAME))
        token = request_id_var.set(request_id)
        try:
            request.state.request_id = request_id
            response = await call_next(request)
            response.headers[HEADER_NAME] = request_id
            return response
        finally:
            request_id_var.reset(token)


class CorrelationIdFilter:
    """Logging filter that stamps request_id on every record ("-" outside a request)."""

    def filter(self, record) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True
