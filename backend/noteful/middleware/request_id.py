"""
Noteful Backend — Request ID Middleware
=========================================

What:  Tags each request with a short correlation id and echoes it back.
How:   Uses the client's X-Request-ID when present, otherwise the first
       8 characters of a UUID4. The id is stored in a ContextVar (read by
       the exception handlers and access log) and on `request.state`.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns `X-Request-ID` to every request and response."""

    header_name = "X-Request-ID"

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(self.header_name) or uuid.uuid4().hex[:8]

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[self.header_name] = rid
        return response
