"""
Noteful Backend — Bearer Token Authorization Middleware
=========================================================

What:  Rejects every request that does not carry the configured API token.
Why:   The API is private to its own front end; a shared secret keeps
       other callers out.
How:   Reads `Authorization: Bearer <token>`, compares the token with
       `settings.api_token` in constant time, and answers 401 before any
       router or database work happens.
Who:   Applied to every request via Starlette middleware.
When:  Inside CORS (so browser preflights are still answered) and after
       request-id/logging (so rejected calls are still traced).

Response on failure:
    HTTP 401 {"error": "Unauthorized request"}
"""

import logging
import secrets
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from noteful.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


def verify_bearer_token(authorization: Optional[str], api_token: str) -> None:
    """
    Check an Authorization header value against the configured token.

    Raises:
        UnauthorizedError: header missing, scheme other than Bearer,
                           token mismatch, or no token configured
    """
    if not api_token or not authorization:
        raise UnauthorizedError()

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer":
        raise UnauthorizedError()

    if not secrets.compare_digest(token.strip().encode(), api_token.encode()):
        raise UnauthorizedError()


class BearerAuthMiddleware(BaseHTTPMiddleware):
    """
    Authorization gate in front of every route.

    The token is passed in at registration time (see create_app) rather
    than read from global settings on each request.
    """

    def __init__(self, app, api_token: str = "", **kwargs):
        super().__init__(app, **kwargs)
        self.api_token = api_token

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            verify_bearer_token(request.headers.get("Authorization"), self.api_token)
        except UnauthorizedError as exc:
            logger.error("Unauthorized request to path: %s", request.url.path)
            return JSONResponse(status_code=401, content={"error": exc.message})

        return await call_next(request)
