"""CORS & Failure Boundary Middleware — headers on every response, one outer catch.

Invariants:
    - OPTIONS on ANY path → 200, empty body, CORS headers (no routing, no handler)
    - Every other response, success or error, leaves with the CORS headers
    - An exception escaping the app (malformed JSON, unexpected store error, bug)
      is logged with traceback and answered with 500 "Internal server error"

Design Decisions:
    - Custom middleware over Starlette's CORSMiddleware: that one only answers real
      preflights (Origin + Access-Control-Request-Method) and only stamps headers
      when an Origin is sent; clients of this API expect them unconditionally
    - The outer catch lives here rather than only in the Exception handler: the
      catch-all handler runs in ServerErrorMiddleware, outside user middleware,
      so its response would miss the CORS headers
"""

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from account_service.api.error_handlers import internal_error_response

logger = logging.getLogger(__name__)


class CORSBoundaryMiddleware(BaseHTTPMiddleware):
    """Answer preflights, stamp CORS headers, convert escaped exceptions to 500."""

    def __init__(self, app: ASGIApp, headers: dict[str, str]):
        super().__init__(app)
        self.headers = headers

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"API error on {request.method} {request.url.path}: {exc}",
                extra={"method": request.method, "path": request.url.path},
                exc_info=True,
            )
            response = internal_error_response()

        response.headers.update(self.headers)
        return response
