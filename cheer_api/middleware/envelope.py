"""Method policy, path normalisation and the response envelope."""

from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from cheer_api.responses import CORS_HEADERS, NO_STORE, error_response
from cheer_api.utils.logging import get_logger

logger = get_logger(__name__)


class EnvelopeMiddleware(BaseHTTPMiddleware):
    """
    Apply the gateway's request and response policy.

    - ``OPTIONS`` on any path is answered here with 204 and no body.
    - Methods other than ``GET`` get 405 before any route is matched.
    - Trailing slashes are stripped from the path before routing.
    - Unhandled exceptions become a 502 ``Upstream error`` envelope.
    - Every response carries the CORS headers and ``Cache-Control: no-store``.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        elif request.method != "GET":
            response = error_response("Method not allowed", 405)
        else:
            request.scope["path"] = request.scope["path"].rstrip("/") or "/"
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} failed: {e}",
                    request_id=getattr(request.state, "request_id", None),
                    extra={"endpoint": request.url.path, "error": str(e)},
                    exc_info=True,
                )
                response = error_response("Upstream error", 502)

        response.headers.update(CORS_HEADERS)
        response.headers.update(NO_STORE)
        return response
