"""JSON response class and header policy shared by every response."""

from typing import Any

import orjson
from fastapi.responses import JSONResponse

from cheer_api.models import ErrorEnvelope

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# Upstream content changes per call and fallback content must never be
# cached as if it were fresh.
NO_STORE = {"Cache-Control": "no-store"}


class CheerJSONResponse(JSONResponse):
    """Compact orjson body with an explicit utf-8 charset."""

    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


def error_response(message: str, status_code: int) -> CheerJSONResponse:
    return CheerJSONResponse(ErrorEnvelope(error=message).model_dump(), status_code=status_code)
