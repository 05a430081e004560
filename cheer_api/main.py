"""FastAPI application for the cheer content gateway."""

from typing import List, Union

import httpx
from fastapi import Depends, FastAPI, Query, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from cheer_api import services
from cheer_api.cache import QuoteListCache
from cheer_api.config import Settings, get_settings
from cheer_api.dependencies import get_http_client, get_quote_cache
from cheer_api.middleware import EnvelopeMiddleware, RequestLoggingMiddleware
from cheer_api.models import Health, Joke, JokeType, Quote, Riddle, Song, Verse
from cheer_api.responses import CheerJSONResponse, error_response
from cheer_api.utils.logging import setup_logging

settings = get_settings()
setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)

app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="Aggregates quotes, verses, songs and jokes from public providers with fallbacks",
    default_response_class=CheerJSONResponse,
    debug=settings.debug,
    # Only the fixed gateway routes are served unless debugging.
    openapi_url="/openapi.json" if settings.debug else None,
    docs_url="/docs" if settings.debug else None,
    redoc_url=None,
)

# Added first so request logging wraps it and sees the final status.
app.add_middleware(EnvelopeMiddleware)
app.add_middleware(RequestLoggingMiddleware)

ERROR_MESSAGES = {404: "Not found", 405: "Method not allowed"}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(ERROR_MESSAGES.get(exc.status_code, str(exc.detail)), exc.status_code)


@app.get("/", response_model=Health, include_in_schema=False)
@app.get("/health", response_model=Health)
async def health():
    """Liveness check; never touches a provider."""
    return Health(ok=True)


@app.get("/quote", response_model=Quote, response_model_exclude_none=True)
async def quote(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    return await services.get_quote(client, settings)


@app.get("/quote/list", response_model=List[Quote], response_model_exclude_none=True)
async def quote_list(
    client: httpx.AsyncClient = Depends(get_http_client),
    cache: QuoteListCache = Depends(get_quote_cache),
):
    """Bulk quote list, fetched once per process."""
    return await services.get_quote_list(client, cache)


@app.get("/verse", response_model=Verse)
async def verse(
    ref: str = Query(""),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    return await services.get_verse(client, settings, ref or settings.default_verse_ref)


@app.get("/song", response_model=Song)
async def song(
    q: str = Query(""),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    return await services.get_song(client, settings, q or settings.default_song_query)


@app.get("/joke", response_model=Union[Riddle, Joke])
async def joke(
    joke_type: str = Query("", alias="type"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
):
    """Joke of the requested type; ``type=riddle`` answers with question and answer."""
    kind = JokeType.parse(joke_type or settings.default_joke_type)
    return await services.get_joke(client, settings, kind)
