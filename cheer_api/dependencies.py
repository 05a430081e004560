"""FastAPI dependencies."""

from collections.abc import AsyncGenerator

import httpx

from cheer_api.cache import QuoteListCache
from cheer_api.config import get_settings


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Per-request client; per-call timeouts are applied by each provider."""
    settings = get_settings()
    async with httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent}, follow_redirects=True
    ) as client:
        yield client


_quote_cache: QuoteListCache | None = None


def get_quote_cache() -> QuoteListCache:
    global _quote_cache
    if _quote_cache is None:
        _quote_cache = QuoteListCache(get_settings())
    return _quote_cache
