"""Song provider (iTunes search)."""

import logging
import random

import httpx

from cheer_api.config import Settings
from cheer_api.exceptions import MalformedPayloadError
from cheer_api.models import Song
from cheer_api.normalize import song_from_result, song_results
from cheer_api.providers.http import fetch_json

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 25


async def fetch_song(client: httpx.AsyncClient, settings: Settings, query: str) -> Song:
    """
    Search songs matching ``query`` and return one of them.

    The pick is uniformly random over the result set rather than the top hit,
    so repeated calls with the same query vary.
    """
    data = await fetch_json(
        client,
        settings.song_url,
        provider="itunes",
        timeout=settings.song_timeout,
        params={"term": query, "entity": "song", "limit": str(SEARCH_LIMIT)},
    )
    results = song_results(data)
    if not results:
        raise MalformedPayloadError("itunes", f"no songs for {query[:50]!r}")
    logger.debug(f"itunes returned {len(results)} songs for query: {query[:50]}")
    return song_from_result(random.choice(results))
