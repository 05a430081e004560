"""Content operations: each kind's provider chain and its fallback."""

from functools import partial
from typing import List, Union

import httpx

from cheer_api import fallbacks
from cheer_api.cache import QuoteListCache
from cheer_api.chain import FallbackChain
from cheer_api.config import Settings
from cheer_api.models import Joke, JokeType, Quote, Riddle, Song, Verse
from cheer_api.providers import (
    JOKE_PROVIDERS,
    fetch_advice,
    fetch_quotable,
    fetch_song,
    fetch_verse,
)


async def get_quote(client: httpx.AsyncClient, settings: Settings) -> Quote:
    """Advice first, then quotable, then a curated quote."""
    chain = FallbackChain(
        "quote",
        [
            ("adviceslip", partial(fetch_advice, client, settings)),
            ("quotable", partial(fetch_quotable, client, settings)),
        ],
        fallbacks.pick_quote,
    )
    return await chain.run()


async def get_quote_list(client: httpx.AsyncClient, cache: QuoteListCache) -> List[Quote]:
    return await cache.get(client)


async def get_verse(client: httpx.AsyncClient, settings: Settings, ref: str) -> Verse:
    chain = FallbackChain(
        "verse",
        [("bible.org", partial(fetch_verse, client, settings, ref))],
        partial(fallbacks.pick_verse, ref),
    )
    return await chain.run()


async def get_song(client: httpx.AsyncClient, settings: Settings, query: str) -> Song:
    chain = FallbackChain(
        "song",
        [("itunes", partial(fetch_song, client, settings, query))],
        partial(fallbacks.pick_song, query),
    )
    return await chain.run()


async def get_joke(
    client: httpx.AsyncClient, settings: Settings, joke_type: JokeType
) -> Union[Joke, Riddle]:
    """Joke of the given type, or a riddle for ``JokeType.RIDDLE``."""
    provider_name, fetcher = JOKE_PROVIDERS[joke_type]
    if joke_type is JokeType.RIDDLE:
        fallback = fallbacks.pick_riddle
    else:
        fallback = partial(fallbacks.pick_joke, joke_type)
    chain = FallbackChain(
        joke_type.value,
        [(provider_name, partial(fetcher, client, settings))],
        fallback,
    )
    return await chain.run()
