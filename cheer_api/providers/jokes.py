"""Joke and riddle providers, one upstream per joke type."""

import random
from typing import Awaitable, Callable, Dict, Tuple, Union

import httpx

from cheer_api.config import Settings
from cheer_api.models import Joke, JokeType, Riddle
from cheer_api.normalize import joke_from_setup, joke_from_single, riddle_from_payload
from cheer_api.providers.http import fetch_json

HR_TERMS = ("office", "meeting", "boss", "employee", "interview", "resume")

# jokeapi enables safe mode whenever the "safe-mode" key is present; httpx sends it as "safe-mode=".
JOKEAPI_PARAMS = {"type": "single", "safe-mode": ""}


async def fetch_dad_joke(client: httpx.AsyncClient, settings: Settings) -> Joke:
    data = await fetch_json(
        client,
        settings.dad_joke_url,
        provider="icanhazdadjoke",
        timeout=settings.dad_joke_timeout,
        headers={"Accept": "application/json"},
    )
    return joke_from_single(data, "icanhazdadjoke")


async def fetch_funny_joke(client: httpx.AsyncClient, settings: Settings) -> Joke:
    data = await fetch_json(
        client,
        settings.funny_joke_url,
        provider="official-joke-api",
        timeout=settings.funny_joke_timeout,
    )
    return joke_from_setup(data)


async def fetch_nerdy_joke(client: httpx.AsyncClient, settings: Settings) -> Joke:
    data = await fetch_json(
        client,
        settings.nerdy_joke_url,
        provider="jokeapi",
        timeout=settings.nerdy_joke_timeout,
        params=JOKEAPI_PARAMS,
    )
    return joke_from_single(data, "jokeapi")


async def fetch_hr_joke(client: httpx.AsyncClient, settings: Settings) -> Joke:
    """Office-themed joke; the search term is randomised to vary results.

    jokeapi answers 200 with ``"error": true`` when the term matches nothing,
    which the normaliser turns into a provider failure.
    """
    term = random.choice(HR_TERMS)
    data = await fetch_json(
        client,
        settings.hr_joke_url,
        provider="jokeapi",
        timeout=settings.hr_joke_timeout,
        params={**JOKEAPI_PARAMS, "contains": term},
    )
    return joke_from_single(data, "jokeapi")


async def fetch_riddle(client: httpx.AsyncClient, settings: Settings) -> Riddle:
    data = await fetch_json(
        client,
        settings.riddle_url,
        provider="riddles-api",
        timeout=settings.riddle_timeout,
    )
    return riddle_from_payload(data)


JokeFetcher = Callable[[httpx.AsyncClient, Settings], Awaitable[Union[Joke, Riddle]]]

JOKE_PROVIDERS: Dict[JokeType, Tuple[str, JokeFetcher]] = {
    JokeType.DAD: ("icanhazdadjoke", fetch_dad_joke),
    JokeType.FUNNY: ("official-joke-api", fetch_funny_joke),
    JokeType.NERDY: ("jokeapi", fetch_nerdy_joke),
    JokeType.HR: ("jokeapi", fetch_hr_joke),
    JokeType.RIDDLE: ("riddles-api", fetch_riddle),
}
