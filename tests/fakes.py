"""Fake upstream providers behind httpx.MockTransport."""

import asyncio
import inspect
from collections import Counter
from typing import Any, Callable, Dict

import httpx

from cheer_api.config import Settings

TIMEOUT_FIELDS = [name for name in Settings.model_fields if name.endswith("_timeout")]


def reply(payload: Any, status: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, json=payload)


def down(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


async def slow(request: httpx.Request) -> httpx.Response:
    await asyncio.sleep(2)
    return httpx.Response(200, json={})


def garbage(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, text="<html>maintenance</html>")


def empty(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"")


def server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"message": "unavailable"})


def deeply_nested(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"[" * 200000 + b"]" * 200000)


def invalid_utf8(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"{\"joke\": \"\xff\xfe\"}")


def jokeapi(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/Programming"):
        return httpx.Response(200, json={"error": False, "type": "single", "joke": "Debugging: removing the needles from the haystack."})
    return httpx.Response(200, json={"error": False, "type": "single", "joke": "My boss told me to have a good day. So I went home."})


HEALTHY: Dict[str, Callable] = {
    "api.adviceslip.com": reply({"slip": {"id": 42, "advice": "  Take   the scenic route. "}}),
    "api.quotable.io": reply({"content": "Keep going.", "author": "Anon"}),
    "type.fit": reply([
        {"text": "Genius is one percent inspiration.", "author": "Thomas Edison, type.fit"},
        {"text": "   ", "author": "Nobody"},
        {"author": "Missing text"},
        {"text": "Act as if what you do makes a difference.", "author": None},
    ]),
    "labs.bible.org": reply([
        {"bookname": "Psalm", "chapter": 34, "verse": 18, "text": " The Lord is near... "},
    ]),
    "itunes.apple.com": reply({
        "resultCount": 2,
        "results": [
            {"artistName": "Kirk Franklin", "trackName": "I Smile"},
            {"artistName": "Kirk Franklin", "trackName": "Love Theory"},
        ],
    }),
    "icanhazdadjoke.com": reply({"id": "x1", "joke": "What do you call a fake noodle? An impasta.", "status": 200}),
    "official-joke-api.appspot.com": reply({"setup": "Why did the bicycle fall over?", "punchline": "It was two tired."}),
    "v2.jokeapi.dev": jokeapi,
    "riddles-api.vercel.app": reply({"riddle": "What has hands but can't clap?", "answer": "A clock."}),
}


class FakeUpstream:
    """Routes outbound requests by host and counts them."""

    def __init__(self):
        self.handlers: Dict[str, Callable] = dict(HEALTHY)
        self.calls: Counter = Counter()
        self.requests: list = []

    def set(self, host: str, handler: Callable) -> None:
        self.handlers[host] = handler

    def set_all(self, handler: Callable) -> None:
        for host in self.handlers:
            self.handlers[host] = handler

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls[request.url.host] += 1
        self.requests.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            return httpx.Response(404)
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result
