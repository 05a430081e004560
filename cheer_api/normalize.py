"""Normalize loosely-typed provider payloads into response models.

Each ``*_from_payload`` function accepts whatever JSON a provider returned and
either produces a validated model or raises :class:`MalformedPayloadError`.
Adapters and tests share these functions so the validation rules live in one
place.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from cheer_api.exceptions import MalformedPayloadError
from cheer_api.models import Joke, Quote, Riddle, Song, Verse

WS = re.compile(r"\s+")


def clean_text(value: Any) -> str:
    """Coerce a scalar to a whitespace-collapsed string; containers become ''."""
    if value is None or isinstance(value, (dict, list, tuple, set, bool)):
        return ""
    return WS.sub(" ", str(value)).strip()


def _field(data: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _first_text(data: Any, *keys: str) -> str:
    for key in keys:
        text = clean_text(_field(data, key))
        if text:
            return text
    return ""


def _reject_error_flag(data: Any, provider: str) -> None:
    if isinstance(data, dict) and data.get("error"):
        message = clean_text(data.get("message")) or "provider reported an error"
        raise MalformedPayloadError(provider, message)


def quote_from_text(text: Any, author: Any = None) -> Optional[Quote]:
    """Build a Quote, or None when the text is empty."""
    text = clean_text(text)
    if not text:
        return None
    return Quote(text=text, author=clean_text(author) or None)


def quote_from_advice(data: Any, provider: str = "adviceslip") -> Quote:
    quote = quote_from_text(_field(data, "slip", "advice"))
    if quote is None:
        raise MalformedPayloadError(provider, "no advice text")
    return quote


def quote_from_quotable(data: Any, provider: str = "quotable") -> Quote:
    quote = quote_from_text(_field(data, "content"), _field(data, "author"))
    if quote is None:
        raise MalformedPayloadError(provider, "no quote content")
    return quote


def quotes_from_list(data: Any) -> List[Quote]:
    """Keep only well-formed entries of a bulk quote list.

    Non-list payloads yield an empty list; the caller decides whether that is
    a failure.
    """
    if not isinstance(data, list):
        return []
    quotes = []
    for item in data:
        quote = quote_from_text(_field(item, "text"), _field(item, "author"))
        if quote is not None:
            quotes.append(quote)
    return quotes


def verse_from_payload(data: Any, ref: str, provider: str = "bible.org") -> Verse:
    """Parse the first passage of a scripture lookup.

    The reference is rebuilt from ``bookname``/``chapter``/``verse`` when the
    provider echoes all three, otherwise the caller's ``ref`` is kept.
    """
    first = data[0] if isinstance(data, list) and data else None
    if not isinstance(first, dict):
        raise MalformedPayloadError(provider, "empty passage list")
    text = clean_text(first.get("text"))
    if not text:
        raise MalformedPayloadError(provider, "passage has no text")
    parts = [clean_text(first.get(k)) for k in ("bookname", "chapter", "verse")]
    reference = f"{parts[0]} {parts[1]}:{parts[2]}" if all(parts) else ref
    return Verse(reference=reference, text=text)


def song_from_result(item: Any, provider: str = "itunes") -> Song:
    artist = clean_text(_field(item, "artistName"))
    title = clean_text(_field(item, "trackName"))
    if not artist or not title:
        raise MalformedPayloadError(provider, "song result missing artist or title")
    return Song(artist=artist, title=title)


def song_results(data: Any) -> List[Dict[str, Any]]:
    results = _field(data, "results")
    if not isinstance(results, list):
        return []
    return [r for r in results if isinstance(r, dict)]


def joke_from_single(data: Any, provider: str) -> Joke:
    """Single-line joke shape (``{"joke": ...}``) used by several providers."""
    _reject_error_flag(data, provider)
    text = clean_text(_field(data, "joke"))
    if not text:
        raise MalformedPayloadError(provider, "no joke text")
    return Joke(text=text)


def joke_from_setup(data: Any, provider: str = "official-joke-api") -> Joke:
    _reject_error_flag(data, provider)
    parts = [clean_text(_field(data, "setup")), clean_text(_field(data, "punchline"))]
    text = " ".join(p for p in parts if p)
    if not text:
        raise MalformedPayloadError(provider, "no setup or punchline")
    return Joke(text=text)


def riddle_from_payload(data: Any, provider: str = "riddles-api") -> Riddle:
    _reject_error_flag(data, provider)
    question = _first_text(data, "riddle", "question")
    answer = _first_text(data, "answer", "solution")
    if not question or not answer:
        raise MalformedPayloadError(provider, "riddle missing question or answer")
    return Riddle(question=question, answer=answer)
