"""Upstream content providers."""

from .jokes import (
    JOKE_PROVIDERS,
    fetch_dad_joke,
    fetch_funny_joke,
    fetch_hr_joke,
    fetch_nerdy_joke,
    fetch_riddle,
)
from .quotes import fetch_advice, fetch_quotable, fetch_quote_list
from .songs import fetch_song
from .verses import fetch_verse

__all__ = [
    "JOKE_PROVIDERS",
    "fetch_advice",
    "fetch_quotable",
    "fetch_quote_list",
    "fetch_verse",
    "fetch_song",
    "fetch_dad_joke",
    "fetch_funny_joke",
    "fetch_nerdy_joke",
    "fetch_hr_joke",
    "fetch_riddle",
]
