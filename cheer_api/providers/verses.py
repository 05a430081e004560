"""Scripture provider (labs.bible.org)."""

import httpx

from cheer_api.config import Settings
from cheer_api.models import Verse
from cheer_api.normalize import verse_from_payload
from cheer_api.providers.http import fetch_json


async def fetch_verse(client: httpx.AsyncClient, settings: Settings, ref: str) -> Verse:
    data = await fetch_json(
        client,
        settings.verse_url,
        provider="bible.org",
        timeout=settings.verse_timeout,
        params={"passage": ref, "type": "json", "formatting": "plain"},
    )
    return verse_from_payload(data, ref)
