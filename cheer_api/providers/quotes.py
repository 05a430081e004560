"""Quote providers: adviceslip (primary), quotable (secondary), type.fit (bulk)."""

import logging
import time
from typing import List

import httpx

from cheer_api.config import Settings
from cheer_api.exceptions import MalformedPayloadError
from cheer_api.models import Quote
from cheer_api.normalize import quote_from_advice, quote_from_quotable, quotes_from_list
from cheer_api.providers.http import fetch_json

logger = logging.getLogger(__name__)

QUOTABLE_PARAMS = {"tags": "wisdom|inspirational|faith", "maxLength": "120"}


async def fetch_advice(client: httpx.AsyncClient, settings: Settings) -> Quote:
    """Fetch one piece of advice.

    adviceslip caches responses for a couple of seconds, so a timestamp query
    parameter is sent to get a fresh slip on every call.
    """
    data = await fetch_json(
        client,
        settings.advice_url,
        provider="adviceslip",
        timeout=settings.advice_timeout,
        params={"ts": str(int(time.time() * 1000))},
    )
    return quote_from_advice(data)


async def fetch_quotable(client: httpx.AsyncClient, settings: Settings) -> Quote:
    data = await fetch_json(
        client,
        settings.quotable_url,
        provider="quotable",
        timeout=settings.quotable_timeout,
        params=QUOTABLE_PARAMS,
    )
    return quote_from_quotable(data)


async def fetch_quote_list(client: httpx.AsyncClient, settings: Settings) -> List[Quote]:
    """Fetch the bulk quote list, dropping entries without text."""
    data = await fetch_json(
        client,
        settings.quote_list_url,
        provider="type.fit",
        timeout=settings.quote_list_timeout,
    )
    quotes = quotes_from_list(data)
    if not quotes:
        raise MalformedPayloadError("type.fit", "no usable quotes in list")
    logger.info(f"type.fit returned {len(quotes)} usable quotes")
    return quotes
