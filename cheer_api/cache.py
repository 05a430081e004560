"""Process-lifetime cache for the bulk quote list."""

import logging
from typing import List, Optional

import httpx

from cheer_api import fallbacks
from cheer_api.config import Settings
from cheer_api.exceptions import ProviderError
from cheer_api.models import Quote
from cheer_api.providers import fetch_quote_list

logger = logging.getLogger(__name__)


class QuoteListCache:
    """
    Single-slot, write-once memo of the bulk quote list.

    The slot is filled on the first ``get`` and never refreshed. A failed
    fetch stores the fallback list so a known-bad endpoint is not retried.
    There is no lock: concurrent first callers may each fetch, but they all
    store an equivalent list, so whichever write lands last is fine.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._quotes: Optional[List[Quote]] = None

    async def get(self, client: httpx.AsyncClient) -> List[Quote]:
        if self._quotes is not None:
            return self._quotes

        try:
            quotes = await fetch_quote_list(client, self.settings)
        except ProviderError as e:
            logger.warning(f"quote-list: provider {e.provider} failed: {e.message}, caching fallback")
            quotes = fallbacks.quote_list()

        self._quotes = quotes
        return quotes
