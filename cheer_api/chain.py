"""Ordered fallback chain: provider attempts followed by a static supplier."""

import logging
from typing import Awaitable, Callable, Generic, Sequence, Tuple, TypeVar

from cheer_api.exceptions import ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Attempt = Tuple[str, Callable[[], Awaitable[T]]]


class FallbackChain(Generic[T]):
    """
    Try providers in order and fall back to curated content.

    Only :class:`ProviderError` counts as a provider failure. Anything else
    propagates to the router, which answers 502.
    """

    def __init__(self, kind: str, attempts: Sequence[Attempt], fallback: Callable[[], T]):
        self.kind = kind
        self.attempts = list(attempts)
        self.fallback = fallback

    async def run(self) -> T:
        for provider_name, attempt in self.attempts:
            try:
                result = await attempt()
            except ProviderError as e:
                logger.warning(f"{self.kind}: provider {provider_name} failed: {e.message}")
                continue
            logger.debug(f"{self.kind}: served by {provider_name}")
            return result

        logger.info(f"{self.kind}: all {len(self.attempts)} provider(s) failed, using fallback")
        return self.fallback()
