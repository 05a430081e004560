"""Bounded JSON fetch shared by every provider adapter."""

import asyncio
import logging
from typing import Any, Mapping, Optional

import httpx
import orjson

from cheer_api.exceptions import (
    MalformedPayloadError,
    ProviderStatusError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)

logger = logging.getLogger(__name__)


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    provider: str,
    timeout: float,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Any:
    """
    GET ``url`` and decode its JSON body.

    The whole call, connect through body, is bounded by ``timeout``. On expiry
    the request task is cancelled, which closes its connection.

    Raises:
        ProviderTimeoutError: The provider did not answer in time
        ProviderStatusError: Non-2xx status
        ProviderUnavailableError: Connection or protocol failure
        MalformedPayloadError: Body is not JSON
    """
    try:
        response = await asyncio.wait_for(
            client.get(url, params=params, headers=headers, timeout=timeout),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise ProviderTimeoutError(provider, timeout) from e
    except httpx.RequestError as e:
        raise ProviderUnavailableError(provider, f"request failed: {e}") from e

    logger.debug(f"{provider} responded {response.status_code} for {response.request.url}")

    if not response.is_success:
        raise ProviderStatusError(provider, response.status_code)
    # Over-deep nesting and bad UTF-8 both raise JSONDecodeError, never RecursionError.
    try:
        return orjson.loads(response.content)
    except orjson.JSONDecodeError as e:
        raise MalformedPayloadError(provider, "response body is not JSON") from e
