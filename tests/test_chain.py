"""Tests for the ordered fallback chain."""

import pytest

from cheer_api.chain import FallbackChain
from cheer_api.exceptions import ProviderStatusError, ProviderTimeoutError


def make_attempt(result=None, error=None, calls=None):
    async def attempt():
        if calls is not None:
            calls.append(result or error)
        if error is not None:
            raise error
        return result

    return attempt


@pytest.mark.asyncio
async def test_first_success_wins():
    calls = []
    chain = FallbackChain(
        "quote",
        [("a", make_attempt("A", calls=calls)), ("b", make_attempt("B", calls=calls))],
        lambda: "fallback",
    )
    assert await chain.run() == "A"
    assert calls == ["A"]


@pytest.mark.asyncio
async def test_provider_errors_move_to_next_attempt():
    chain = FallbackChain(
        "quote",
        [
            ("a", make_attempt(error=ProviderTimeoutError("a", 2.5))),
            ("b", make_attempt("B")),
        ],
        lambda: "fallback",
    )
    assert await chain.run() == "B"


@pytest.mark.asyncio
async def test_exhausted_chain_uses_fallback():
    chain = FallbackChain(
        "song",
        [("a", make_attempt(error=ProviderStatusError("a", 500)))],
        lambda: "fallback",
    )
    assert await chain.run() == "fallback"


@pytest.mark.asyncio
async def test_empty_chain_uses_fallback():
    assert await FallbackChain("joke", [], lambda: "fallback").run() == "fallback"


@pytest.mark.asyncio
async def test_unexpected_errors_propagate():
    chain = FallbackChain(
        "verse",
        [("a", make_attempt(error=KeyError("bug"))), ("b", make_attempt("B"))],
        lambda: "fallback",
    )
    with pytest.raises(KeyError):
        await chain.run()
