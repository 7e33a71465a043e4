from __future__ import annotations

from functools import lru_cache

from tavily import AsyncTavilyClient

from hunting_engine.config import TAVILY_API_KEY


@lru_cache(maxsize=1)
def get_async_tavily_client() -> AsyncTavilyClient:
    # AsyncTavilyClient raises if no key is configured; callers treat that
    # like any other search failure.
    return AsyncTavilyClient(api_key=TAVILY_API_KEY)
