from typing import Any, Dict, List, Literal, Optional

from tavily import AsyncTavilyClient


async def tavily_search(
    client: AsyncTavilyClient,
    query: str,
    max_results: int = 5,
    search_depth: Literal["basic", "advanced"] = "basic",
    topic: Optional[Literal["general", "news", "finance"]] = None,
) -> Dict[str, Any]:
    """
    Single awaited Tavily search. `topic` is only forwarded when given,
    otherwise Tavily's own default applies.
    """
    kwargs: Dict[str, Any] = {
        "query": query,
        "max_results": max_results,
        "search_depth": search_depth,
    }
    if topic:
        kwargs["topic"] = topic
    return await client.search(**kwargs)


def result_titles(response: Dict[str, Any] | List[Dict[str, Any]]) -> List[str]:
    """Non-blank result titles, from the raw response dict or a bare results list."""
    results = (response.get("results") or []) if isinstance(response, dict) else (response or [])
    return [
        item["title"].strip()
        for item in results
        if isinstance(item, dict) and isinstance(item.get("title"), str) and item["title"].strip()
    ]
