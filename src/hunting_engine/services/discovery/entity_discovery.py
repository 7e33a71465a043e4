"""
Entity discovery collaborator.

Given a query (the hunt's sub-channel) and a market label, returns a bounded
list of candidate entity names. Discovery is fail-soft: any backend failure
yields an empty result and a warning, never an exception, so a broken search
backend cannot block a hunt.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Protocol, Sequence

from pydantic import BaseModel, Field

from hunting_engine.config import DISCOVERY_BACKEND, DISCOVERY_MAX_RESULTS
from hunting_engine.common.logging_utils import get_logger
from hunting_engine.infrastructure.search.async_tavily_client import get_async_tavily_client
from hunting_engine.infrastructure.search.tavily_functions import result_titles, tavily_search
from hunting_engine.utils.dedupe import dedupe_keep_order, take

logger = get_logger(__name__)


STUB_NAME_SUFFIXES = ("Inc.", "Solutions", "Global", "Enterprises", "Group")


class DiscoveryResult(BaseModel):
    entities: List[str] = Field(default_factory=list)
    count: int = 0

    @classmethod
    def from_entities(cls, entities: Sequence[str]) -> "DiscoveryResult":
        names = list(entities)
        return cls(entities=names, count=len(names))

    @classmethod
    def empty(cls) -> "DiscoveryResult":
        return cls(entities=[], count=0)


class DiscoveryBackend(Protocol):
    name: str

    async def search(self, query: str, market: str) -> List[str]:
        ...


class StubDiscoveryBackend:
    """
    Deterministic placeholder: synthesizes name variants of the query.
    The market does not influence the output.
    """

    name = "stub"

    async def search(self, query: str, market: str) -> List[str]:
        return [f"{query} {suffix}" for suffix in STUB_NAME_SUFFIXES]


class TavilyDiscoveryBackend:
    """Web-search backed discovery: one Tavily query per market, result titles as names."""

    name = "tavily"

    def __init__(self, max_results: int = DISCOVERY_MAX_RESULTS, client=None):
        self.max_results = max_results
        self._client = client

    @staticmethod
    def build_query(query: str, market: str) -> str:
        return f"Top {query} companies and operators in {market}"

    @staticmethod
    def title_to_entity(title: str) -> str:
        # "Acme Foods | Home" / "Acme Foods - Wikipedia" -> "Acme Foods"
        for sep in (" | ", " - ", " – ", ": "):
            if sep in title:
                title = title.split(sep, 1)[0]
        return title.strip()

    async def search(self, query: str, market: str) -> List[str]:
        client = self._client or get_async_tavily_client()
        response = await tavily_search(
            client,
            query=self.build_query(query, market),
            max_results=self.max_results,
        )
        names = [self.title_to_entity(t) for t in result_titles(response)]
        return take(dedupe_keep_order(names), self.max_results)


def create_discovery_backend(backend_name: Optional[str] = None) -> DiscoveryBackend:
    backend_name = (backend_name or DISCOVERY_BACKEND).lower()
    if backend_name == "tavily":
        return TavilyDiscoveryBackend()
    if backend_name != "stub":
        logger.warning("Unknown DISCOVERY_BACKEND=%r, using stub discovery", backend_name)
    return StubDiscoveryBackend()


class EntityDiscovery:
    def __init__(self, backend: Optional[DiscoveryBackend] = None):
        self.backend = backend or create_discovery_backend()

    async def discover(self, query: str, market: str) -> DiscoveryResult:
        """Never raises: on any backend failure returns an empty result."""
        logger.info(
            "[discovery:%s] Searching entities for %r in market %r",
            self.backend.name,
            query,
            market,
        )
        try:
            entities = await self.backend.search(query, market)
        except Exception as e:
            logger.warning(
                "[discovery:%s] Search failed for %r in %r: %s",
                self.backend.name,
                query,
                market,
                e,
            )
            return DiscoveryResult.empty()
        return DiscoveryResult.from_entities(entities or [])

    async def discover_across_markets(
        self,
        query: str,
        markets: Sequence[str],
    ) -> Dict[str, DiscoveryResult]:
        """One discovery call per market, sequentially. A failing market maps to an empty result."""
        results: Dict[str, DiscoveryResult] = {}
        for market in markets:
            results[market] = await self.discover(query, market)
        return results
