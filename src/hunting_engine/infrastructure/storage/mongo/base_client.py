from __future__ import annotations

from typing import Optional

from pymongo import AsyncMongoClient

from hunting_engine.config import MONGO_URI


_mongo_client: Optional[AsyncMongoClient] = None


def create_mongo_client(uri: str = MONGO_URI) -> AsyncMongoClient:
    """
    Create an AsyncMongoClient.

    Keep this as a singleton at app level (FastAPI lifespan) and reuse it
    instead of creating a new one per request.
    """
    client: AsyncMongoClient = AsyncMongoClient(uri, tz_aware=True)
    return client


def get_mongo_client() -> AsyncMongoClient:
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = create_mongo_client()
    return _mongo_client


async def close_mongo_client() -> None:
    global _mongo_client
    if _mongo_client is not None:
        await _mongo_client.close()
        _mongo_client = None
