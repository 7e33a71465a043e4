from __future__ import annotations

from typing import Optional, Sequence, Type

from beanie import Document, init_beanie
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase  # type: ignore[import]

from hunting_engine.config import MONGO_HUNTING_DB_NAME
from hunting_engine.models.mongo import HuntDoc, PlaybookDoc


def get_document_models() -> Sequence[Type[Document]]:
    # Keep this centralized so app startup is deterministic.
    return [
        HuntDoc,
        PlaybookDoc,
    ]


async def init_beanie_hunting_db(
    client: AsyncMongoClient,
    db_name: Optional[str] = None,
) -> AsyncDatabase:
    db: AsyncDatabase = client[db_name or MONGO_HUNTING_DB_NAME]
    await init_beanie(database=db, document_models=list(get_document_models()))
    return db
