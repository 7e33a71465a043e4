"""Repository for PlaybookDoc operations."""
from __future__ import annotations

from typing import List, Optional

from hunting_engine.models.mongo.playbooks.docs.playbooks import PlaybookDoc
from hunting_engine.utils.datetime_helpers import utc_now


async def get_playbook_by_sub_channel(sub_channel: str) -> Optional[PlaybookDoc]:
    return await PlaybookDoc.find_one(PlaybookDoc.subChannel == sub_channel)


async def upsert_playbook(sub_channel: str, content_md: str) -> PlaybookDoc:
    """
    Create the sub-channel's playbook at version 1, or bump the existing
    record's version by one and replace its content.

    Read-modify-write without a concurrency check: two concurrent
    regenerations can both read version N and both write N+1. The unique
    index on subChannel rejects a duplicate first insert.
    """
    existing = await PlaybookDoc.find_one(PlaybookDoc.subChannel == sub_channel)

    if existing:
        existing.version += 1
        existing.contentMd = content_md
        existing.updatedAt = utc_now()
        await existing.save()
        return existing

    doc = PlaybookDoc(
        subChannel=sub_channel,
        version=1,
        contentMd=content_md,
    )
    await doc.insert()
    return doc


async def list_playbooks() -> List[PlaybookDoc]:
    """All playbooks, most recently regenerated first."""
    return await PlaybookDoc.find_all().sort("-updatedAt").to_list()
