"""Repository for HuntDoc operations."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from beanie import PydanticObjectId
from bson.errors import InvalidId

from hunting_engine.models.mongo.hunts.docs.hunts import HuntDoc
from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.hunts.embedded.hunt_result import HuntResultModel


def parse_object_id(value: str) -> Optional[PydanticObjectId]:
    """ObjectId for a path parameter, or None when it is not a valid identifier."""
    try:
        return PydanticObjectId(value)
    except (InvalidId, TypeError):
        return None


async def create_hunt(
    sub_channel: str,
    markets: Sequence[str],
    focus_brands: Sequence[str],
    max_accounts: int,
    accounts: Sequence[AccountModel],
    hunt_result: HuntResultModel,
) -> HuntDoc:
    """Persist a completed hunt. createdAt is set here and never changed."""
    doc = HuntDoc(
        subChannel=sub_channel,
        markets=list(markets),
        focusBrands=list(focus_brands),
        maxAccounts=max_accounts,
        accounts=list(accounts),
        huntResult=hunt_result,
    )
    await doc.insert()
    return doc


async def get_hunt_by_id(hunt_id: str) -> Optional[HuntDoc]:
    oid = parse_object_id(hunt_id)
    if oid is None:
        return None
    return await HuntDoc.get(oid)


async def list_hunts(
    sub_channel: Optional[str] = None,
    limit: int = 20,
    offset: int = 0,
) -> Tuple[List[HuntDoc], int]:
    """Newest first, optionally filtered by sub-channel. Returns (page, total matching)."""
    if sub_channel:
        query = HuntDoc.find(HuntDoc.subChannel == sub_channel)
    else:
        query = HuntDoc.find_all()

    total = await query.count()
    hunts = await query.sort("-createdAt").skip(offset).limit(limit).to_list()
    return hunts, total


async def get_recent_hunts_for_sub_channel(sub_channel: str, limit: int = 10) -> List[HuntDoc]:
    """Most recent hunts for a sub-channel, newest first."""
    return await HuntDoc.find(
        HuntDoc.subChannel == sub_channel
    ).sort("-createdAt").limit(limit).to_list()


async def delete_hunt_by_id(hunt_id: str) -> bool:
    """Delete a hunt (and its embedded accounts). Returns False when nothing matched."""
    doc = await get_hunt_by_id(hunt_id)
    if doc is None:
        return False
    await doc.delete()
    return True
