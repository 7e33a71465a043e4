"""Hunt request and response schemas."""
from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from hunting_engine.models.mongo.hunts.docs.hunts import HuntDoc
from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.hunts.embedded.hunt_result import HuntResultModel


class HuntResponse(BaseModel):
    """A stored hunt with its embedded accounts."""
    id: str = Field(..., description="Hunt identifier")
    subChannel: str
    markets: List[str]
    focusBrands: List[str]
    maxAccounts: int
    accounts: List[AccountModel]
    huntResult: HuntResultModel
    createdAt: datetime

    @classmethod
    def from_doc(cls, doc: HuntDoc) -> "HuntResponse":
        return cls(
            id=str(doc.id),
            subChannel=doc.subChannel,
            markets=doc.markets,
            focusBrands=doc.focusBrands,
            maxAccounts=doc.maxAccounts,
            accounts=doc.accounts,
            huntResult=doc.huntResult,
            createdAt=doc.createdAt,
        )


class Pagination(BaseModel):
    total: int = Field(..., description="Hunts matching the filter")
    limit: int
    offset: int


class HuntListResponse(BaseModel):
    data: List[HuntResponse]
    pagination: Pagination
