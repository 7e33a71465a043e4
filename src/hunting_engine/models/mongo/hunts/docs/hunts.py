from __future__ import annotations

from datetime import datetime
from typing import Annotated, List

import pymongo
from beanie import Document, Indexed
from pydantic import Field

from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.hunts.embedded.hunt_result import HuntResultModel
from hunting_engine.utils.datetime_helpers import utc_now


class HuntDoc(Document):
    """
    One run of the 10-step hunting model for a sub-channel / markets / brands combination.
    """
    subChannel: Annotated[str, Indexed()]  # NOT unique; many hunts per sub-channel
    markets: List[str]
    focusBrands: List[str]
    maxAccounts: int = 10

    accounts: List[AccountModel] = Field(default_factory=list)
    huntResult: HuntResultModel

    createdAt: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "hunts"
        indexes = [
            [("subChannel", pymongo.ASCENDING), ("createdAt", pymongo.DESCENDING)],
            [("createdAt", pymongo.DESCENDING)],
        ]
