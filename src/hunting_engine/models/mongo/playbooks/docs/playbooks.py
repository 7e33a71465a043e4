from __future__ import annotations

from datetime import datetime
from typing import Annotated

import pymongo
from beanie import Document, Indexed
from pydantic import Field

from hunting_engine.utils.datetime_helpers import utc_now


class PlaybookDoc(Document):
    """
    Current synthesized playbook for a sub-channel.

    At most one record per sub-channel; regeneration bumps `version` and
    replaces `contentMd` in place.
    """
    subChannel: Annotated[str, Indexed(unique=True)]
    version: int = Field(default=1, ge=1)
    contentMd: str

    createdAt: datetime = Field(default_factory=utc_now)
    updatedAt: datetime = Field(default_factory=utc_now)

    class Settings:
        name = "playbooks"
        indexes = [
            [("updatedAt", pymongo.DESCENDING)],
        ]
