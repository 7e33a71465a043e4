"""Playbook response schemas."""
from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from hunting_engine.models.mongo.playbooks.docs.playbooks import PlaybookDoc


class PlaybookResponse(BaseModel):
    id: str = Field(..., description="Playbook identifier")
    subChannel: str
    version: int = Field(..., description="Starts at 1, +1 on every regeneration")
    contentMd: str = Field(..., description="Markdown body")
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_doc(cls, doc: PlaybookDoc) -> "PlaybookResponse":
        return cls(
            id=str(doc.id),
            subChannel=doc.subChannel,
            version=doc.version,
            contentMd=doc.contentMd,
            createdAt=doc.createdAt,
            updatedAt=doc.updatedAt,
        )


class PlaybookListResponse(BaseModel):
    data: List[PlaybookResponse]
    total: int
