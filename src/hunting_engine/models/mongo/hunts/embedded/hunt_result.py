from __future__ import annotations

from pydantic import BaseModel, Field


class HuntResultModel(BaseModel):
    """
    Summary computed once when the hunt is created.

    totalAccounts is the coerced account count at creation time; it is not
    recomputed if the embedded accounts change later.
    """
    summary: str
    totalAccounts: int = Field(..., ge=0)
