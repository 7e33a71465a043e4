from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from hunting_engine.constants.methodology import FIRST_STEP, LAST_STEP, STEP_COUNT


class StepModel(BaseModel):
    """One entry of an account's 10-step track: canonical name + free-text note."""
    model_config = ConfigDict(str_strip_whitespace=True)

    step: int = Field(..., ge=FIRST_STEP, le=LAST_STEP)
    name: str = Field(..., min_length=1)
    note: str = Field(..., min_length=1)


class IdeaModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = ""
    description: str = ""


class AccountModel(BaseModel):
    """
    Candidate business entity scored within a hunt.

    Embedded in (and owned by) HuntDoc; there is no standalone collection.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    markets: List[str] = Field(default_factory=list)
    segment: str = ""
    score: int = Field(default=0, ge=0, le=100)
    currentStep: int = Field(default=FIRST_STEP, ge=FIRST_STEP, le=LAST_STEP)
    rationale: str = ""
    ideas: List[IdeaModel] = Field(default_factory=list)
    stage: str = "Prospect"
    steps: List[StepModel] = Field(..., min_length=STEP_COUNT, max_length=STEP_COUNT)
