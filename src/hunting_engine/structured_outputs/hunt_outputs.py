"""
Raw shapes of the hunt synthesis response.

The model's JSON is untrusted: every field is optional and untyped here and
extra keys are kept. Conversion into the validated AccountModel happens in
`hunting_engine.services.hunting.coercion`, never by direct deserialization.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RawAccount(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Any = None
    markets: Any = None
    segment: Any = None
    score: Any = None
    currentStep: Any = None
    rationale: Any = None
    ideas: Any = None
    stage: Any = None
    steps: Any = None


class RawHuntResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    summary: Any = None
    totalAccounts: Any = None


class RawHuntResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    huntResult: Optional[RawHuntResult] = None
    accounts: List[RawAccount] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "RawHuntResponse":
        """
        Build from parsed JSON of any shape. Never raises.

        - object: `huntResult` / `accounts` keys, anything malformed is ignored
        - array: treated as the accounts list
        - anything else: no accounts
        """
        if isinstance(payload, list):
            return cls(accounts=_raw_accounts(payload))
        if not isinstance(payload, dict):
            return cls()

        hunt_result = payload.get("huntResult")
        return cls(
            huntResult=RawHuntResult.model_validate(hunt_result) if isinstance(hunt_result, dict) else None,
            accounts=_raw_accounts(payload.get("accounts")),
        )


def _raw_accounts(items: Any) -> List[RawAccount]:
    if not isinstance(items, list):
        return []
    return [RawAccount.model_validate(item) for item in items if isinstance(item, dict)]
