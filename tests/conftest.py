"""
Shared fixtures: fake collaborators and in-memory stand-ins for Beanie documents.

Nothing here talks to MongoDB, OpenAI or Tavily.
"""
import json
from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.hunts.embedded.hunt_result import HuntResultModel
from hunting_engine.services.hunting.coercion import build_steps


class RecordingDiscoveryBackend:
    """Discovery backend returning canned names per market and recording calls."""

    name = "recording"

    def __init__(self, names_by_market: Dict[str, List[str]], failing_markets: Optional[set] = None):
        self.names_by_market = names_by_market
        self.failing_markets = failing_markets or set()
        self.calls: List[tuple] = []

    async def search(self, query: str, market: str) -> List[str]:
        self.calls.append((query, market))
        if market in self.failing_markets:
            raise ConnectionError(f"search backend down for {market}")
        return list(self.names_by_market.get(market, []))


def make_synthesis(*responses: str, side_effect: Optional[BaseException] = None) -> MagicMock:
    """Synthesis collaborator whose complete() returns the given texts in order."""
    synthesis = MagicMock()
    if side_effect is not None:
        synthesis.complete = AsyncMock(side_effect=side_effect)
    else:
        synthesis.complete = AsyncMock(side_effect=list(responses))
    return synthesis


def make_account(name: str, score: int, **overrides: Any) -> AccountModel:
    fields: Dict[str, Any] = {
        "name": name,
        "markets": ["US"],
        "segment": "QSR chain",
        "score": score,
        "currentStep": 1,
        "rationale": f"{name} rationale",
        "ideas": [{"title": f"{name} idea", "description": "desc"}],
        "stage": "Prospect",
        "steps": build_steps(),
    }
    fields.update(overrides)
    return AccountModel(**fields)


def make_hunt(
    sub_channel: str = "QSR",
    accounts: Optional[List[AccountModel]] = None,
    created_at: Optional[datetime] = None,
    hunt_id: str = "65f000000000000000000001",
    **overrides: Any,
) -> SimpleNamespace:
    """Attribute-compatible stand-in for a stored HuntDoc."""
    accounts = accounts if accounts is not None else []
    fields: Dict[str, Any] = {
        "id": hunt_id,
        "subChannel": sub_channel,
        "markets": ["US", "UK"],
        "focusBrands": ["Pepsi"],
        "maxAccounts": 10,
        "accounts": accounts,
        "huntResult": HuntResultModel(summary="Hunt completed", totalAccounts=len(accounts)),
        "createdAt": created_at or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class _FieldExpr:
    def __init__(self, field: str):
        self.field = field

    def __eq__(self, other):  # mimics Beanie's `Doc.field == value` query expression
        return (self.field, other)

    __hash__ = object.__hash__


class FakePlaybookDoc:
    """In-memory PlaybookDoc keyed by subChannel (find_one / insert / save)."""

    store: Dict[str, "FakePlaybookDoc"] = {}
    subChannel = _FieldExpr("subChannel")
    _next_id = 1

    def __init__(self, subChannel: str, version: int = 1, contentMd: str = ""):
        now = datetime.now(timezone.utc)
        self.id = None
        self.subChannel = subChannel
        self.version = version
        self.contentMd = contentMd
        self.createdAt = now
        self.updatedAt = now
        self.save_count = 0

    @classmethod
    async def find_one(cls, expr):
        _, sub_channel = expr
        return cls.store.get(sub_channel)

    async def insert(self):
        cls = type(self)
        self.id = f"pb{cls._next_id}"
        cls._next_id += 1
        cls.store[self.subChannel] = self

    async def save(self):
        self.save_count += 1
        type(self).store[self.subChannel] = self


@pytest.fixture
def fake_playbook_doc(monkeypatch):
    from hunting_engine.services.mongo import playbooks_repo

    FakePlaybookDoc.store = {}
    FakePlaybookDoc._next_id = 1
    monkeypatch.setattr(playbooks_repo, "PlaybookDoc", FakePlaybookDoc)
    return FakePlaybookDoc


@pytest.fixture
def hunt_response_payload() -> Dict[str, Any]:
    return {
        "huntResult": {"summary": "Strong QSR pipeline in US and UK", "totalAccounts": 99},
        "accounts": [
            {
                "name": "Burger Co",
                "markets": ["US", "UK"],
                "segment": "Burger QSR",
                "score": 150,
                "currentStep": 3,
                "rationale": "Large multi-market footprint",
                "ideas": [{"title": "Combo meal upsell", "description": "Bundle beverages"}],
                "stage": "Qualified",
                "steps": [
                    {"step": 2, "name": "whatever", "note": "Scanned 40 operators"},
                    {"step": 1, "name": "Define", "note": "Burger QSR, lunch occasion"},
                ],
            },
            {
                "name": "Pizza Place",
                "score": -5,
                "currentStep": 42,
            },
            {},
        ],
    }


@pytest.fixture
def hunt_response_text(hunt_response_payload) -> str:
    return "Here is the hunt:\n```json\n" + json.dumps(hunt_response_payload) + "\n```\n"
