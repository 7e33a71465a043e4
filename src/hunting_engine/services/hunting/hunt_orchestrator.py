"""
Hunt orchestration: discovery -> synthesis -> parse -> coerce.

    1. Entity discovery once per market (sequential), merged into a
       deduplicated candidate list capped at 2 x maxAccounts.
    2. One synthesis call with the methodology system prompt and the
       candidate list (4000 output tokens).
    3. JSON extraction (fenced ```json block or raw text); unparsable output
       aborts the hunt with HuntingServiceError.
    4. Every account is coerced and gets the canonical 10-step track.
    5. totalAccounts is the coerced account count, never the model's figure.

Persistence is the caller's job (see `create_and_save_hunt`).
"""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from hunting_engine.common.logging_utils import get_logger, truncate_for_log
from hunting_engine.errors import HuntingServiceError
from hunting_engine.infrastructure.llm.base_models import DEFAULT_MAX_OUTPUT_TOKENS
from hunting_engine.models.mongo.hunts.docs.hunts import HuntDoc
from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.hunts.embedded.hunt_result import HuntResultModel
from hunting_engine.prompts.hunting_prompts import (
    build_hunting_system_prompt,
    build_hunting_user_prompt,
)
from hunting_engine.services.discovery.entity_discovery import DiscoveryResult, EntityDiscovery
from hunting_engine.services.hunting.coercion import coerce_account, extract_json_payload
from hunting_engine.services.mongo.hunts_repo import create_hunt
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient
from hunting_engine.structured_outputs.hunt_outputs import RawHuntResponse
from hunting_engine.utils.dedupe import dedupe_keep_order, take
from hunting_engine.validation.params import HuntParams

logger = get_logger(__name__)

DEFAULT_HUNT_SUMMARY = "Hunt completed"
CANDIDATES_PER_ACCOUNT = 2


class HuntRunResult(BaseModel):
    huntResult: HuntResultModel
    accounts: List[AccountModel] = Field(default_factory=list)


def merge_candidates(results: Dict[str, DiscoveryResult], max_accounts: int) -> List[str]:
    """Union of every market's entities, deduplicated, at most 2 x max_accounts names."""
    merged = dedupe_keep_order(
        name for result in results.values() for name in result.entities
    )
    return take(merged, max_accounts * CANDIDATES_PER_ACCOUNT)


def build_hunt_run_result(payload: object) -> HuntRunResult:
    """Coerce a parsed synthesis payload into the validated hunt shape. Never raises."""
    raw = RawHuntResponse.from_payload(payload)
    accounts = [coerce_account(raw_account) for raw_account in raw.accounts]

    summary = raw.huntResult.summary if raw.huntResult else None
    if not isinstance(summary, str) or not summary.strip():
        summary = DEFAULT_HUNT_SUMMARY

    return HuntRunResult(
        huntResult=HuntResultModel(summary=summary.strip(), totalAccounts=len(accounts)),
        accounts=accounts,
    )


async def run_hunt(
    params: HuntParams,
    discovery: Optional[EntityDiscovery] = None,
    synthesis: Optional[SynthesisClient] = None,
) -> HuntRunResult:
    """
    Run the 10-step hunting model for validated hunt parameters.

    Raises:
        ExternalServiceError: the synthesis call failed.
        HuntingServiceError: the synthesis response was not parsable JSON.
    """
    discovery = discovery or EntityDiscovery()
    synthesis = synthesis or SynthesisClient()

    logger.info(
        "[hunting] Scanning universe for %r in markets: %s",
        params.subChannel,
        ", ".join(params.markets),
    )
    discovery_results = await discovery.discover_across_markets(params.subChannel, params.markets)
    candidates = merge_candidates(discovery_results, params.maxAccounts)
    logger.info("[hunting] %d candidate entities after merge", len(candidates))

    user_prompt = build_hunting_user_prompt(
        sub_channel=params.subChannel,
        markets=params.markets,
        focus_brands=params.focusBrands,
        max_accounts=params.maxAccounts,
        candidates=candidates,
    )

    logger.info("[hunting] Calling synthesis model...")
    raw_text = await synthesis.complete(
        build_hunting_system_prompt(),
        user_prompt,
        max_output_tokens=DEFAULT_MAX_OUTPUT_TOKENS,
    )

    logger.info("[hunting] Parsing synthesis response...")
    try:
        payload = extract_json_payload(raw_text)
    except HuntingServiceError:
        logger.error(
            "[hunting] Unparsable synthesis response: %s",
            truncate_for_log(raw_text),
        )
        raise

    result = build_hunt_run_result(payload)
    logger.info(
        "[hunting] Hunt completed: %d accounts identified",
        result.huntResult.totalAccounts,
    )
    return result


async def create_and_save_hunt(
    params: HuntParams,
    discovery: Optional[EntityDiscovery] = None,
    synthesis: Optional[SynthesisClient] = None,
) -> HuntDoc:
    """Run a hunt and persist it. Nothing is written when the run fails."""
    result = await run_hunt(params, discovery=discovery, synthesis=synthesis)
    doc = await create_hunt(
        sub_channel=params.subChannel,
        markets=params.markets,
        focus_brands=params.focusBrands,
        max_accounts=params.maxAccounts,
        accounts=result.accounts,
        hunt_result=result.huntResult,
    )
    logger.info("[hunting] Saved hunt %s for %r", doc.id, params.subChannel)
    return doc
