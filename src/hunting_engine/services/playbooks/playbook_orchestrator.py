"""
Playbook synthesis for a sub-channel.

Loads the 10 most recent hunts, summarizes each hunt's top 5 accounts by
score, asks the synthesis model for a markdown playbook and upserts it
(version 1 on first generation, +1 on every regeneration). No playbook is
written unless synthesis returned content.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from hunting_engine.common.logging_utils import get_logger
from hunting_engine.errors import NoHuntsFoundError, PlaybookGenerationError
from hunting_engine.infrastructure.llm.base_models import DEFAULT_MAX_OUTPUT_TOKENS
from hunting_engine.models.mongo.hunts.docs.hunts import HuntDoc
from hunting_engine.models.mongo.hunts.embedded.accounts import AccountModel
from hunting_engine.models.mongo.playbooks.docs.playbooks import PlaybookDoc
from hunting_engine.prompts.playbook_prompts import (
    ACCOUNT_SUMMARY_TEMPLATE,
    HUNT_SEPARATOR,
    HUNT_SUMMARY_TEMPLATE,
    build_playbook_system_prompt,
    build_playbook_user_prompt,
)
from hunting_engine.services.mongo.hunts_repo import get_recent_hunts_for_sub_channel
from hunting_engine.services.mongo.playbooks_repo import upsert_playbook
from hunting_engine.services.synthesis.synthesis_client import SynthesisClient
from hunting_engine.utils.datetime_helpers import format_hunt_date

logger = get_logger(__name__)

RECENT_HUNTS_LIMIT = 10
TOP_ACCOUNTS_PER_HUNT = 5


def top_accounts(accounts: Sequence[AccountModel], limit: int = TOP_ACCOUNTS_PER_HUNT) -> List[AccountModel]:
    # sorted() is stable, ties keep their stored order
    return sorted(accounts, key=lambda account: account.score, reverse=True)[:limit]


def render_account_summary(account: AccountModel) -> str:
    return ACCOUNT_SUMMARY_TEMPLATE.format(
        name=account.name,
        score=account.score,
        markets=", ".join(account.markets),
        segment=account.segment,
        stage=account.stage,
        rationale=account.rationale,
        ideas=", ".join(idea.title for idea in account.ideas),
        current_step=account.currentStep,
    )


def render_hunt_summary(hunt: HuntDoc) -> str:
    accounts = "\n\n".join(render_account_summary(a) for a in top_accounts(hunt.accounts))
    return HUNT_SUMMARY_TEMPLATE.format(
        created=format_hunt_date(hunt.createdAt),
        markets=", ".join(hunt.markets),
        focus_brands=", ".join(hunt.focusBrands),
        accounts=accounts or "(no accounts)",
    )


def render_hunt_summaries(hunts: Sequence[HuntDoc]) -> str:
    return HUNT_SEPARATOR.join(render_hunt_summary(hunt) for hunt in hunts)


async def regenerate_playbook(
    sub_channel: str,
    synthesis: Optional[SynthesisClient] = None,
) -> PlaybookDoc:
    """
    Synthesize and persist the playbook for a sub-channel.

    Raises:
        NoHuntsFoundError: the sub-channel has no hunts (nothing is persisted).
        ExternalServiceError: the synthesis call failed or returned no content.
    """
    synthesis = synthesis or SynthesisClient()
    logger.info("[playbook] Generating playbook for sub-channel: %r", sub_channel)

    hunts = await get_recent_hunts_for_sub_channel(sub_channel, limit=RECENT_HUNTS_LIMIT)
    if not hunts:
        raise NoHuntsFoundError(sub_channel)

    user_prompt = build_playbook_user_prompt(sub_channel, render_hunt_summaries(hunts))

    logger.info("[playbook] Calling synthesis model with %d hunts...", len(hunts))
    content = await synthesis.complete(
        build_playbook_system_prompt(),
        user_prompt,
        max_output_tokens=DEFAULT_MAX_OUTPUT_TOKENS,
    )
    if not content or not content.strip():
        raise PlaybookGenerationError(
            f"Playbook generation failed: empty synthesis response for {sub_channel!r}"
        )

    doc = await upsert_playbook(sub_channel, content)
    if doc.version == 1:
        logger.info("[playbook] Created new playbook v1 for %r", sub_channel)
    else:
        logger.info("[playbook] Updated playbook v%d for %r", doc.version, sub_channel)
    return doc


async def generate_playbook(
    sub_channel: str,
    synthesis: Optional[SynthesisClient] = None,
) -> str:
    """Generate (or regenerate) the sub-channel playbook and return its markdown."""
    doc = await regenerate_playbook(sub_channel, synthesis=synthesis)
    return doc.contentMd
