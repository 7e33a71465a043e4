from __future__ import annotations

from typing import Sequence

from hunting_engine.constants.methodology import render_methodology


HUNTING_SYSTEM_PROMPT = """
You are an expert business development strategist for PepsiCo's AFH (Away From Home) division.

Your task is to apply the 10-step hunting model to identify and qualify potential business opportunities:

{methodology}

For each account, provide:
- Name
- Markets served
- Segment classification
- Score (0-100) based on opportunity size, multi-market reach, AFH relevance, and ease to pilot
- Current step (1-10, typically starting at 1)
- Rationale for the score
- 1-2 platform ideas
- Stage (Prospect, Qualified, In Discussion, Pilot, etc.)
- For each of the 10 steps, provide a short note (1-2 sentences max)

Return ONLY valid JSON with no markdown formatting.
""".strip()


HUNTING_USER_PROMPT = """
Apply the 10-step hunting model for the following opportunity:

Sub-Channel: {sub_channel}
Markets: {markets}
Focus Brands: {focus_brands}
Max Accounts to Identify: {max_accounts}

Potential Companies Found (from market scan):
{candidate_list}

Please analyze these companies and any others you think are relevant. For each of the top {max_accounts} opportunities:
1. Provide all required fields (name, markets, segment, score, currentStep, rationale, ideas, stage)
2. For each of the 10 steps, provide a short note

Return a JSON object with this structure:
{{
  "huntResult": {{
    "summary": "Brief summary of hunting findings",
    "totalAccounts": number
  }},
  "accounts": [
    {{
      "name": "Company Name",
      "markets": ["market1", "market2"],
      "segment": "segment type",
      "score": 85,
      "currentStep": 1,
      "rationale": "Why this company scores well",
      "ideas": [
        {{"title": "Idea 1", "description": "Description"}}
      ],
      "stage": "Prospect",
      "steps": [
        {{"step": 1, "name": "Define Opportunity", "note": "Short note"}},
        ...
      ]
    }}
  ]
}}
""".strip()


NO_CANDIDATES_LINE = "(none found - propose relevant companies yourself)"


def render_candidate_list(candidates: Sequence[str]) -> str:
    if not candidates:
        return NO_CANDIDATES_LINE
    return "\n".join(f"{i}. {name}" for i, name in enumerate(candidates, start=1))


def build_hunting_system_prompt() -> str:
    return HUNTING_SYSTEM_PROMPT.format(methodology=render_methodology())


def build_hunting_user_prompt(
    sub_channel: str,
    markets: Sequence[str],
    focus_brands: Sequence[str],
    max_accounts: int,
    candidates: Sequence[str],
) -> str:
    return HUNTING_USER_PROMPT.format(
        sub_channel=sub_channel,
        markets=", ".join(markets),
        focus_brands=", ".join(focus_brands),
        max_accounts=max_accounts,
        candidate_list=render_candidate_list(candidates),
    )
